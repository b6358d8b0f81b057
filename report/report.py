# report/report.py
from __future__ import annotations
import csv, os
from datetime import datetime
from typing import List, Dict
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader

from .formatting import formatar_brl, formatar_pct, formatar_data

def salvar_csv(csv_path: str, series: List[Dict]) -> None:
    """Saldo bruto mês a mês de cada investimento (prazos diferentes ficam em branco)."""
    max_len = max(len(s["evolucao"]) for s in series)
    header = ["Mes"] + [f"{s['nome']} (bruto)" for s in series]
    rows = []
    for mes in range(max_len):
        row = [mes]
        for s in series:
            row.append(round(s["evolucao"][mes], 2) if mes < len(s["evolucao"]) else "")
        rows.append(row)
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter=";")
        w.writerow(header); w.writerows(rows)

def grafico_png(png_path: str, series: List[Dict]) -> None:
    plt.figure()
    for s in series:
        plt.plot(s["evolucao"], label=f"{s['nome']} ({s['tipo']})")
    plt.title("Evolução (mês a mês) – valores brutos antes do IR")
    plt.xlabel("Meses"); plt.ylabel("Saldo (R$)")
    plt.legend(); plt.tight_layout(); plt.savefig(png_path, dpi=150); plt.close()

def html_relatorio(html_path: str, cdi_aa: float, series: List[Dict], png_path: str, csv_path: str) -> None:
    linhas = "".join([
        f"<tr><td>{s['nome']}</td><td>{s['tipo']}</td><td>{s['taxa']}</td>"
        f"<td>{formatar_data(s['vencimento'])}</td><td>{s['prazo_meses']}</td>"
        f"<td>{formatar_pct(s['aliquota_ir'], 1)}</td><td>{formatar_brl(s['valor_inicial'])}</td>"
        f"<td>{formatar_brl(s['rend_bruto'])}</td><td>{formatar_brl(s['rend_liquido'])}</td>"
        f"<td>{formatar_brl(s['vf_bruto'])}</td><td><b>{formatar_brl(s['vf_liquido'])}</b></td></tr>"
        for s in series
    ])
    html = f"""<!doctype html>
<html lang="pt-br"><head><meta charset="utf-8">
<title>Relatório – Comparador de Renda Fixa</title>
<style>
body{{font-family:Arial,Helvetica,sans-serif;margin:2rem}}
h1,h2{{margin:.3rem 0}} small{{color:#555}}
table{{border-collapse:collapse;width:100%;margin:1rem 0}}
th,td{{border:1px solid #ddd;padding:8px;text-align:right}}
th{{background:#f2f2f2}} td:first-child,th:first-child{{text-align:left}}
blockquote{{background:#fafafa;border-left:4px solid #ccc;padding:.5rem 1rem}}
</style></head><body>
<h1>Relatório – Comparador de Renda Fixa</h1>
<small>Gerado em {datetime.now().strftime("%d/%m/%Y %H:%M:%S")}</small>

<h2>Taxa de referência</h2>
<table>
<tr><th>CDI (a.a.)</th><td>{formatar_pct(cdi_aa)}</td></tr>
</table>

<h2>Resultados no vencimento</h2>
<table>
<tr><th>Investimento</th><th>Tipo</th><th>Taxa</th><th>Vencimento</th><th>Meses</th><th>IR</th>
<th>Valor inicial</th><th>Rend. bruto</th><th>Rend. líquido</th><th>Valor bruto</th><th>Valor líquido</th></tr>
{linhas}
</table>

<h2>Gráfico (bruto)</h2>
<img src="{os.path.basename(png_path)}" alt="Gráfico" style="max-width:100%;height:auto"/>

<h2>CSV</h2>
<p><a href="{os.path.basename(csv_path)}">{os.path.basename(csv_path)}</a></p>

<blockquote><b>Notas:</b><br>
1) Taxa anual convertida para mensal equivalente: (1 + taxa)^(1/12) - 1.<br>
2) IR regressivo sobre o rendimento no vencimento: até 6 meses 22,5%; até 12 meses 20%; até 24 meses 17,5%; acima 15%.<br>
3) LCI/LCA isentas de IR para pessoa física.</blockquote>
</body></html>"""
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(html)

def pdf_relatorio(pdf_path: str, cdi_aa: float, series: List[Dict], png_path: str) -> None:
    """
    Gera PDF simples com a tabela comparativa e o gráfico.
    """
    c = canvas.Canvas(pdf_path, pagesize=A4)
    w, h = A4
    x, y = 2*cm, h - 2*cm

    def draw_line(txt: str, dy=0.6*cm, bold=False):
        nonlocal y
        y -= dy
        if bold:
            c.setFont("Helvetica-Bold", 11)
        else:
            c.setFont("Helvetica", 10)
        c.drawString(x, y, txt)

    c.setFont("Helvetica-Bold", 14)
    c.drawString(x, y, "Relatório – Comparador de Renda Fixa")
    c.setFont("Helvetica", 9)
    c.drawRightString(w-2*cm, y, datetime.now().strftime("%d/%m/%Y %H:%M:%S"))

    draw_line(f"CDI de referência: {formatar_pct(cdi_aa)} a.a.", dy=1.0*cm)

    draw_line("Resultados no vencimento:", dy=0.8*cm, bold=True)
    c.setFont("Helvetica-Bold", 9)
    y -= 0.5*cm
    c.drawString(x, y, "Investimento")
    c.drawRightString(x+7.5*cm, y, "Meses")
    c.drawRightString(x+9.5*cm, y, "IR")
    c.drawRightString(x+13.5*cm, y, "Valor Bruto")
    c.drawRightString(w-2*cm, y, "Valor Líquido")

    c.setFont("Helvetica", 9)
    for s in series:
        y -= 0.5*cm
        if y < 6*cm:
            c.showPage()
            c.setFont("Helvetica", 9)
            y = h - 2*cm
        c.drawString(x, y, f"{s['nome']} ({s['tipo']})")
        c.drawRightString(x+7.5*cm, y, str(s["prazo_meses"]))
        c.drawRightString(x+9.5*cm, y, formatar_pct(s["aliquota_ir"], 1))
        c.drawRightString(x+13.5*cm, y, formatar_brl(s["vf_bruto"]))
        c.drawRightString(w-2*cm, y, formatar_brl(s["vf_liquido"]))

    if os.path.exists(png_path):
        c.showPage()
        c.setFont("Helvetica-Bold", 12)
        c.drawString(2*cm, h - 2*cm, "Gráfico – Evolução (bruto)")
        img = ImageReader(png_path)
        img_w = 17*cm
        c.drawImage(img, 2*cm, h - 2*cm - 12*cm, width=img_w, height=12*cm, preserveAspectRatio=True, anchor='n')

    c.save()

def gerar_relatorio(outdir: str, cdi_aa: float, series: List[Dict]) -> Dict[str, str]:
    """Gera CSV + PNG + HTML + PDF em `outdir` e devolve os caminhos."""
    os.makedirs(outdir, exist_ok=True)
    base = datetime.now().strftime("%Y%m%d_%H%M%S")
    paths = {
        "csv": os.path.join(outdir, f"evolucao_{base}.csv"),
        "png": os.path.join(outdir, f"grafico_{base}.png"),
        "html": os.path.join(outdir, f"relatorio_{base}.html"),
        "pdf": os.path.join(outdir, f"relatorio_{base}.pdf"),
    }
    salvar_csv(paths["csv"], series)
    grafico_png(paths["png"], series)
    html_relatorio(paths["html"], cdi_aa, series, paths["png"], paths["csv"])
    pdf_relatorio(paths["pdf"], cdi_aa, series, paths["png"])
    return paths
