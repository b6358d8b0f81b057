import os, tempfile
from datetime import date

from finance.instruments import InstrumentType
from finance.products import carteira_padrao, new_investment
from report.report import gerar_relatorio, grafico_png, html_relatorio, pdf_relatorio, salvar_csv
from simulate import comparar_investimentos

HOJE = date(2025, 3, 10)

def _series():
    invs = carteira_padrao(HOJE) + [
        new_investment(HOJE, "CDB longo", InstrumentType.CDB, 120.0, maturity_date=date(2028, 3, 10)),
    ]
    return comparar_investimentos(invs, 10.65)

def test_relatorios_arquivos():
    with tempfile.TemporaryDirectory() as d:
        png = os.path.join(d, "g.png")
        html = os.path.join(d, "r.html")
        pdf = os.path.join(d, "r.pdf")
        csv_path = os.path.join(d, "e.csv")
        series = _series()
        salvar_csv(csv_path, series)
        grafico_png(png, series)
        html_relatorio(html, 10.65, series, png, csv_path)
        pdf_relatorio(pdf, 10.65, series, png)
        for p in (png, html, pdf, csv_path):
            assert os.path.exists(p) and os.path.getsize(p) > 0
        with open(html, encoding="utf-8") as f:
            conteudo = f.read()
        assert "LCI Imobiliário" in conteudo and "10,65%" in conteudo

def test_csv_prazos_diferentes():
    with tempfile.TemporaryDirectory() as d:
        csv_path = os.path.join(d, "e.csv")
        series = _series()
        salvar_csv(csv_path, series)
        with open(csv_path, encoding="utf-8") as f:
            linhas = f.read().splitlines()
        # cabeçalho + meses 0..36 do prazo mais longo
        assert len(linhas) == 1 + 37
        assert linhas[0].startswith("Mes;")
        assert linhas[-1].count(";;") >= 1

def test_gerar_relatorio():
    with tempfile.TemporaryDirectory() as d:
        paths = gerar_relatorio(os.path.join(d, "saida"), 10.65, _series())
        assert set(paths) == {"csv", "png", "html", "pdf"}
        assert all(os.path.getsize(p) > 0 for p in paths.values())
