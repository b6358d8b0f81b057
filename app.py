# app.py
from __future__ import annotations
import os, tempfile
from datetime import date

import pandas as pd
import matplotlib.pyplot as plt
import streamlit as st

# Módulos do projeto
from config import get_settings, setup_logging
from finance.instruments import InstrumentType, RateBasis
from finance.products import new_investment, um_ano_depois
from finance.validation import collect_errors, validate_reference_rate, InvestmentValidationError
from report.formatting import formatar_brl, formatar_data, formatar_pct
from report.report import gerar_relatorio
from services.storage import JsonFileStore
from simulate import comparar_investimentos

st.set_page_config(page_title="Comparador de Renda Fixa", layout="wide")

settings = get_settings()
setup_logging(settings)
store = JsonFileStore(settings.data_path, cdi_padrao=settings.cdi_padrao)

# ===================== helpers =====================
def df_resultados(series: list[dict]) -> pd.DataFrame:
    rows = []
    for s in series:
        rows.append({
            "Investimento": s["nome"],
            "Tipo": s["tipo"],
            "Taxa": s["taxa"],
            "Vencimento": formatar_data(s["vencimento"]),
            "Meses": s["prazo_meses"],
            "IR (%)": s["aliquota_ir"],
            "Valor inicial (R$)": s["valor_inicial"],
            "Rend. bruto (R$)": s["rend_bruto"],
            "Rend. líquido (R$)": s["rend_liquido"],
            "Valor líquido (R$)": s["vf_liquido"],
        })
    return pd.DataFrame(rows)

def fig_evolucao(series: list[dict]):
    plt.figure()
    for s in series:
        plt.plot(s["evolucao"], label=f"{s['nome']} ({s['tipo']})")
    plt.title("Evolução (mês a mês) – valores brutos antes do IR")
    plt.xlabel("Meses"); plt.ylabel("Saldo (R$)")
    plt.legend(); plt.tight_layout()
    return plt.gcf()

# ===================== layout geral =====================
st.title("📈 Comparador de Renda Fixa")
st.caption("CDB x LCI/LCA – juros compostos, IR regressivo e isenção.")

snap = store.load()

with st.sidebar:
    st.header("⚙️ Taxa de referência")
    novo_cdi = st.number_input("CDI (% a.a.)", min_value=0.01, value=float(snap.reference_rate), step=0.05, format="%.2f")
    if novo_cdi != snap.reference_rate:
        try:
            snap.reference_rate = validate_reference_rate(novo_cdi)
            store.save(snap)
        except InvestmentValidationError as e:
            st.error(str(e))

tabs = st.tabs(["💰 Comparação", "➕ Adicionar", "📑 Relatórios"])

# ===================== Tab 1: Comparação =====================
with tabs[0]:
    if not snap.investments:
        st.info("Nenhum investimento cadastrado.")
    else:
        series = comparar_investimentos(snap.investments, snap.reference_rate)
        cols = st.columns(3)
        for k, s in enumerate(series):
            with cols[k % 3]:
                with st.container(border=True):
                    st.markdown(f"**{s['nome']}** `{s['tipo']}`")
                    st.write(f"Valor inicial: {formatar_brl(s['valor_inicial'])}")
                    st.write(f"Vencimento: {formatar_data(s['vencimento'])} ({s['prazo_meses']} meses)")
                    st.write(f"Taxa: {s['taxa']} · IR: {formatar_pct(s['aliquota_ir'], 1)}")
                    c1, c2 = st.columns(2)
                    c1.metric("Rend. bruto", formatar_brl(s["rend_bruto"]))
                    c2.metric("Rend. líquido", formatar_brl(s["rend_liquido"]))
                    c1.metric("Valor bruto", formatar_brl(s["vf_bruto"]))
                    c2.metric("Valor líquido", formatar_brl(s["vf_liquido"]))
                    if st.button("Remover", key=f"rm_{s['id']}"):
                        snap.investments = [i for i in snap.investments if i.id != s["id"]]
                        store.save(snap)
                        st.rerun()

        st.dataframe(df_resultados(series), use_container_width=True)
        st.pyplot(fig_evolucao(series))

# ===================== Tab 2: Adicionar =====================
with tabs[1]:
    st.subheader("Adicionar novo investimento")
    hoje = date.today()
    with st.form("add_form"):
        c1, c2 = st.columns(2)
        nome = c1.text_input("Nome do investimento", placeholder="ex: CDB Banco XYZ")
        tipo = c2.radio("Tipo de investimento", [t.value for t in InstrumentType], horizontal=True)

        c3, c4 = st.columns(2)
        valor = c3.number_input("Valor inicial (R$)", value=10000.0, step=100.0)
        modalidade = c4.radio("Modalidade de rendimento", ["Pós-fixado (CDI)", "Prefixado"], horizontal=True)
        pos = modalidade.startswith("Pós")

        c5, c6, c7 = st.columns(3)
        taxa = c5.number_input("Taxa (% do CDI ou % ao ano)", min_value=0.0,
                               value=100.0 if pos else float(snap.reference_rate), step=0.5)
        compra = c6.date_input("Data de aplicação", value=hoje, format="DD/MM/YYYY")
        vencimento = c7.date_input("Data de vencimento", value=um_ano_depois(hoje), format="DD/MM/YYYY")
        st.caption("IR: até 6 meses 22,5% · até 12 meses 20% · até 24 meses 17,5% · acima de 24 meses 15%")

        submitted = st.form_submit_button("Adicionar investimento")
    if submitted:
        inv = new_investment(
            compra, nome, InstrumentType(tipo), taxa,
            RateBasis.POS_FIXADO if pos else RateBasis.PREFIXADO,
            valor, vencimento,
        )
        erros = collect_errors(inv)
        if not nome.strip():
            st.error("Informe o nome do investimento")
        elif erros:
            for e in erros:
                st.error(str(e))
        else:
            snap.investments.append(inv)
            store.save(snap)
            st.success(f"Adicionado – IR calculado: {formatar_pct(inv.tax_rate_percent, 1)}")

# ===================== Tab 3: Relatórios =====================
with tabs[2]:
    st.subheader("Gerar Relatório (HTML + CSV + PNG + PDF)")
    if snap.investments and st.button("Gerar e baixar arquivos"):
        series = comparar_investimentos(snap.investments, snap.reference_rate)
        with tempfile.TemporaryDirectory() as tmp:
            paths = gerar_relatorio(tmp, snap.reference_rate, series)
            arquivos = {k: (os.path.basename(p), open(p, "rb").read()) for k, p in paths.items()}

        st.success("Relatórios gerados!")
        mimes = {"csv": "text/csv", "png": "image/png", "html": "text/html", "pdf": "application/pdf"}
        for col, (k, (nome_arq, dados)) in zip(st.columns(4), arquivos.items()):
            col.download_button(f"⬇️ {k.upper()}", data=dados, file_name=nome_arq, mime=mimes[k])
