from datetime import date

import pytest

from finance.instruments import InstrumentType, RateBasis
from finance.products import new_investment
from simulate import compute_returns, comparar_investimentos, evolucao_mensal

CDI = 10.65
COMPRA = date(2024, 1, 15)

def _inv(vencimento=date(2025, 1, 15), tipo=InstrumentType.CDB, taxa=110.0,
         basis=RateBasis.POS_FIXADO, valor=10000.0, nome="X", id=None):
    return new_investment(COMPRA, nome, tipo, taxa, basis, valor, vencimento, id=id)

def test_cdb_110_cdi_doze_meses():
    r = compute_returns(_inv(), CDI)
    assert r.duration_months == 12
    assert r.annual_rate == pytest.approx(11.715)
    assert r.tax_rate == 20.0
    # 12 meses reproduzem a taxa anual: 10000 * 0.11715
    assert r.gross_return == pytest.approx(1171.50, abs=1e-6)
    assert r.net_return == pytest.approx(937.20, abs=1e-6)
    assert r.tax_amount == pytest.approx(234.30, abs=1e-6)

def test_mesmos_termos_em_lci_lca():
    r = compute_returns(_inv(tipo=InstrumentType.LCI_LCA), CDI)
    assert r.tax_rate == 0.0
    assert r.tax_amount == 0.0
    assert r.net_return == r.gross_return
    assert r.net_future_value == r.gross_future_value

def test_vinte_dias_conta_um_mes_e_22_5():
    r = compute_returns(_inv(vencimento=date(2024, 2, 4)), CDI)
    assert r.duration_months == 1
    assert r.tax_rate == 22.5

def test_vinte_e_cinco_meses_15():
    r = compute_returns(_inv(vencimento=date(2026, 2, 20)), CDI)
    assert r.duration_months == 25
    assert r.tax_rate == 15.0

def test_identidade_de_composicao_prefixado():
    r = compute_returns(_inv(basis=RateBasis.PREFIXADO, taxa=12.0), CDI)
    assert r.gross_future_value == pytest.approx(10000.0 * 1.12, rel=1e-9)

def test_funcao_pura():
    inv = _inv()
    assert compute_returns(inv, CDI) == compute_returns(inv, CDI)
    assert inv.tax_rate_percent == 20.0

def test_monotonicidade_no_prazo():
    anteriores = None
    for ano, mes in [(2024, 2), (2024, 7), (2025, 1), (2026, 1), (2030, 1)]:
        r = compute_returns(_inv(vencimento=date(ano, mes, 15)), CDI)
        assert r.gross_future_value >= 10000.0
        if anteriores is not None:
            assert r.gross_future_value > anteriores
        anteriores = r.gross_future_value

def test_liquido_igual_bruto_sse_aliquota_zero():
    for tipo in InstrumentType:
        r = compute_returns(_inv(tipo=tipo), CDI)
        assert (r.net_return == r.gross_return) == (r.tax_rate == 0)

def test_lci_com_rendimento_negativo_nao_gera_imposto():
    r = compute_returns(_inv(tipo=InstrumentType.LCI_LCA, basis=RateBasis.PREFIXADO, taxa=-5.0), CDI)
    assert r.gross_return < 0
    assert r.tax_amount == 0.0

def test_valor_zero_degenera_sem_erro():
    r = compute_returns(_inv(valor=0.0), CDI)
    assert r.gross_future_value == 0.0
    assert r.net_return == 0.0

def test_evolucao_mensal():
    ev = evolucao_mensal(_inv(), CDI)
    assert len(ev) == 13
    assert ev[-1] == pytest.approx(compute_returns(_inv(), CDI).gross_future_value)

def test_comparar_ordena_por_valor_liquido():
    cdb = _inv(nome="CDB", id="1")
    lci = _inv(nome="LCI", tipo=InstrumentType.LCI_LCA, taxa=95.0, id="2")
    series = comparar_investimentos([cdb, lci], CDI)
    # 95% do CDI isento rende mais que 110% do CDI com 20% de IR
    assert [s["id"] for s in series] == ["2", "1"]
    assert series[0]["ir_pago"] == 0.0
    assert series[1]["aliquota_ir"] == 20.0
    assert series[1]["taxa"] == "110% do CDI"
    assert len(series[1]["evolucao"]) == 13

def test_comparar_lista_vazia():
    assert comparar_investimentos([], CDI) == []
