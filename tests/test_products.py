from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from finance.instruments import InstrumentType, RateBasis
from finance.products import (
    Investment, carteira_padrao, effective_annual_rate, new_investment, um_ano_depois,
)

HOJE = date(2025, 3, 10)

def _cdb(**kw):
    base = dict(name="CDB", instrument_type=InstrumentType.CDB, nominal_rate=110.0,
                rate_basis=RateBasis.POS_FIXADO, principal_amount=10000.0,
                maturity_date=date(2026, 3, 10), id="x")
    base.update(kw)
    return new_investment(HOJE, **base)

def test_aliquota_derivada_na_criacao():
    assert _cdb().tax_rate_percent == 20.0
    assert _cdb(maturity_date=date(2025, 6, 1)).tax_rate_percent == 22.5
    assert _cdb(instrument_type=InstrumentType.LCI_LCA).tax_rate_percent == 0.0

def test_investimento_imutavel():
    inv = _cdb()
    with pytest.raises(FrozenInstanceError):
        inv.nominal_rate = 120.0

def test_trocar_tipo_recalcula_aliquota():
    inv = _cdb()
    lci = inv.with_instrument_type(InstrumentType.LCI_LCA)
    assert lci.tax_rate_percent == 0.0
    assert inv.tax_rate_percent == 20.0
    assert lci.with_instrument_type(InstrumentType.CDB).tax_rate_percent == 20.0

def test_trocar_datas_recalcula_aliquota():
    inv = _cdb()
    assert inv.with_maturity_date(date(2028, 3, 10)).tax_rate_percent == 15.0
    assert inv.with_purchase_date(date(2025, 12, 1)).tax_rate_percent == 22.5

def test_trocar_modalidade_reposiciona_taxa():
    inv = _cdb()
    pre = inv.with_rate_basis(RateBasis.PREFIXADO, reference_rate=10.65)
    assert pre.rate_basis is RateBasis.PREFIXADO
    assert pre.nominal_rate == 10.65
    pos = pre.with_nominal_rate(13.0).with_rate_basis(RateBasis.POS_FIXADO, reference_rate=10.65)
    assert pos.nominal_rate == 100.0
    assert inv.with_rate_basis(RateBasis.POS_FIXADO, 10.65) is inv

def test_outras_transicoes_preservam_id():
    inv = _cdb().with_name("Outro").with_principal_amount(500.0)
    assert inv.id == "x"
    assert inv.name == "Outro"
    assert inv.principal_amount == 500.0

def test_new_investment_padroes():
    inv = new_investment(HOJE)
    assert inv.rate_basis is RateBasis.POS_FIXADO
    assert inv.nominal_rate == 100.0
    assert inv.principal_amount == 10000.0
    assert inv.maturity_date == date(2026, 3, 10)
    assert inv.duration_months == 12
    assert len(inv.id) == 7
    assert new_investment(HOJE).id != inv.id

def test_um_ano_depois_bissexto():
    assert um_ano_depois(date(2024, 2, 29)) == date(2025, 2, 28)

def test_taxa_anual_efetiva():
    assert effective_annual_rate(_cdb(), 10.65) == pytest.approx(11.715)
    pre = _cdb(rate_basis=RateBasis.PREFIXADO, nominal_rate=12.5)
    assert effective_annual_rate(pre, 10.65) == 12.5

def test_rate_label():
    assert _cdb().rate_label == "110% do CDI"
    assert _cdb(rate_basis=RateBasis.PREFIXADO, nominal_rate=12.5).rate_label == "12.5% ao ano"

def test_carteira_padrao():
    cdb, lci = carteira_padrao(HOJE)
    assert cdb.instrument_type is InstrumentType.CDB and cdb.nominal_rate == 110.0
    assert lci.instrument_type is InstrumentType.LCI_LCA and lci.nominal_rate == 95.0
    assert cdb.tax_rate_percent == 20.0 and lci.tax_rate_percent == 0.0

def test_rotulo_antigo_lci():
    assert InstrumentType.from_label("LCI") is InstrumentType.LCI_LCA
    assert InstrumentType.from_label("CDB") is InstrumentType.CDB
    with pytest.raises(ValueError):
        InstrumentType.from_label("Poupança")

def test_investment_direto_sem_aliquota_no_init():
    inv = Investment("a", "n", InstrumentType.CDB, 12.0, RateBasis.PREFIXADO, 100.0,
                     date(2020, 1, 1), date(2023, 1, 1))
    assert inv.tax_rate_percent == 15.0
