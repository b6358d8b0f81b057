import pytest
from finance.instruments import InstrumentType
from finance.taxes import aliquota_ir_por_meses, resolve_tax_rate

@pytest.mark.parametrize("meses, esperado", [
    (1, 22.5), (6, 22.5), (7, 20.0), (12, 20.0),
    (13, 17.5), (24, 17.5), (25, 15.0), (100, 15.0),
])
def test_aliquota_ir_regressiva(meses, esperado):
    assert aliquota_ir_por_meses(meses) == esperado
    assert resolve_tax_rate(InstrumentType.CDB, meses) == esperado

@pytest.mark.parametrize("meses", [1, 6, 12, 24, 25, 360])
def test_lci_lca_isenta(meses):
    assert resolve_tax_rate(InstrumentType.LCI_LCA, meses) == 0.0
