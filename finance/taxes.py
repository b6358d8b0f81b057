# finance/taxes.py
from __future__ import annotations
from typing import Tuple

from .instruments import InstrumentType

# Tabela regressiva (Lei 11.033/2004, art. 1º) expressa em meses:
# (prazo máximo em meses, alíquota %). Constantes regulatórias, não parâmetros.
TABELA_IR_REGRESSIVA: Tuple[Tuple[int, float], ...] = (
    (6, 22.5),
    (12, 20.0),
    (24, 17.5),
)
ALIQUOTA_IR_LONGO_PRAZO = 15.0

def aliquota_ir_por_meses(meses: int) -> float:
    """
    - até 6 meses:    22,5%
    - até 12 meses:   20,0%
    - até 24 meses:   17,5%
    - acima de 24:    15,0%
    Retorna percentual (ex.: 22.5).
    """
    for limite, aliquota in TABELA_IR_REGRESSIVA:
        if meses <= limite:
            return aliquota
    return ALIQUOTA_IR_LONGO_PRAZO

def resolve_tax_rate(instrument_type: InstrumentType, duration_months: int) -> float:
    """Alíquota de IR (%) do produto. LCI/LCA é isenta para PF em qualquer prazo."""
    if instrument_type == InstrumentType.LCI_LCA:
        return 0.0
    return aliquota_ir_por_meses(duration_months)
