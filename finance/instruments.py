# finance/instruments.py
from __future__ import annotations
from enum import Enum

class InstrumentType(str, Enum):
    CDB = "CDB"            # tributado pela tabela regressiva
    LCI_LCA = "LCI/LCA"    # isento de IR para PF

    @property
    def isento(self) -> bool:
        return self is InstrumentType.LCI_LCA

    @classmethod
    def from_label(cls, label: str) -> "InstrumentType":
        """Aceita também o rótulo antigo "LCI" gravado pelas primeiras versões."""
        if label == "LCI":
            return cls.LCI_LCA
        return cls(label)

class RateBasis(str, Enum):
    PREFIXADO = "prefixado"     # taxa absoluta, % a.a.
    POS_FIXADO = "pos_fixado"   # % do CDI
