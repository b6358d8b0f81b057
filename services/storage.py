# services/storage.py
"""
Porta de persistência da carteira.

Toda leitura/escrita de estado passa por um InvestmentStore com dois métodos,
load() -> Snapshot e save(Snapshot). O motor de cálculo não conhece esta
camada.
"""
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from finance.instruments import InstrumentType, RateBasis
from finance.products import Investment, carteira_padrao

logger = logging.getLogger(__name__)

CDI_PADRAO = 10.65

@dataclass
class Snapshot:
    investments: List[Investment] = field(default_factory=list)
    reference_rate: float = CDI_PADRAO

def snapshot_padrao(hoje: date, cdi: float = CDI_PADRAO) -> Snapshot:
    return Snapshot(investments=carteira_padrao(hoje), reference_rate=cdi)

# --- serialização ---
def _parse_date(raw: str) -> date:
    # aceita "2025-06-01" e timestamps ISO como "2025-06-01T03:00:00.000Z"
    return date.fromisoformat(str(raw)[:10])

def investment_to_dict(inv: Investment) -> Dict[str, Any]:
    return {
        "id": inv.id,
        "name": inv.name,
        "type": inv.instrument_type.value,
        "rate": inv.nominal_rate,
        "rateBasis": inv.rate_basis.value,
        "amount": inv.principal_amount,
        "purchaseDate": inv.purchase_date.isoformat(),
        "endDate": inv.maturity_date.isoformat(),
        "ir": inv.tax_rate_percent,
    }

def investment_from_dict(d: Dict[str, Any], hoje: date) -> Investment:
    """
    Reconstrói um Investment a partir do registro salvo.
    - "isPercentOfCDI" (formato antigo) ou "rateBasis"
    - sem "purchaseDate": usa `hoje`
    - "ir" é ignorado: a alíquota é sempre recalculada
    """
    if "rateBasis" in d:
        basis = RateBasis(d["rateBasis"])
    else:
        basis = RateBasis.POS_FIXADO if d.get("isPercentOfCDI", True) else RateBasis.PREFIXADO
    compra = _parse_date(d["purchaseDate"]) if d.get("purchaseDate") else hoje
    return Investment(
        id=str(d["id"]),
        name=d.get("name", ""),
        instrument_type=InstrumentType.from_label(d["type"]),
        nominal_rate=float(d["rate"]),
        rate_basis=basis,
        principal_amount=float(d["amount"]),
        purchase_date=compra,
        maturity_date=_parse_date(d["endDate"]),
    )

def snapshot_to_dict(snap: Snapshot) -> Dict[str, Any]:
    return {
        "reference_rate": snap.reference_rate,
        "investments": [investment_to_dict(i) for i in snap.investments],
    }

def snapshot_from_dict(d: Dict[str, Any], hoje: date, cdi_padrao: float = CDI_PADRAO) -> Snapshot:
    return Snapshot(
        investments=[investment_from_dict(x, hoje) for x in d.get("investments", [])],
        reference_rate=float(d.get("reference_rate", cdi_padrao)),
    )

# --- implementações ---
class InvestmentStore:
    def load(self) -> Snapshot:
        raise NotImplementedError

    def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError

class MemoryStore(InvestmentStore):
    """Guarda o snapshot em memória (testes)."""

    def __init__(self, snapshot: Optional[Snapshot] = None, hoje: Callable[[], date] = date.today):
        self._snapshot = snapshot
        self._hoje = hoje

    def load(self) -> Snapshot:
        if self._snapshot is None:
            return snapshot_padrao(self._hoje())
        return Snapshot(list(self._snapshot.investments), self._snapshot.reference_rate)

    def save(self, snapshot: Snapshot) -> None:
        self._snapshot = Snapshot(list(snapshot.investments), snapshot.reference_rate)

class JsonFileStore(InvestmentStore):
    """
    Arquivo JSON: {"reference_rate": 10.65, "investments": [...]}.
    Arquivo ausente ou corrompido -> carteira padrão (o erro vai para o log).
    """

    def __init__(self, path: str, cdi_padrao: float = CDI_PADRAO, hoje: Callable[[], date] = date.today):
        self.path = path
        self.cdi_padrao = cdi_padrao
        self._hoje = hoje

    def load(self) -> Snapshot:
        hoje = self._hoje()
        if not os.path.exists(self.path):
            logger.debug("%s não existe, usando carteira padrão", self.path)
            return snapshot_padrao(hoje, self.cdi_padrao)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            snap = snapshot_from_dict(data, hoje, self.cdi_padrao)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Erro ao carregar investimentos de %s: %s", self.path, e)
            return snapshot_padrao(hoje, self.cdi_padrao)
        logger.debug("carregados %d investimentos de %s", len(snap.investments), self.path)
        return snap

    def save(self, snapshot: Snapshot) -> None:
        pasta = os.path.dirname(self.path)
        if pasta:
            os.makedirs(pasta, exist_ok=True)
        tmp = f"{self.path}.tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(snapshot_to_dict(snapshot), f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)
        logger.debug("salvos %d investimentos em %s", len(snapshot.investments), self.path)
