# finance/products.py
from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

from .duration import compute_duration_months
from .instruments import InstrumentType, RateBasis
from .taxes import resolve_tax_rate

@dataclass(frozen=True)
class Investment:
    """
    Termos de uma aplicação de renda fixa.

    Valor imutável: cada edição passa por uma função with_* que devolve uma
    nova instância, e tax_rate_percent é recalculado no __post_init__, então
    nunca fica defasado em relação a tipo/datas.
    """
    id: str
    name: str
    instrument_type: InstrumentType
    nominal_rate: float          # % a.a. (prefixado) ou % do CDI (pós)
    rate_basis: RateBasis
    principal_amount: float
    purchase_date: date
    maturity_date: date
    tax_rate_percent: float = field(init=False, default=0.0)

    def __post_init__(self):
        meses = compute_duration_months(self.purchase_date, self.maturity_date)
        object.__setattr__(self, "tax_rate_percent", resolve_tax_rate(self.instrument_type, meses))

    @property
    def duration_months(self) -> int:
        return compute_duration_months(self.purchase_date, self.maturity_date)

    @property
    def rate_label(self) -> str:
        if self.rate_basis is RateBasis.POS_FIXADO:
            return f"{self.nominal_rate:g}% do CDI"
        return f"{self.nominal_rate:g}% ao ano"

    # --- transições ---
    def with_name(self, name: str) -> "Investment":
        return replace(self, name=name)

    def with_instrument_type(self, instrument_type: InstrumentType) -> "Investment":
        return replace(self, instrument_type=instrument_type)

    def with_nominal_rate(self, nominal_rate: float) -> "Investment":
        return replace(self, nominal_rate=nominal_rate)

    def with_rate_basis(self, rate_basis: RateBasis, reference_rate: float) -> "Investment":
        """
        Troca a modalidade e reposiciona a taxa num valor coerente:
        pós-fixado -> 100% do CDI; prefixado -> CDI atual como % a.a.
        """
        if rate_basis is self.rate_basis:
            return self
        nova_taxa = 100.0 if rate_basis is RateBasis.POS_FIXADO else reference_rate
        return replace(self, rate_basis=rate_basis, nominal_rate=nova_taxa)

    def with_principal_amount(self, principal_amount: float) -> "Investment":
        return replace(self, principal_amount=principal_amount)

    def with_purchase_date(self, purchase_date: date) -> "Investment":
        return replace(self, purchase_date=purchase_date)

    def with_maturity_date(self, maturity_date: date) -> "Investment":
        return replace(self, maturity_date=maturity_date)

@dataclass(frozen=True)
class ReturnsResult:
    duration_months: int
    gross_future_value: float
    net_future_value: float
    gross_return: float
    net_return: float
    annual_rate: float = 0.0      # % a.a. efetiva
    monthly_rate: float = 0.0     # fração ao mês
    tax_rate: float = 0.0         # %
    tax_amount: float = 0.0

def novo_id() -> str:
    return uuid.uuid4().hex[:7]

def um_ano_depois(d: date) -> date:
    try:
        return d.replace(year=d.year + 1)
    except ValueError:  # 29/02
        return d.replace(year=d.year + 1, day=28)

def new_investment(purchase_date: date,
                   name: str = "",
                   instrument_type: InstrumentType = InstrumentType.CDB,
                   nominal_rate: float = 100.0,
                   rate_basis: RateBasis = RateBasis.POS_FIXADO,
                   principal_amount: float = 10000.0,
                   maturity_date: Optional[date] = None,
                   id: Optional[str] = None) -> Investment:
    """
    Investimento com os padrões do formulário: 100% do CDI, R$ 10.000,00,
    vencimento um ano após a aplicação. A data de aplicação é sempre explícita.
    """
    return Investment(
        id=id or novo_id(),
        name=name,
        instrument_type=instrument_type,
        nominal_rate=nominal_rate,
        rate_basis=rate_basis,
        principal_amount=principal_amount,
        purchase_date=purchase_date,
        maturity_date=maturity_date or um_ano_depois(purchase_date),
    )

def effective_annual_rate(investment: Investment, reference_rate: float) -> float:
    """
    Taxa anual efetiva em % a.a.:
    - prefixado: a própria taxa nominal
    - pós-fixado: (taxa/100) * CDI
    """
    if investment.rate_basis is RateBasis.POS_FIXADO:
        return (investment.nominal_rate / 100.0) * reference_rate
    return investment.nominal_rate

def carteira_padrao(hoje: date) -> List[Investment]:
    """Carteira inicial exibida quando não há nada salvo."""
    vencimento = um_ano_depois(hoje)
    return [
        new_investment(hoje, "CDB Banco XYZ", InstrumentType.CDB, 110.0, RateBasis.POS_FIXADO,
                       10000.0, vencimento, id="1"),
        new_investment(hoje, "LCI Imobiliário", InstrumentType.LCI_LCA, 95.0, RateBasis.POS_FIXADO,
                       10000.0, vencimento, id="2"),
    ]
