# finance/validation.py
"""
Validação de entrada, feita por quem chama o motor de cálculo.

O motor (simulate.compute_returns) nunca lança erro: valor zero, taxa
não positiva ou datas invertidas produzem um resultado degenerado. Por isso
formulários e CLI passam por aqui antes de calcular.
"""
from __future__ import annotations
from typing import List

from .products import Investment

class InvestmentValidationError(ValueError):
    """Erro de entrada com mensagem pronta para o usuário."""

class InvalidPrincipal(InvestmentValidationError):
    pass

class InvalidDateOrder(InvestmentValidationError):
    pass

class InvalidRate(InvestmentValidationError):
    pass

class InvalidReferenceRate(InvestmentValidationError):
    pass

def collect_errors(inv: Investment) -> List[InvestmentValidationError]:
    erros: List[InvestmentValidationError] = []
    if inv.principal_amount == 0:
        erros.append(InvalidPrincipal("O valor não pode ser zero"))
    elif inv.principal_amount < 0:
        erros.append(InvalidPrincipal("O valor não pode ser negativo"))
    if inv.maturity_date <= inv.purchase_date:
        erros.append(InvalidDateOrder("A data de vencimento deve ser posterior à data de aplicação"))
    if inv.nominal_rate <= 0:
        erros.append(InvalidRate("A taxa deve ser maior que zero"))
    return erros

def validate_investment(inv: Investment) -> Investment:
    """Lança o primeiro erro encontrado; devolve o próprio investimento se ok."""
    erros = collect_errors(inv)
    if erros:
        raise erros[0]
    return inv

def validate_reference_rate(rate: float) -> float:
    if rate <= 0:
        raise InvalidReferenceRate("A taxa CDI deve ser maior que zero")
    return rate
