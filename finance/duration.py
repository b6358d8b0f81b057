# finance/duration.py
from __future__ import annotations
from datetime import date

def compute_duration_months(purchase_date: date, maturity_date: date) -> int:
    """
    Prazo em meses cheios entre a aplicação e o vencimento.

    - diferença de calendário: anos*12 + meses
    - desconta 1 mês se o dia do vencimento for anterior ao dia da aplicação
      (último mês incompleto)
    - mínimo de 1 mês: menos de um mês conta como 1 para a tabela de IR

    Datas invertidas não geram erro (o piso devolve 1); quem chama deve
    validar a ordem antes (ver finance.validation).
    Aceita date ou datetime; a hora é ignorada.
    """
    meses = (maturity_date.year - purchase_date.year) * 12 + (maturity_date.month - purchase_date.month)
    if maturity_date.day < purchase_date.day:
        meses -= 1
    return max(1, meses)
