# finance/tvm.py
from __future__ import annotations
from typing import List

def aa_to_am(i_aa: float) -> float:
    """Converte taxa efetiva ao ano para efetiva ao mês: (1+i)^1/12 - 1"""
    return (1.0 + i_aa) ** (1.0 / 12.0) - 1.0

def am_to_aa(i_am: float) -> float:
    """Converte taxa efetiva ao mês para efetiva ao ano: (1+i)^12 - 1"""
    return (1.0 + i_am) ** 12.0 - 1.0

def pct_aa_to_am(taxa_aa_pct: float) -> float:
    """
    Mesma conversão de aa_to_am, mas recebendo a taxa anual em pontos
    percentuais (ex.: 11.715 = 11,715% a.a.). Retorna fração mensal.
    """
    return aa_to_am(taxa_aa_pct / 100.0)

def vf_compostos(vp: float, i: float, n: int) -> float:
    """VF juros compostos: VP*(1+i)^n"""
    return vp * ((1.0 + i) ** n)

def evolucao_compostos(vp: float, i: float, n: int) -> List[float]:
    """
    Saldo mês a mês (mês 0 até n) em juros compostos.
    O último ponto coincide com vf_compostos(vp, i, n).
    """
    return [vf_compostos(vp, i, k) for k in range(n + 1)]
