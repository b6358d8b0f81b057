# report/formatting.py
from __future__ import annotations
import re
from datetime import date, datetime

# 10.000 | 1.234.567 (ponto como separador de milhar, sem decimais)
_MILHAR = re.compile(r"^-?\d{1,3}(\.\d{3})+$")

def formatar_brl(valor: float) -> str:
    """Formata float para R$ no padrão pt-BR (ex.: R$ 1.234,56)."""
    txt = f"{abs(valor):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"-R$ {txt}" if valor < 0 else f"R$ {txt}"

def formatar_pct(valor_pct: float, casas: int = 2) -> str:
    """10.65 -> '10,65%'"""
    return f"{valor_pct:.{casas}f}%".replace(".", ",")

def formatar_data(d: date) -> str:
    return d.strftime("%d/%m/%Y")

def parse_data_br(txt: str) -> date:
    """'31/12/2025' -> date(2025, 12, 31). Lança ValueError se inválida."""
    return datetime.strptime(txt.strip(), "%d/%m/%Y").date()

def parse_valor_br(txt: str) -> float:
    """
    Converte texto digitado em float: '1.000,50', '1000,5', 'R$ 10.000' ou '1000.5'.
    Lança ValueError se não for número.
    """
    limpo = txt.strip().replace("R$", "").replace(" ", "")
    if "," in limpo or _MILHAR.match(limpo):
        limpo = limpo.replace(".", "").replace(",", ".")
    return float(limpo)
