# simulate.py
from __future__ import annotations
from typing import Dict, Iterable, List

from finance.duration import compute_duration_months
from finance.products import Investment, ReturnsResult, effective_annual_rate
from finance.taxes import resolve_tax_rate
from finance.tvm import evolucao_compostos, pct_aa_to_am, vf_compostos

def compute_returns(investment: Investment, reference_rate: float) -> ReturnsResult:
    """
    Projeção no vencimento:
    - prazo em meses cheios (mínimo 1)
    - taxa anual efetiva (prefixada ou % do CDI) convertida para mensal
    - VF bruto em juros compostos
    - IR regressivo sobre o rendimento (zero para LCI/LCA)

    Função pura: não lê relógio, não guarda estado, não valida entrada.
    """
    meses = compute_duration_months(investment.purchase_date, investment.maturity_date)
    taxa_aa = effective_annual_rate(investment, reference_rate)
    i_am = pct_aa_to_am(taxa_aa)

    vp = investment.principal_amount
    vf_bruto = vf_compostos(vp, i_am, meses)
    rend_bruto = vf_bruto - vp

    aliquota = resolve_tax_rate(investment.instrument_type, meses)
    ir = 0.0 if investment.instrument_type.isento else rend_bruto * aliquota / 100.0

    vf_liquido = vf_bruto - ir
    return ReturnsResult(
        duration_months=meses,
        gross_future_value=vf_bruto,
        net_future_value=vf_liquido,
        gross_return=rend_bruto,
        net_return=vf_liquido - vp,
        annual_rate=taxa_aa,
        monthly_rate=i_am,
        tax_rate=aliquota,
        tax_amount=ir,
    )

def evolucao_mensal(investment: Investment, reference_rate: float) -> List[float]:
    """Saldo bruto do mês 0 até o vencimento."""
    meses = compute_duration_months(investment.purchase_date, investment.maturity_date)
    i_am = pct_aa_to_am(effective_annual_rate(investment, reference_rate))
    return evolucao_compostos(investment.principal_amount, i_am, meses)

def comparar_investimentos(investments: Iterable[Investment], reference_rate: float) -> List[Dict]:
    """Uma linha por investimento, do maior para o menor VF líquido."""
    out = []
    for inv in investments:
        r = compute_returns(inv, reference_rate)
        out.append({
            "id": inv.id,
            "nome": inv.name,
            "tipo": inv.instrument_type.value,
            "taxa": inv.rate_label,
            "taxa_aa": r.annual_rate,
            "vencimento": inv.maturity_date,
            "prazo_meses": r.duration_months,
            "aliquota_ir": r.tax_rate,
            "valor_inicial": inv.principal_amount,
            "vf_bruto": r.gross_future_value,
            "vf_liquido": r.net_future_value,
            "rend_bruto": r.gross_return,
            "rend_liquido": r.net_return,
            "ir_pago": r.tax_amount,
            "evolucao": evolucao_mensal(inv, reference_rate),
        })
    return sorted(out, key=lambda s: s["vf_liquido"], reverse=True)
