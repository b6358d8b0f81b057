# main.py
from __future__ import annotations
import logging
from datetime import date

from config import get_settings, setup_logging
from finance.instruments import InstrumentType, RateBasis
from finance.products import new_investment, um_ano_depois
from finance.validation import InvestmentValidationError, validate_investment, validate_reference_rate
from report.formatting import formatar_brl, formatar_data, formatar_pct, parse_data_br, parse_valor_br
from report.report import gerar_relatorio
from services.storage import InvestmentStore, JsonFileStore
from simulate import comparar_investimentos

logger = logging.getLogger(__name__)


# =========================
# Helpers de entrada
# =========================
def _input_float(msg: str, default: float) -> float:
    raw = input(f"{msg} [{default}]: ").strip()
    return parse_valor_br(raw) if raw else default

def _input_date(msg: str, default: date) -> date:
    raw = input(f"{msg} [{formatar_data(default)}]: ").strip()
    return parse_data_br(raw) if raw else default

def _input_bool(msg: str, default: bool=False) -> bool:
    raw = input(f"{msg} [{'s' if default else 'n'}]: ").strip().lower()
    if raw == "":
        return default
    return raw.startswith("s")


# =========================
# Menu
# =========================
def menu():
    print("\n=== Comparador de Renda Fixa (CDB x LCI/LCA) ===")
    print("1) Comparar investimentos")
    print("2) Adicionar investimento")
    print("3) Remover investimento")
    print("4) Alterar taxa CDI")
    print("5) Relatório completo (HTML + CSV + PNG + PDF)")
    print("0) Sair")


# =========================
# Ações do menu
# =========================
def acao_comparar(store: InvestmentStore):
    snap = store.load()
    if not snap.investments:
        print("Nenhum investimento cadastrado.")
        return
    print(f"\nCDI atual: {formatar_pct(snap.reference_rate)} a.a.")
    for s in comparar_investimentos(snap.investments, snap.reference_rate):
        print(f"- [{s['id']}] {s['nome']} ({s['tipo']}, {s['taxa']}) vence {formatar_data(s['vencimento'])} "
              f"| {s['prazo_meses']} meses | IR {formatar_pct(s['aliquota_ir'], 1)}")
        print(f"    Rend. bruto {formatar_brl(s['rend_bruto'])} | Rend. líquido {formatar_brl(s['rend_liquido'])} "
              f"| Valor líquido {formatar_brl(s['vf_liquido'])}")


def acao_adicionar(store: InvestmentStore, hoje: date):
    snap = store.load()
    print("\n-- Novo investimento --")
    nome = input("Nome do investimento: ").strip()
    lci = _input_bool("É LCI/LCA (isento de IR)?", False)
    pos = _input_bool("Pós-fixado (% do CDI)?", True)
    taxa_padrao = 100.0 if pos else snap.reference_rate
    taxa = _input_float("Taxa (% do CDI)" if pos else "Taxa (% ao ano)", taxa_padrao)
    valor = _input_float("Valor inicial (R$)", 10000.0)
    compra = _input_date("Data de aplicação (dd/mm/aaaa)", hoje)
    vencimento = _input_date("Data de vencimento (dd/mm/aaaa)", um_ano_depois(compra))

    inv = new_investment(
        compra, nome,
        InstrumentType.LCI_LCA if lci else InstrumentType.CDB,
        taxa,
        RateBasis.POS_FIXADO if pos else RateBasis.PREFIXADO,
        valor, vencimento,
    )
    validate_investment(inv)
    snap.investments.append(inv)
    store.save(snap)
    print(f"Adicionado [{inv.id}] {inv.name} – IR calculado: {formatar_pct(inv.tax_rate_percent, 1)}")


def acao_remover(store: InvestmentStore):
    snap = store.load()
    alvo = input("Id do investimento a remover: ").strip()
    restantes = [i for i in snap.investments if i.id != alvo]
    if len(restantes) == len(snap.investments):
        print("Id não encontrado.")
        return
    snap.investments = restantes
    store.save(snap)
    print("Removido.")


def acao_cdi(store: InvestmentStore):
    snap = store.load()
    snap.reference_rate = validate_reference_rate(_input_float("Taxa CDI (% a.a.)", snap.reference_rate))
    store.save(snap)
    print(f"CDI atualizado para {formatar_pct(snap.reference_rate)} a.a.")


def acao_relatorio(store: InvestmentStore, outdir: str):
    snap = store.load()
    if not snap.investments:
        print("Nenhum investimento cadastrado.")
        return
    series = comparar_investimentos(snap.investments, snap.reference_rate)
    paths = gerar_relatorio(outdir, snap.reference_rate, series)
    print("\nArquivos gerados:")
    print(f"• CSV:  {paths['csv']}")
    print(f"• PNG:  {paths['png']}")
    print(f"• HTML: {paths['html']}")
    print(f"• PDF:  {paths['pdf']}")


# =========================
# Loop principal
# =========================
def main():
    settings = get_settings()
    setup_logging(settings)
    store = JsonFileStore(settings.data_path, cdi_padrao=settings.cdi_padrao)
    logger.debug("usando %s", settings.data_path)
    while True:
        menu()
        op = input("Escolha: ").strip()
        try:
            if op == "1":
                acao_comparar(store)
            elif op == "2":
                acao_adicionar(store, date.today())
            elif op == "3":
                acao_remover(store)
            elif op == "4":
                acao_cdi(store)
            elif op == "5":
                acao_relatorio(store, settings.output_dir)
            elif op == "0":
                print("Até mais!")
                break
            else:
                print("Opção inválida.")
        except InvestmentValidationError as e:
            print(f"Erro: {e}")
        except ValueError as e:
            print(f"Entrada inválida: {e}")


if __name__ == "__main__":
    main()
