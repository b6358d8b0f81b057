# config.py
"""
Configurações da aplicação, lidas de variáveis de ambiente (prefixo
RENDA_FIXA_) ou de um arquivo .env na raiz.
"""
from __future__ import annotations
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RENDA_FIXA_", env_file=".env", extra="ignore")

    data_path: str = "investimentos.json"   # carteira + CDI salvos
    cdi_padrao: float = 10.65               # % a.a., usado quando nada foi salvo
    output_dir: str = "saida_relatorio"
    log_level: str = "INFO"

@lru_cache()
def get_settings() -> Settings:
    return Settings()

def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
