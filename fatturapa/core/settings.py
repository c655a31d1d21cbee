"""
Configurazione del generatore FatturaPA
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FatturaPASettings(BaseSettings):
    """FatturaPA generation settings (env prefix FATTURAPA_)"""

    # Nazione usata quando cedente o cessionario non la specificano
    default_nazione: str = Field(default="IT", min_length=2, max_length=2)

    # Indentazione dell'XML generato ("" = nessuna indentazione)
    indent: str = Field(default="  ")

    # Emissione delle note fattura come Causale
    emit_causale: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="FATTURAPA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_fatturapa_settings() -> FatturaPASettings:
    """Get cached FatturaPA settings instance"""
    return FatturaPASettings()
