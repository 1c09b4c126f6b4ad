"""
Configurações globais do exportador usando Pydantic Settings.
Carrega variáveis de ambiente e define valores padrão.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configurações principais do sistema."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ambiente
    env: Literal["development", "production", "testing"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Fonte do feed
    feed_url: str = "https://www.horsimo.cz/google/export/products.xml"

    # Afiliado
    affiliate_id: str = "123"
    affiliate_param: str = "aff_id"

    # HTTP
    request_timeout: float = Field(default=60.0, gt=0, le=600)
    max_redirects: int = Field(default=5, ge=0, le=20)
    progress_step_mb: int = Field(default=10, ge=1)
    user_agent: str = "feed-catalog/1.0 (+https://www.horsimo.cz)"

    # Saída
    output_path: Path = Field(default=Path("./public"))
    sample_size: int = Field(default=100, ge=0)
    search_description_length: int = Field(default=200, ge=0)
    json_indent: Optional[int] = Field(default=None, ge=0, le=8)

    @field_validator("feed_url", "affiliate_id", "affiliate_param", mode="after")
    @classmethod
    def strip_required(cls, v: str) -> str:
        """Garante que os valores obrigatórios não fiquem vazios."""
        v = v.strip()
        if not v:
            raise ValueError("Valor não pode ser vazio")
        return v

    @property
    def progress_step_bytes(self) -> int:
        """Intervalo de progresso do download em bytes."""
        return self.progress_step_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """
    Retorna instância singleton das configurações.
    Usa cache para evitar recarregar .env múltiplas vezes.
    """
    return Settings()
