from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración centralizada del servicio con validación de tipos."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_dir: Path = Field(default=Path("logs"), description="Directorio de pdf_qa.log; relativo al cwd")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Groq
    groq_api_key: str = Field(..., min_length=1)
    groq_model: str = Field(default="llama-3.3-70b-versatile")

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Singleton cacheado para evitar recargar .env en cada request."""
    return Settings()


settings = get_settings()
