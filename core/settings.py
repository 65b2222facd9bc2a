"""Application settings and shared constants."""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Gestión de Mantenimiento Vehicular"
    database_url: str = "sqlite:///./mantenimiento.db"
    api_prefix: str = "/api"

    # Bearer token validation
    secret_key: str = "cambiar-esta-clave-secreta-en-produccion"
    jwt_algorithm: str = "HS256"

    cors_origins: str = "*"
    log_level: str = "INFO"
    log_format: str = "json"

    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def get_cors_origins(self) -> List[str]:
        if self.cors_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
