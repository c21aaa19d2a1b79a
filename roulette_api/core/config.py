from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ADMIN_USERNAME: str
    ADMIN_PASSWORD: str
    DATABASE_URL: str = "sqlite:///./database.sqlite3"
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Lista de origens permitidas para CORS"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Retorna a instância única (e imutável) das configurações"""
    return Settings()
