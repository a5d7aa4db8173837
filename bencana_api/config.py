"""Bencana API — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Bencana Gunung API"
    APP_VERSION: str = "1.0.0"

    # Database
    DATABASE_URL: str = "mysql+aiomysql://root:@localhost:3306/bencana"
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = True  # dev convenience; production schema is managed outside the app

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
