# backend/pathbot/core/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Pathbot Test Server"
    API_PREFIX: str = "/pathbot"

    HOST: str = "0.0.0.0"
    PORT: int = 3333  # Clients under test expect the server here

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
