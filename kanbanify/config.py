"""Kanbanify Configuration Settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Database
    DATABASE_URL: Optional[str] = None

    # Admin
    ADMIN_PASSWORD: Optional[str] = None

    # Application
    APP_NAME: str = "Kanbanify"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    # Boards
    DEFAULT_BOARD_BACKGROUND: str = "#0079bf"

    # Client
    API_BASE_URL: str = "http://localhost:8000/api"
    CLIENT_STORAGE_PATH: Path = Field(default_factory=lambda: Path.home() / ".kanbanify" / "local-storage.json")
    CLIENT_TIMEOUT_SECONDS: float = 30.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def cors_origins_list(self) -> List[str]:
        """Return the configured CORS origins as a sanitized list."""

        if not self.CORS_ORIGINS:
            return []

        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
