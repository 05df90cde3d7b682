"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Tennis Precision Test"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Tennis Precision Test contributors"]
    PROJECT_URL: str = "https://github.com/tennis-precision-test/tpt-server"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (SQLite by default, any SQLAlchemy URL works)
    DATABASE_URL: str = "sqlite:///./tpt.db"

    # Analysis defaults, overridable per request
    STD_DEV_MODE: str = "sample"
    PRECISION_TIME_STRATEGY: str = "A"

    # Bearer token -> role ("admin", "coach", "viewer")
    ACCESS_TOKENS: Dict[str, str] = {}

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
