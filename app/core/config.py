"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Rule of Life"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Rule of Life contributors"]
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./rule_of_life.db"

    # Calendar
    TIME_ZONE: str = "America/New_York"
    LITURGICAL_CACHE_ENABLED: bool = True

    # Today view
    UPCOMING_WEEKLY_LIMIT: int = 3
    DAILY_VERSES_FILE: Optional[str] = None

    # Security
    SECRET_KEY: str = "dev-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
