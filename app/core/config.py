"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "HunterAscend"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["HunterAscend team"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    # Full URL, e.g. "sqlite:///./hunter.db" for local runs; wins over the parts above
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Identity provider tokens (verified, never issued, here)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    # Progression workflow
    MAX_UPDATE_RETRIES: int = 3
    RECENT_WORKOUTS_LIMIT: int = 10

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
