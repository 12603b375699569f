"""
Configuration management for the Tour Ratings API.
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    environment: str = "production"  # "local", "development", "staging", "production"

    # Database
    database_url: str = "sqlite:///./tour_ratings.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_title: str = "Tour Ratings API"
    api_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # SQL Echo (for debugging SQL queries)
    sql_echo: bool = False

    # Seed data for the init_db CLI; None means the bundled tours.json
    seed_file: Optional[str] = None

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.environment.lower() in ("local", "development")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
