"""Configuration management for tablekit."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment

MEMORY_DATABASE = ":memory:"


class Settings(BaseModel):
    """Application settings."""

    # Environment
    version: str = Field(default="0.1.0", description="Package version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Database Settings
    dialect: str = Field(
        default="sqlite", description="SQL dialect used to build statements"
    )
    database_path: str = Field(
        default="tablekit.db", description="SQLite database file path"
    )
    sqlite_timeout: float = Field(
        default=60.0, description="Seconds to wait for a locked SQLite database"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.dialect = self.dialect.lower()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def database_location(self) -> str:
        """Database to open for the current environment.

        Testing always uses an in-memory database.
        """
        if self.is_testing:
            return MEMORY_DATABASE
        return self.database_path


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    return Settings(
        environment=Environment(os.getenv("TABLEKIT_ENV", "development")),
        log_level=os.getenv("TABLEKIT_LOG_LEVEL", "INFO").upper(),
        dialect=os.getenv("TABLEKIT_DIALECT", "sqlite"),
        database_path=os.getenv("TABLEKIT_DATABASE_PATH", "tablekit.db"),
        sqlite_timeout=float(os.getenv("TABLEKIT_SQLITE_TIMEOUT", "60.0")),
    )


# Global settings instance
settings = load_settings()
