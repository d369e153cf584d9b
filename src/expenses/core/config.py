#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).

Database connection parameters default to the PostgreSQL driver's own
environment (PGHOST, PGUSER, PGPASSWORD, ...), so a bare
``postgresql+psycopg2:///expenses`` URL connects the same way ``psql expenses``
does.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "postgresql+psycopg2:///expenses"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    url: str = DEFAULT_DATABASE_URL
    echo: bool = False

    def redacted_url(self) -> str:
        """Connection URL with any password masked."""
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except ArgumentError:
            return self.url


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with secure defaults.
    """

    environment: Environment
    database: DatabaseConfig

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        database = DatabaseConfig(
            url=os.getenv("EXPENSES_DATABASE_URL", DEFAULT_DATABASE_URL),
            echo=os.getenv("EXPENSES_SQL_ECHO", "false").lower() == "true",
        )

        return cls(
            environment=env,
            database=database,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.database.url:
            errors.append("EXPENSES_DATABASE_URL must not be empty")
        else:
            try:
                make_url(self.database.url)
            except ArgumentError as e:
                errors.append(f"Invalid database URL: {e}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def effective_log_level(self) -> int:
        """Root log level; DEBUG mode overrides LOG_LEVEL."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level, logging.WARNING)

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = self.effective_log_level()

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # SQL echo goes through the sqlalchemy.engine logger
        if self.database.echo:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a display dictionary with the password masked."""
        return {
            "environment": self.environment.value,
            "database": {
                "url": self.database.redacted_url(),
                "echo": self.database.echo,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
