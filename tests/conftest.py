"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.

Tests run against a throwaway SQLite file through SQLAlchemy, so no PostgreSQL
server is needed.
"""

from datetime import date, datetime, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from expenses.core import config as config_module
from expenses.store import ExpenseStore


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary directory for test files."""
    return tmp_path


@pytest.fixture
def database_url(tmp_path) -> str:
    """SQLAlchemy URL of an empty SQLite database file."""
    return f"sqlite:///{tmp_path / 'expenses.db'}"


@pytest.fixture
def output_lines() -> list[str]:
    """Lines printed by the store under test."""
    return []


@pytest.fixture
def store(database_url, output_lines):
    """ExpenseStore on a fresh database, printing into ``output_lines``."""
    engine = create_engine(database_url)
    with engine.connect() as connection:
        yield ExpenseStore(connection, echo=output_lines.append)
    engine.dispose()


@pytest.fixture
def today_candidates() -> set[date]:
    """
    Dates the database may consider "today".

    SQLite's CURRENT_DATE is UTC while date.today() is local time.
    """
    return {date.today(), datetime.now(timezone.utc).date()}


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, database_url):
    """Set up test environment variables."""
    # Ensure tests never touch a real database
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATABASE_URL", database_url)
    monkeypatch.delenv("EXPENSES_SQL_ECHO", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the installed console script"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "store: Tests for expense persistence and rendering"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for command dispatch"
    )
