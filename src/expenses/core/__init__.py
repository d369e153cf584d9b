"""
Core Utilities Package

Shared primitives used by the command dispatcher and the expense store.

This package provides:
- Configuration management for environment-specific settings
- Money: integer-cents amounts for exact totals
- FinancialDate: ISO date wrapper for the created_on column
"""

from .config import (
    Config,
    DatabaseConfig,
    Environment,
    get_config,
    reload_config,
)
from .currency import cents_to_dollars_str, decimal_to_cents
from .dates import FinancialDate
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "DatabaseConfig",
    "Environment",
    "FinancialDate",
    "Money",
    "cents_to_dollars_str",
    "decimal_to_cents",
    "get_config",
    "reload_config",
]
