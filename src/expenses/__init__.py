"""
Expense Tracker - Command-Line Expense Recording

Records, lists, searches, and deletes expense entries kept in a single
PostgreSQL table.

Domain Packages:
- core: Configuration, money and date primitives
- store: Table schema, SQL operations and console rendering
- cli: Command dispatcher (the ``expenses`` console script)

Example Usage:
    from expenses.store import ExpenseStore

    with ExpenseStore.open("postgresql+psycopg2:///expenses") as store:
        store.add_expense("12.50", "Coffee")
        store.list_expenses()
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Contributors"

from .core.config import Environment, get_config
from .core.money import Money

__all__ = [
    "Environment",
    "Money",
    "get_config",
]
