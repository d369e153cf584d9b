"""
Expense Store Package

Persistence and console presentation for the expenses table.

This package provides:
- expenses_table: SQLAlchemy Core table definition
- ExpenseStore: add, list, search, delete and clear operations
- formatting helpers shared by every listing
"""

from .formatting import format_row, format_total, render_expenses
from .models import Expense
from .schema import ensure_schema, expenses_table
from .store import ExpenseStore

__all__ = [
    "Expense",
    "ExpenseStore",
    "ensure_schema",
    "expenses_table",
    "format_row",
    "format_total",
    "render_expenses",
]
