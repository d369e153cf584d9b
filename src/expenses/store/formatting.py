#!/usr/bin/env python3
"""
Console Rendering for Expense Results

Shared by list, search and the single-row delete confirmation:

      2 | 2026-10-16 |         5.00 | Tea
      1 | 2026-10-16 |        12.50 | Coffee
    --------------------------------------------------
    Total                    17.50
"""

from ..core.money import Money
from .models import Expense

SEPARATOR_WIDTH = 50
TOTAL_WIDTH = 25


def format_row(expense: Expense) -> str:
    """Render one expense as pipe-separated, right-justified columns."""
    return (
        f"{expense.id:>3} | "
        f"{expense.created_on.to_iso_string():>10} | "
        f"{str(expense.amount):>12} | "
        f"{expense.memo}"
    )


def format_count(count: int) -> str | None:
    """Count line, or None when there is nothing to count."""
    if count == 0:
        return None
    return f"There are {count} expenses."


def format_total(expenses: list[Expense]) -> list[str]:
    """Separator and total lines for a non-empty result set."""
    total = Money.sum([expense.amount for expense in expenses])
    return [
        "-" * SEPARATOR_WIDTH,
        f"Total{str(total):>{TOTAL_WIDTH}}",
    ]


def render_expenses(expenses: list[Expense], show_count: bool = True) -> list[str]:
    """
    Render a result set as console lines.

    Args:
        expenses: Rows in display order
        show_count: Prefix the "There are N expenses." line

    Returns:
        Lines to print; empty when there are no expenses
    """
    if not expenses:
        return []

    lines = []
    count_line = format_count(len(expenses))
    if show_count and count_line:
        lines.append(count_line)
    lines.extend(format_row(expense) for expense in expenses)
    lines.extend(format_total(expenses))
    return lines
