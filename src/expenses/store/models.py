#!/usr/bin/env python3
"""Expense record model."""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


@dataclass(frozen=True)
class Expense:
    """One row of the expenses table. Rows are never updated in place."""

    id: int
    amount: Money
    memo: str
    created_on: FinancialDate

    @classmethod
    def from_row(cls, row: Any) -> "Expense":
        """Build from a result row with id, amount, memo and created_on columns."""
        return cls(
            id=row.id,
            amount=Money.from_decimal(row.amount),
            memo=row.memo,
            created_on=FinancialDate.from_value(row.created_on),
        )
