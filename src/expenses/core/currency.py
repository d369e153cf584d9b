#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Amounts are stored in the database as NUMERIC(6,2) and surface in Python as
Decimal. Internally they are carried as integer cents so totals are summed
with integer arithmetic.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert to cents once, at the database boundary
- Render with exactly two decimal places
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    # Handle negative amounts properly
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = int(abs_cents // 100)
    remainder = int(abs_cents % 100)

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    else:
        return f"{dollars}.{remainder:02d}"


def decimal_to_cents(amount: Union[Decimal, int, str]) -> int:
    """
    Convert a database NUMERIC value to integer cents.

    Values with more than two fractional digits are rounded half-up, the way
    PostgreSQL rounds on insert into NUMERIC(6,2).

    Examples:
        decimal_to_cents(Decimal("12.5")) -> 1250
        decimal_to_cents(Decimal("0.005")) -> 1
    """
    quantized = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return int(quantized * 100)
