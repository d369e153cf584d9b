#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors when totalling expense amounts.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import cents_to_dollars_str, decimal_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> coffee = Money.from_decimal(Decimal("12.5"))
        >>> str(coffee)
        '12.50'

        >>> tea = Money.from_cents(500)
        >>> str(coffee + tea)
        '17.50'

        >>> Money.sum([coffee, tea])
        Money(cents=1750)
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_decimal(cls, amount: Decimal | int | str) -> "Money":
        """
        Create Money from a NUMERIC column value.

        Args:
            amount: Decimal as returned by the database driver

        Returns:
            Money object rounded to whole cents
        """
        return cls(cents=decimal_to_cents(amount))

    @classmethod
    def zero(cls) -> "Money":
        """Money value of 0.00."""
        return cls(cents=0)

    @classmethod
    def sum(cls, amounts: "list[Money]") -> "Money":
        """Total a list of Money values; an empty list totals to zero."""
        total = cls.zero()
        for amount in amounts:
            total = total + amount
        return total

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __str__(self) -> str:
        """Format with two decimal places, no currency symbol."""
        return cents_to_dollars_str(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
