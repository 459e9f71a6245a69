"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


# ============================================================================
# Currency
# ============================================================================


class Currency(str, Enum):
    """Currencies a set's retail price can be listed in."""

    GBP = "GBP"
    USD = "USD"
    CAD = "CAD"
    EUR = "EUR"


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money:
    """Represents a monetary value with its currency tag.

    Amounts are kept as ``Decimal`` in major units (e.g. pounds) exactly
    as the collection export lists them, so sums never pick up
    floating-point drift.

    Attributes:
        amount: Amount in major currency units.
        currency: Currency the amount is listed in.
    """

    amount: Decimal
    currency: Currency = Currency.GBP

    def __str__(self) -> str:
        """Return formatted string representation.

        Returns:
            Amount with currency code (e.g., '49.99 GBP').
        """
        return f"{self.amount:.2f} {self.currency.value}"
