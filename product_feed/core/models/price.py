"""
Price model representing a singular or N-for-X group price.

Amounts are integer hundredths of a cent ("centicents") so that per-item
prices of group offers can be held exactly without floating point.
"""

from pydantic import BaseModel, ConfigDict, Field

CENTICENTS_PER_CENT = 100


def round_half_down(value: int, divisor: int) -> int:
    """
    Divide with rounding to nearest, exact halves rounding down.

    ``(value + (divisor - 1) // 2) // divisor``; for an even divisor the
    bias is just under half so an exact half falls to the lower result.

    Args:
        value: Dividend
        divisor: Positive divisor

    Returns:
        Rounded quotient
    """
    return (value + (divisor - 1) // 2) // divisor


def format_cents(cents: int) -> str:
    """
    Format integer cents as dollars, e.g. -104 -> "-$1.04".

    The sign goes before the dollar sign and only appears for negatives.
    """
    sign = "-" if cents < 0 else ""
    magnitude = abs(cents)
    return f"{sign}${magnitude // 100}.{magnitude % 100:02d}"


class Price(BaseModel):
    """
    A price for ``count`` items, in centicents.

    Attributes:
        amount: Total price for the group in hundredths of a cent
        count: Number of items the amount buys (1 for a singular price)
    """

    model_config = ConfigDict(frozen=True)

    amount: int
    count: int = Field(1, ge=1)

    @classmethod
    def from_cents(cls, cents: int, count: int = 1) -> "Price":
        """Build a price from an amount in whole cents."""
        return cls(amount=cents * CENTICENTS_PER_CENT, count=count)

    @property
    def calculator(self) -> int:
        """Per-item price in centicents, rounded half-down."""
        return round_half_down(self.amount, self.count)

    @property
    def display(self) -> str:
        """Human readable price, e.g. "$1.04" or "2 for $5.68"."""
        cents = round_half_down(abs(self.amount), CENTICENTS_PER_CENT)
        dollars = format_cents(-cents if self.amount < 0 else cents)
        if self.count == 1:
            return dollars
        return f"{self.count} for {dollars}"

    def __str__(self) -> str:
        return self.display
