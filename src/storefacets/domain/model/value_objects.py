"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from storefacets.domain.exceptions import ValidationError


class StockStatus(Enum):
    IN_STOCK = "instock"
    OUT_OF_STOCK = "outofstock"
    ON_BACKORDER = "onbackorder"

    @staticmethod
    def parse(token: str | StockStatus) -> StockStatus:
        """Accept either a member or its token (``"instock"``)."""
        if isinstance(token, StockStatus):
            return token
        try:
            return StockStatus(token)
        except ValueError as exc:
            raise ValidationError(f"Unknown stock status: {token!r}") from exc


@dataclass(frozen=True, order=True)
class Money:
    """Exact monetary amount.

    Uses Decimal so that range bounds and catalog prices compare exactly;
    a price of 10.10 is never rounded into 10.1000001.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True, order=True)
class Rating:
    """Average review score rounded to a whole star, 1 to 5."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Rating must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(value: int | float | str | Decimal) -> Rating:
        """Round a stored average half-up to a whole star (4.6 becomes 5)."""
        if isinstance(value, bool):
            raise ValidationError(f"Invalid rating: {value!r}")
        try:
            return Rating(_round_half_up(Decimal(str(value))))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid rating: {value!r}") from exc

    @staticmethod
    def from_scores(scores: Iterable[int | float]) -> Rating | None:
        """Average *scores* and round half-up; ``None`` when there are none.

        3.5 becomes 4, matching how storefronts display half stars.
        """
        values = [Decimal(str(score)) for score in scores]
        if not values:
            return None
        average = sum(values, Decimal("0")) / len(values)
        return Rating(min(max(_round_half_up(average), MIN_RATING), MAX_RATING))


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
