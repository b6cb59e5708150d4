"""Data Transfer Objects: the results facet queries hand back to callers.

Count maps are plain dicts; the value objects here cover what a dict
cannot express.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefacets.domain.model.value_objects import Money, StockStatus


@dataclass(frozen=True)
class PriceRange:
    """Lowest and highest price among the matching products."""

    min: Money
    max: Money

    def __str__(self) -> str:
        return f"{self.min} - {self.max}"


@dataclass(frozen=True)
class NoMatch:
    """No product matched, so there is no price range to report.

    Distinct from a zero-width ``PriceRange`` where min equals max.
    """

    reason: str = "no matching products"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class FacetSummaryDTO:
    """Output: every facet for one filter context."""

    price: PriceRange | NoMatch
    stock_status: dict[StockStatus, int]
    rating: dict[int, int]
    attributes: dict[str, dict[str, int]]
