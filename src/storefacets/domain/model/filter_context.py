"""FilterContext value object: the active filter selections of one query.

The context is built once per request and shared by every facet query.
Facet queries never change it: ``without()`` hands back a new context with
one dimension cleared.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from storefacets.domain.exceptions import MalformedContextError, ValidationError
from storefacets.domain.model.dimension import PRICE, RATING, STOCK, Dimension, DimensionKind
from storefacets.domain.model.value_objects import (
    MAX_RATING,
    MIN_RATING,
    Money,
    StockStatus,
)

QUERY_PARAM_KEYS = frozenset(
    {"stock_status", "min_price", "max_price", "rating", "attributes"}
)


@dataclass(frozen=True)
class FilterContext:
    """Normalized, immutable filter selections.

    Invariants:
    - ``min_price <= max_price`` when both are set
    - every rating is between 1 and 5
    - ``attribute_filters`` never holds an empty term set
      (an empty selection means "no filter" and is dropped)
    """

    stock_statuses: frozenset[StockStatus] = frozenset()
    min_price: Money | None = None
    max_price: Money | None = None
    ratings: frozenset[int] = frozenset()
    attribute_filters: Mapping[str, frozenset[str]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "stock_statuses", frozenset(self.stock_statuses))
        object.__setattr__(self, "ratings", frozenset(self.ratings))
        object.__setattr__(
            self,
            "attribute_filters",
            MappingProxyType(
                {
                    str(dimension): frozenset(str(term) for term in terms)
                    for dimension, terms in self.attribute_filters.items()
                    if terms
                }
            ),
        )

        for name in ("min_price", "max_price"):
            bound = getattr(self, name)
            if bound is not None and not isinstance(bound, Money):
                raise MalformedContextError(
                    f"{name} must be Money or None, got {type(bound).__name__}"
                )
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise MalformedContextError(
                f"min_price {self.min_price} is greater than max_price {self.max_price}"
            )
        for rating in self.ratings:
            if isinstance(rating, bool) or not isinstance(rating, int):
                raise MalformedContextError(f"Rating must be an integer, got {rating!r}")
            if not MIN_RATING <= rating <= MAX_RATING:
                raise MalformedContextError(
                    f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
                )
        for status in self.stock_statuses:
            if not isinstance(status, StockStatus):
                raise MalformedContextError(f"Unknown stock status: {status!r}")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_query_params(params: Mapping[str, Any]) -> FilterContext:
        """Build a context from already-normalized query parameters.

        Expected keys (all optional, ``None`` meaning absent):
        ``stock_status`` (iterable of StockStatus or status tokens),
        ``min_price`` / ``max_price`` (numbers), ``rating`` (iterable of ints),
        ``attributes`` (mapping of dimension name to iterable of term IDs).
        Raw comma-separated strings are not accepted.
        """
        unknown = set(params) - QUERY_PARAM_KEYS
        if unknown:
            raise MalformedContextError(
                f"Unknown filter parameter(s): {', '.join(sorted(unknown))}"
            )

        try:
            stock_statuses = frozenset(
                StockStatus.parse(token)
                for token in _as_collection("stock_status", params.get("stock_status"))
            )
            min_price = _as_bound("min_price", params.get("min_price"))
            max_price = _as_bound("max_price", params.get("max_price"))
        except MalformedContextError:
            raise
        except ValidationError as exc:
            raise MalformedContextError(str(exc)) from exc

        attributes = params.get("attributes") or {}
        if not isinstance(attributes, Mapping):
            raise MalformedContextError("attributes must be a mapping of dimension to terms")

        return FilterContext(
            stock_statuses=stock_statuses,
            min_price=min_price,
            max_price=max_price,
            ratings=frozenset(_as_collection("rating", params.get("rating"))),
            attribute_filters={
                dimension: frozenset(_as_collection(f"attributes.{dimension}", terms))
                for dimension, terms in attributes.items()
            },
        )

    # --- Views ----------------------------------------------------------------

    def without(self, dimension: Dimension) -> FilterContext:
        """Return a copy of this context with *dimension*'s filter cleared."""
        if dimension.kind == DimensionKind.PRICE:
            return replace(self, min_price=None, max_price=None)
        if dimension.kind == DimensionKind.STOCK:
            return replace(self, stock_statuses=frozenset())
        if dimension.kind == DimensionKind.RATING:
            return replace(self, ratings=frozenset())
        return replace(
            self,
            attribute_filters={
                name: terms
                for name, terms in self.attribute_filters.items()
                if name != dimension.name
            },
        )

    # --- Computed properties --------------------------------------------------

    @property
    def has_price_filter(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    @property
    def active_dimensions(self) -> tuple[Dimension, ...]:
        """Every dimension that currently constrains the result set."""
        active: list[Dimension] = []
        if self.has_price_filter:
            active.append(PRICE)
        if self.stock_statuses:
            active.append(STOCK)
        if self.ratings:
            active.append(RATING)
        active.extend(Dimension.attribute(name) for name in sorted(self.attribute_filters))
        return tuple(active)

    @property
    def is_empty(self) -> bool:
        return not self.active_dimensions


def _as_collection(key: str, value: Any) -> Iterable[Any]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise MalformedContextError(f"{key} must be a list of values, got {value!r}")
    return value


def _as_bound(key: str, value: Any) -> Money | None:
    if value is None:
        return None
    if isinstance(value, str) or isinstance(value, bool):
        raise MalformedContextError(f"{key} must be a number, got {value!r}")
    if not isinstance(value, (int, float, Decimal)):
        raise MalformedContextError(f"{key} must be a number, got {type(value).__name__}")
    return Money.of(value)
