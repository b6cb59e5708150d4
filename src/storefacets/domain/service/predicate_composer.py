"""Domain service: self-excluding filter predicate.

A facet shows what the shopper would get by changing that facet's own
selection, so its aggregate is computed with every active filter applied
except the one on the facet itself. ``FilterPredicate`` evaluates a view
of the context with that one dimension cleared and ANDs the rest.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from storefacets.domain.model.dimension import Dimension
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.model.product import Product
from storefacets.domain.service.effective_values import (
    effective_prices,
    effective_stock_statuses,
    effective_terms,
)


class StockMatchPolicy(Enum):
    """How a variable product's variation statuses satisfy a stock filter.

    ``ANY``: at least one variation has a selected status.
    ``ALL``: every variation has a selected status.
    """

    ANY = "any"
    ALL = "all"


class FilterPredicate:

    def __init__(
        self,
        context: FilterContext,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._context = context
        self._stock_policy = stock_policy

    @property
    def context(self) -> FilterContext:
        return self._context

    def matches(self, product: Product, exclude: Dimension | None = None) -> bool:
        """True if *product* passes every active filter except *exclude*'s.

        With ``exclude=None`` every active filter is applied.
        """
        return self._matches(product, self._view(exclude))

    def candidates(
        self,
        products: Iterable[Product],
        exclude: Dimension | None = None,
    ) -> Iterator[Product]:
        """Yield the products that survive ``matches(product, exclude)``."""
        view = self._view(exclude)
        for product in products:
            if self._matches(product, view):
                yield product

    # --- Internal helpers -----------------------------------------------------

    def _view(self, exclude: Dimension | None) -> FilterContext:
        if exclude is None:
            return self._context
        return self._context.without(exclude)

    def _matches(self, product: Product, ctx: FilterContext) -> bool:
        if not product.is_resolvable:
            # No effective values: fails any filter at all.
            return ctx.is_empty

        if not self._matches_price(product, ctx):
            return False
        if not self._matches_stock(product, ctx):
            return False
        if not self._matches_rating(product, ctx):
            return False
        return all(
            effective_terms(product, name) & terms
            for name, terms in ctx.attribute_filters.items()
        )

    # --- Per-dimension rules --------------------------------------------------

    @staticmethod
    def _matches_price(product: Product, ctx: FilterContext) -> bool:
        if not ctx.has_price_filter:
            return True
        return any(
            (ctx.min_price is None or price >= ctx.min_price)
            and (ctx.max_price is None or price <= ctx.max_price)
            for price in effective_prices(product)
        )

    def _matches_stock(self, product: Product, ctx: FilterContext) -> bool:
        if not ctx.stock_statuses:
            return True
        statuses = effective_stock_statuses(product)
        if self._stock_policy == StockMatchPolicy.ALL:
            return bool(statuses) and statuses <= ctx.stock_statuses
        return bool(statuses & ctx.stock_statuses)

    @staticmethod
    def _matches_rating(product: Product, ctx: FilterContext) -> bool:
        if not ctx.ratings:
            return True
        return product.rating is not None and product.rating.value in ctx.ratings
