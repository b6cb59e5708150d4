"""Application service: price range facet (query)."""

from __future__ import annotations

import structlog

from storefacets.application.dto import NoMatch, PriceRange
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.dimension import PRICE
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.model.value_objects import Money
from storefacets.domain.service.effective_values import effective_prices
from storefacets.domain.service.predicate_composer import (
    FilterPredicate,
    StockMatchPolicy,
)

logger = structlog.get_logger(__name__)


class GetFilteredPriceRangeHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._catalog = catalog
        self._stock_policy = stock_policy

    def handle(self, context: FilterContext) -> PriceRange | NoMatch:
        """Return the price span of products matching every non-price filter.

        A variable product contributes the price of each of its variations.
        """
        predicate = FilterPredicate(context, self._stock_policy)

        prices: list[Money] = []
        for product in predicate.candidates(self._catalog, exclude=PRICE):
            prices.extend(effective_prices(product))

        logger.debug("price_facet", catalog_version=self._catalog.version, prices=len(prices))

        if not prices:
            return NoMatch()
        return PriceRange(min=min(prices), max=max(prices))
