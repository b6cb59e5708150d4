"""Application service: stock status facet (query)."""

from __future__ import annotations

import structlog

from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.dimension import STOCK
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.model.value_objects import StockStatus
from storefacets.domain.service.effective_values import effective_stock_statuses
from storefacets.domain.service.predicate_composer import (
    FilterPredicate,
    StockMatchPolicy,
)

logger = structlog.get_logger(__name__)


class GetStockStatusCountsHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._catalog = catalog
        self._stock_policy = stock_policy

    def handle(self, context: FilterContext) -> dict[StockStatus, int]:
        """Count matching products per stock status, ignoring the stock filter.

        Every status is present in the result, zero if unobserved. A variable
        product counts once in each distinct status its variations have.
        """
        predicate = FilterPredicate(context, self._stock_policy)
        counts = {status: 0 for status in StockStatus}

        survivors = 0
        for product in predicate.candidates(self._catalog, exclude=STOCK):
            survivors += 1
            for status in effective_stock_statuses(product):
                counts[status] += 1

        logger.debug("stock_facet", catalog_version=self._catalog.version, products=survivors)
        return counts
