"""Application service: rating facet (query)."""

from __future__ import annotations

import structlog

from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.dimension import RATING
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.service.predicate_composer import (
    FilterPredicate,
    StockMatchPolicy,
)

logger = structlog.get_logger(__name__)


class GetRatingCountsHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._catalog = catalog
        self._stock_policy = stock_policy

    def handle(self, context: FilterContext) -> dict[int, int]:
        """Count matching products per rounded rating, ignoring the rating filter.

        Unrated products are left out, and so are ratings nobody has; a
        caller rendering all five stars fills in the zeros.
        """
        predicate = FilterPredicate(context, self._stock_policy)
        counts: dict[int, int] = {}

        for product in predicate.candidates(self._catalog, exclude=RATING):
            if product.rating is None or not product.is_resolvable:
                continue
            counts[product.rating.value] = counts.get(product.rating.value, 0) + 1

        logger.debug("rating_facet", catalog_version=self._catalog.version, buckets=len(counts))
        return counts
