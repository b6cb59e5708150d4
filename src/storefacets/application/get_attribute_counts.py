"""Application service: attribute facet (query)."""

from __future__ import annotations

import structlog

from storefacets.domain.exceptions import InvalidDimensionError
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.dimension import Dimension
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.service.effective_values import effective_terms
from storefacets.domain.service.predicate_composer import (
    FilterPredicate,
    StockMatchPolicy,
)

logger = structlog.get_logger(__name__)


class GetAttributeCountsHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._catalog = catalog
        self._stock_policy = stock_policy

    def handle(self, context: FilterContext, dimension: str) -> dict[str, int]:
        """Count matching products per term of *dimension*.

        The filter on *dimension* itself is ignored; filters on other
        attribute dimensions still apply. Each product counts once per
        distinct term, however many of its variations carry it.

        Raises InvalidDimensionError if the catalog has no such dimension.
        """
        if not self._catalog.knows_dimension(dimension):
            logger.warning(
                "unknown_attribute_dimension",
                dimension=dimension,
                known=sorted(self._catalog.attribute_dimensions or ()),
            )
            raise InvalidDimensionError(f"Unknown attribute dimension '{dimension}'")

        predicate = FilterPredicate(context, self._stock_policy)
        counts: dict[str, int] = {}

        for product in predicate.candidates(self._catalog, exclude=Dimension.attribute(dimension)):
            for term in effective_terms(product, dimension):
                counts[term] = counts.get(term, 0) + 1

        logger.debug(
            "attribute_facet",
            catalog_version=self._catalog.version,
            dimension=dimension,
            terms=len(counts),
        )
        return counts
