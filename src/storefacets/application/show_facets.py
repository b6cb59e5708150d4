"""Application service: Show Facets use case (query).

Runs every facet query against one catalog snapshot and one filter context.
"""

from __future__ import annotations

from storefacets.application.dto import FacetSummaryDTO
from storefacets.application.get_attribute_counts import GetAttributeCountsHandler
from storefacets.application.get_filtered_price_range import GetFilteredPriceRangeHandler
from storefacets.application.get_rating_counts import GetRatingCountsHandler
from storefacets.application.get_stock_status_counts import GetStockStatusCountsHandler
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.service.predicate_composer import StockMatchPolicy


class ShowFacetsHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        stock_policy: StockMatchPolicy = StockMatchPolicy.ANY,
    ) -> None:
        self._catalog = catalog
        self._price = GetFilteredPriceRangeHandler(catalog, stock_policy)
        self._stock = GetStockStatusCountsHandler(catalog, stock_policy)
        self._rating = GetRatingCountsHandler(catalog, stock_policy)
        self._attribute = GetAttributeCountsHandler(catalog, stock_policy)

    def handle(self, context: FilterContext) -> FacetSummaryDTO:
        return FacetSummaryDTO(
            price=self._price.handle(context),
            stock_status=self._stock.handle(context),
            rating=self._rating.handle(context),
            attributes={
                dimension: self._attribute.handle(context, dimension)
                for dimension in sorted(self._catalog.attribute_dimensions or ())
            },
        )
