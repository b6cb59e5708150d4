"""Tests for the ShowFacets use case."""

from concurrent.futures import ThreadPoolExecutor

from storefacets.application.dto import NoMatch, PriceRange
from storefacets.application.get_attribute_counts import GetAttributeCountsHandler
from storefacets.application.get_filtered_price_range import GetFilteredPriceRangeHandler
from storefacets.application.get_rating_counts import GetRatingCountsHandler
from storefacets.application.get_stock_status_counts import GetStockStatusCountsHandler
from storefacets.application.show_facets import ShowFacetsHandler
from storefacets.domain.model.filter_context import FilterContext
from storefacets.domain.model.value_objects import Money
from tests.fakes import BACK, IN, OUT, FakeCatalogRepository, mixed_catalog


class TestShowFacets:

    def test_summary_matches_individual_queries(self):
        catalog = mixed_catalog()
        ctx = FilterContext.from_query_params({
            "stock_status": ["instock"],
            "max_price": 50,
            "attributes": {"color": ["blue"]},
        })
        summary = ShowFacetsHandler(catalog).handle(ctx)

        assert summary.price == GetFilteredPriceRangeHandler(catalog).handle(ctx)
        assert summary.stock_status == GetStockStatusCountsHandler(catalog).handle(ctx)
        assert summary.rating == GetRatingCountsHandler(catalog).handle(ctx)
        assert summary.attributes == {
            "color": GetAttributeCountsHandler(catalog).handle(ctx, "color"),
            "size": GetAttributeCountsHandler(catalog).handle(ctx, "size"),
        }

    def test_mixed_catalog_default_summary(self):
        summary = ShowFacetsHandler(mixed_catalog()).handle(FilterContext())
        assert summary.price == PriceRange(min=Money.of(10), max=Money.of(60))
        assert summary.stock_status == {IN: 3, OUT: 2, BACK: 2}
        assert summary.rating == {5: 2, 3: 1, 4: 1}
        assert summary.attributes == {
            "color": {"red": 3, "green": 2, "blue": 2},
            "size": {"small": 2, "large": 1},
        }

    def test_empty_catalog(self):
        repo = FakeCatalogRepository([], attribute_dimensions=frozenset({"color"}))
        summary = ShowFacetsHandler(repo.snapshot()).handle(FilterContext())
        assert isinstance(summary.price, NoMatch)
        assert summary.stock_status == {IN: 0, OUT: 0, BACK: 0}
        assert summary.rating == {}
        assert summary.attributes == {"color": {}}

    def test_queries_can_share_a_snapshot_across_threads(self):
        catalog = mixed_catalog()
        ctx = FilterContext.from_query_params({"stock_status": ["onbackorder"]})
        expected = ShowFacetsHandler(catalog).handle(ctx)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: ShowFacetsHandler(catalog).handle(ctx), range(16)))

        assert all(result == expected for result in results)
        assert ctx == FilterContext.from_query_params({"stock_status": ["onbackorder"]})

