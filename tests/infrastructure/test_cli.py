"""Tests for the facets CLI."""

import json

import pytest
from click.testing import CliRunner

from storefacets.infrastructure import bootstrap
from storefacets.infrastructure.cli.main import cli


@pytest.fixture
def catalog(tmp_path, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "attribute_dimensions": ["color"],
        "products": [
            {"id": "1", "regular_price": "10", "stock_status": "instock",
             "reviews": [5], "attributes": {"color": ["red"]}},
            {"id": "2", "regular_price": "25", "stock_status": "outofstock",
             "reviews": [3], "attributes": {"color": ["green"]}},
            {"id": "3", "regular_price": "30", "stock_status": "onbackorder",
             "attributes": {"color": ["red"]}},
            {"id": "4", "regular_price": "60", "stock_status": "instock",
             "reviews": [5], "attributes": {"color": ["blue"]}},
        ],
    }), encoding="utf-8")
    monkeypatch.setenv("STOREFACETS_CATALOG_PATH", str(path))
    bootstrap.settings.cache_clear()
    yield path
    bootstrap.settings.cache_clear()


def _run(*args):
    return CliRunner().invoke(cli, ["facets", *args])


class TestFacetCommands:

    def test_price(self, catalog):
        result = _run("price", "--stock-status", "outofstock,onbackorder")
        assert result.exit_code == 0, result.output
        assert "Price: 25.00 - 30.00" in result.output

    def test_price_no_match(self, catalog):
        result = _run("price", "--attribute", "color=purple")
        assert result.exit_code == 0, result.output
        assert "Price: no matching products" in result.output

    def test_stock(self, catalog):
        result = _run("stock", "--min-price", "20", "--stock-status", "instock")
        assert result.exit_code == 0, result.output
        lines = result.output.split()
        assert lines == ["instock", "1", "outofstock", "1", "onbackorder", "1"]

    def test_rating(self, catalog):
        result = _run("rating")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["3", "1", "5", "2"]

    def test_attribute(self, catalog):
        result = _run("attribute", "color", "--max-price", "55")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["green", "1", "red", "2"]

    def test_show(self, catalog):
        result = _run("show", "--rating", "5")
        assert result.exit_code == 0, result.output
        assert "Price: 10.00 - 60.00" in result.output
        assert "Attribute color:" in result.output


class TestFacetCommandErrors:

    def test_unknown_dimension(self, catalog):
        result = _run("attribute", "material")
        assert result.exit_code != 0
        assert "Unknown attribute dimension 'material'" in result.output

    def test_min_above_max(self, catalog):
        result = _run("price", "--min-price", "50", "--max-price", "10")
        assert result.exit_code == 2
        assert "greater than max_price" in result.output

    def test_non_numeric_price(self, catalog):
        result = _run("price", "--min-price", "cheap")
        assert result.exit_code == 2
        assert "not a number" in result.output

    def test_malformed_attribute_option(self, catalog):
        result = _run("attribute", "color", "--attribute", "red")
        assert result.exit_code == 2
        assert "DIMENSION=term1,term2" in result.output

    def test_missing_catalog(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFACETS_CATALOG_PATH", str(tmp_path / "missing.json"))
        bootstrap.settings.cache_clear()
        try:
            result = _run("stock")
        finally:
            bootstrap.settings.cache_clear()
        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output

    def test_invalid_stock_match_policy(self, catalog, monkeypatch):
        monkeypatch.setenv("STOREFACETS_STOCK_MATCH_POLICY", "sometimes")
        bootstrap.settings.cache_clear()
        result = _run("stock")
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "stock_match_policy" in result.output
        assert "Traceback" not in result.output
