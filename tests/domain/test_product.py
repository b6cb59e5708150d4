"""Unit tests for Product, Variation and CatalogSnapshot."""

import pytest

from storefacets.domain.exceptions import ValidationError
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.product import Product, ProductKind
from tests.fakes import simple, variable, variation


class TestProduct:

    def test_attributes_are_frozen(self):
        p = simple("1", 10, color=["red", "blue"])
        assert p.attributes["color"] == frozenset({"red", "blue"})
        with pytest.raises(TypeError):
            p.attributes["size"] = frozenset({"xl"})  # type: ignore[index]

    def test_attribute_source_mapping_is_copied(self):
        source = {"color": ["red"]}
        p = Product(id="1", name="Shirt", attributes=source)
        source["color"].append("blue")
        assert p.attributes["color"] == frozenset({"red"})

    def test_string_terms_rejected(self):
        with pytest.raises(ValidationError, match="must be a list of terms"):
            simple("1", 10, color="red")  # type: ignore[arg-type]

    def test_string_terms_rejected_on_variations(self):
        with pytest.raises(ValidationError, match="must be a list of terms"):
            variation("1", "a", 10, color="red")  # type: ignore[arg-type]

    def test_simple_product_cannot_have_variations(self):
        with pytest.raises(ValidationError, match="cannot have variations"):
            Product(
                id="1", name="Shirt", kind=ProductKind.SIMPLE,
                variations=(variation("1", "a", 10),),
            )

    def test_variation_must_point_back_to_parent(self):
        with pytest.raises(ValidationError, match="belongs to"):
            variable("1", [variation("2", "a", 10)])

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError, match="ID is required"):
            Product(id="", name="Nameless")

    def test_resolvable(self):
        assert simple("1", 10).is_resolvable
        assert variable("2", [variation("2", "a", 10)]).is_resolvable
        assert not variable("3", []).is_resolvable

    def test_products_are_hashable(self):
        p = variable("2", [variation("2", "a", 10, color=["red"])])
        assert p in {p}


class TestCatalogSnapshot:

    def test_dimensions_derived_from_products_and_variations(self):
        snapshot = CatalogSnapshot(products=(
            simple("1", 10, color=["red"]),
            variable("2", [variation("2", "a", 10, size=["xl"])]),
        ))
        assert snapshot.attribute_dimensions == frozenset({"color", "size"})

    def test_declared_dimensions_win(self):
        snapshot = CatalogSnapshot(products=(), attribute_dimensions=frozenset({"color"}))
        assert snapshot.knows_dimension("color")
        assert not snapshot.knows_dimension("size")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product ID"):
            CatalogSnapshot(products=(simple("1", 10), simple("1", 20)))

    def test_iterates_products_in_order(self):
        products = (simple("1", 10), simple("2", 20))
        snapshot = CatalogSnapshot(products=products)
        assert list(snapshot) == list(products)
        assert len(snapshot) == 2
