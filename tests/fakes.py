"""In-memory fakes and catalog builders for testing.

FakeCatalogRepository implements the same abstract interface as the JSON
repository but hands back a snapshot built in memory. No file I/O.
"""

from __future__ import annotations

from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.product import (
    Product,
    ProductKind,
    Variation,
    VariationProps,
)
from storefacets.domain.model.value_objects import Money, Rating, StockStatus
from storefacets.domain.repository.catalog_repository import CatalogRepository

IN = StockStatus.IN_STOCK
OUT = StockStatus.OUT_OF_STOCK
BACK = StockStatus.ON_BACKORDER


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None, **kwargs) -> None:
        self._snapshot = CatalogSnapshot(products=tuple(products or []), **kwargs)
        self.calls = 0

    def snapshot(self) -> CatalogSnapshot:
        self.calls += 1
        return self._snapshot


def simple(
    product_id: str,
    price: str | int | None,
    stock: StockStatus = IN,
    rating: int | None = None,
    **attributes: list[str],
) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        kind=ProductKind.SIMPLE,
        regular_price=None if price is None else Money.of(price),
        stock_status=stock,
        rating=None if rating is None else Rating(rating),
        attributes=attributes,
    )


def variation(
    parent_id: str,
    suffix: str,
    price: str | int | None,
    stock: StockStatus = IN,
    **attributes: list[str],
) -> Variation:
    return Variation(
        id=f"{parent_id}-{suffix}",
        parent_id=parent_id,
        props=VariationProps(
            regular_price=None if price is None else Money.of(price),
            stock_status=stock,
            attributes=attributes,
        ),
    )


def variable(
    product_id: str,
    variations: list[Variation],
    rating: int | None = None,
) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        kind=ProductKind.VARIABLE,
        rating=None if rating is None else Rating(rating),
        variations=tuple(variations),
    )


def four_simple_products() -> list[Product]:
    """Four simple products: colors red, green, red, blue; ratings 5, 3, none, 5."""
    return [
        simple("1", 10, IN, 5, color=["red"]),
        simple("2", 25, OUT, 3, color=["green"]),
        simple("3", 30, BACK, None, color=["red"]),
        simple("4", 60, IN, 5, color=["blue"]),
    ]


def mixed_catalog() -> CatalogSnapshot:
    """Simple and variable products across two attribute dimensions."""
    return CatalogSnapshot(
        products=(
            *four_simple_products(),
            variable(
                "5",
                [
                    variation("5", "a", 15, IN, color=["blue"], size=["small"]),
                    variation("5", "b", 45, OUT, color=["blue"], size=["large"]),
                ],
                rating=4,
            ),
            variable(
                "6",
                [
                    variation("6", "a", 20, BACK, color=["green"], size=["small"]),
                    variation("6", "b", 22, BACK, color=["red"], size=["small"]),
                ],
            ),
        ),
        version="mixed-1",
    )
