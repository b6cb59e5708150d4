"""CatalogSnapshot: the complete candidate set for one facet query.

A snapshot is handed to the engine by a catalog provider and is never
modified afterwards. Aggregation correctness depends on it holding the whole
catalog scope, not one page of it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from storefacets.domain.exceptions import ValidationError
from storefacets.domain.model.product import Product


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only view of products and their variations.

    ``attribute_dimensions`` is the registry of attribute dimensions the
    catalog knows about. When not given it is derived from the dimensions
    used by the products and variations themselves.
    """

    products: tuple[Product, ...] = ()
    attribute_dimensions: frozenset[str] | None = None
    version: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", tuple(self.products))

        seen: set[str] = set()
        for product in self.products:
            if product.id in seen:
                raise ValidationError(f"Duplicate product ID '{product.id}' in snapshot")
            seen.add(product.id)

        if self.attribute_dimensions is None:
            dimensions = _used_dimensions(self.products)
        else:
            dimensions = frozenset(self.attribute_dimensions)
        object.__setattr__(self, "attribute_dimensions", dimensions)

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def knows_dimension(self, name: str) -> bool:
        return name in self.attribute_dimensions  # type: ignore[operator]


def _used_dimensions(products: Iterable[Product]) -> frozenset[str]:
    dimensions: set[str] = set()
    for product in products:
        dimensions.update(product.attributes)
        for variation in product.variations:
            dimensions.update(variation.props.attributes)
    return frozenset(dimensions)
