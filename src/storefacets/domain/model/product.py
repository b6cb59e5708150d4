"""Product and Variation entities as seen by the facet engine.

Both are frozen: a catalog snapshot is a read-only view, and facet queries
may share it across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from storefacets.domain.exceptions import ValidationError
from storefacets.domain.model.value_objects import Money, Rating, StockStatus


class ProductKind(Enum):
    SIMPLE = "simple"
    VARIABLE = "variable"


def freeze_attributes(
    attributes: Mapping[str, Iterable[str]] | None,
) -> Mapping[str, frozenset[str]]:
    """Copy an attribute mapping into a read-only mapping of frozensets.

    Each dimension needs a collection of terms; a bare string would
    otherwise be split into single-character terms.
    """
    frozen: dict[str, frozenset[str]] = {}
    for dimension, terms in (attributes or {}).items():
        if isinstance(terms, (str, bytes)) or not isinstance(terms, Iterable):
            raise ValidationError(
                f"Attribute '{dimension}' must be a list of terms, got {terms!r}"
            )
        frozen[dimension] = frozenset(str(term) for term in terms)
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class VariationProps:
    """The price, stock and attribute fields a variation overrides."""

    regular_price: Money | None
    stock_status: StockStatus = StockStatus.IN_STOCK
    attributes: Mapping[str, frozenset[str]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))


@dataclass(frozen=True)
class Variation:
    id: str
    parent_id: str  # back-reference only
    props: VariationProps


@dataclass(frozen=True)
class Product:
    """A product in the catalog snapshot.

    For a variable product ``regular_price``, ``stock_status`` and
    ``attributes`` are informational only; matching and counting read the
    variations instead.
    """

    id: str
    name: str
    kind: ProductKind = ProductKind.SIMPLE
    regular_price: Money | None = None
    stock_status: StockStatus = StockStatus.IN_STOCK
    rating: Rating | None = None
    attributes: Mapping[str, frozenset[str]] = field(default_factory=dict, hash=False)
    variations: tuple[Variation, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product ID is required")
        object.__setattr__(self, "attributes", freeze_attributes(self.attributes))
        object.__setattr__(self, "variations", tuple(self.variations))

        if self.kind == ProductKind.SIMPLE and self.variations:
            raise ValidationError(
                f"Simple product '{self.id}' cannot have variations"
            )
        for variation in self.variations:
            if variation.parent_id != self.id:
                raise ValidationError(
                    f"Variation '{variation.id}' belongs to '{variation.parent_id}', "
                    f"not '{self.id}'"
                )

    @property
    def is_variable(self) -> bool:
        return self.kind == ProductKind.VARIABLE

    @property
    def is_resolvable(self) -> bool:
        """False for a variable product with no variations.

        Such a product has no effective values: it matches no filter and
        never contributes to a facet.
        """
        return not self.is_variable or bool(self.variations)
