"""Identity of a filterable dimension.

A dimension is either one of the three fixed facets or a named attribute
dimension (``color``, ``size``...). The kind is an enum so that code
branching on dimensions never compares raw strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefacets.domain.exceptions import ValidationError


class DimensionKind(Enum):
    PRICE = "price"
    STOCK = "stock"
    RATING = "rating"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True)
class Dimension:
    kind: DimensionKind
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind == DimensionKind.ATTRIBUTE:
            if not self.name or not self.name.strip():
                raise ValidationError("Attribute dimension requires a name")
        elif self.name is not None:
            raise ValidationError(f"{self.kind.value} dimension takes no name")

    @staticmethod
    def attribute(name: str) -> Dimension:
        return Dimension(DimensionKind.ATTRIBUTE, name)

    def is_attribute(self, name: str | None = None) -> bool:
        """True for an attribute dimension, optionally a specific one."""
        if self.kind != DimensionKind.ATTRIBUTE:
            return False
        return name is None or self.name == name

    def __str__(self) -> str:
        if self.kind == DimensionKind.ATTRIBUTE:
            return f"attribute:{self.name}"
        return self.kind.value


PRICE = Dimension(DimensionKind.PRICE)
STOCK = Dimension(DimensionKind.STOCK)
RATING = Dimension(DimensionKind.RATING)
