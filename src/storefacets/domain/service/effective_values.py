"""Domain service: effective values of a product.

A simple product is matched and counted on its own fields. A variable
product is matched and counted on the union of its variations' fields.
Every facet reads product values through ``effective_values`` so the
"count a product once per distinct value" rule stays the same everywhere.
"""

from __future__ import annotations

from enum import Enum

from storefacets.domain.model.product import Product, VariationProps
from storefacets.domain.model.value_objects import Money, StockStatus


class ValueField(Enum):
    PRICE = "price"
    STOCK_STATUS = "stock_status"
    ATTRIBUTE = "attribute"


def effective_values(
    product: Product,
    value_field: ValueField,
    dimension: str | None = None,
) -> frozenset:
    """Return the distinct values *product* exposes for *value_field*.

    ``dimension`` names the attribute dimension and is required for
    ``ValueField.ATTRIBUTE``. A variable product without variations yields
    an empty set for every field.
    """
    if value_field == ValueField.ATTRIBUTE and not dimension:
        raise ValueError("effective_values(ATTRIBUTE) requires a dimension")

    if not product.is_variable:
        return _own_values(product, value_field, dimension)

    values: set = set()
    for variation in product.variations:
        values.update(_props_values(variation.props, value_field, dimension))
    return frozenset(values)


def effective_prices(product: Product) -> frozenset[Money]:
    return effective_values(product, ValueField.PRICE)


def effective_stock_statuses(product: Product) -> frozenset[StockStatus]:
    return effective_values(product, ValueField.STOCK_STATUS)


def effective_terms(product: Product, dimension: str) -> frozenset[str]:
    return effective_values(product, ValueField.ATTRIBUTE, dimension)


# --- Internal helpers ---------------------------------------------------------


def _own_values(product: Product, value_field: ValueField, dimension: str | None) -> frozenset:
    if value_field == ValueField.PRICE:
        return frozenset() if product.regular_price is None else frozenset({product.regular_price})
    if value_field == ValueField.STOCK_STATUS:
        return frozenset({product.stock_status})
    return product.attributes.get(dimension, frozenset())


def _props_values(props: VariationProps, value_field: ValueField, dimension: str | None) -> frozenset:
    if value_field == ValueField.PRICE:
        return frozenset() if props.regular_price is None else frozenset({props.regular_price})
    if value_field == ValueField.STOCK_STATUS:
        return frozenset({props.stock_status})
    return props.attributes.get(dimension, frozenset())
