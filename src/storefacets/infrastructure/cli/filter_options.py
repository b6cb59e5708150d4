"""Turns raw command-line filter options into a FilterContext.

This is the query-parameter normalizer: comma-separated lists and numeric
strings are parsed here, so the engine only ever sees typed values.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

import click

from storefacets.domain.exceptions import DomainException
from storefacets.domain.model.filter_context import FilterContext


def filter_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared filter options to a facet command."""
    decorators = [
        click.option(
            "--stock-status", "stock_status", default=None,
            help="Comma-separated stock statuses (instock,outofstock,onbackorder).",
        ),
        click.option("--min-price", default=None, help="Lower price bound (inclusive)."),
        click.option("--max-price", default=None, help="Upper price bound (inclusive)."),
        click.option("--rating", default=None, help="Comma-separated ratings (1-5)."),
        click.option(
            "--attribute", "attributes", multiple=True,
            help="Attribute filter as DIMENSION=term1,term2 (repeatable).",
        ),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def build_context(
    stock_status: str | None,
    min_price: str | None,
    max_price: str | None,
    rating: str | None,
    attributes: tuple[str, ...],
) -> FilterContext:
    """Normalize raw option strings and build the filter context."""
    params: dict[str, Any] = {
        "stock_status": split_list(stock_status),
        "min_price": parse_number("--min-price", min_price),
        "max_price": parse_number("--max-price", max_price),
        "rating": [parse_int("--rating", token) for token in split_list(rating)],
        "attributes": parse_attributes(attributes),
    }
    try:
        return FilterContext.from_query_params(params)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


def split_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def parse_number(option: str, raw: str | None) -> Decimal | None:
    if raw is None or not raw.strip():
        return None
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        raise click.BadParameter(f"{raw!r} is not a number", param_hint=option)


def parse_int(option: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"{raw!r} is not an integer", param_hint=option)


def parse_attributes(raw: tuple[str, ...]) -> dict[str, list[str]]:
    result: dict[str, list[str]] = {}
    for entry in raw:
        dimension, sep, terms = entry.partition("=")
        if not sep or not dimension.strip():
            raise click.BadParameter(
                f"{entry!r} should look like DIMENSION=term1,term2",
                param_hint="--attribute",
            )
        result.setdefault(dimension.strip(), []).extend(split_list(terms))
    return result
