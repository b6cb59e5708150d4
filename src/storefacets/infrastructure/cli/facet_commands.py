"""CLI commands for facet queries."""

from __future__ import annotations

import click

from storefacets.application.dto import FacetSummaryDTO, NoMatch, PriceRange
from storefacets.application.get_attribute_counts import GetAttributeCountsHandler
from storefacets.application.get_filtered_price_range import GetFilteredPriceRangeHandler
from storefacets.application.get_rating_counts import GetRatingCountsHandler
from storefacets.application.get_stock_status_counts import GetStockStatusCountsHandler
from storefacets.application.show_facets import ShowFacetsHandler
from storefacets.domain.exceptions import DomainException
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.value_objects import StockStatus
from storefacets.domain.service.predicate_composer import StockMatchPolicy
from storefacets.infrastructure.bootstrap import catalog_repository, settings
from storefacets.infrastructure.cli.filter_options import build_context, filter_options


def _load_catalog() -> CatalogSnapshot:
    try:
        return catalog_repository().snapshot()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _stock_policy() -> StockMatchPolicy:
    try:
        return settings().stock_match_policy
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("show")
@filter_options
def facets_show(**options: object) -> None:
    """Show every facet for the given filters."""
    context = build_context(**options)  # type: ignore[arg-type]
    handler = ShowFacetsHandler(_load_catalog(), _stock_policy())
    summary = handler.handle(context)
    _echo_summary(summary)


@click.command("price")
@filter_options
def facets_price(**options: object) -> None:
    """Show the price range, ignoring the price filter."""
    context = build_context(**options)  # type: ignore[arg-type]
    handler = GetFilteredPriceRangeHandler(_load_catalog(), _stock_policy())
    _echo_price(handler.handle(context))


@click.command("stock")
@filter_options
def facets_stock(**options: object) -> None:
    """Show product counts per stock status, ignoring the stock filter."""
    context = build_context(**options)  # type: ignore[arg-type]
    handler = GetStockStatusCountsHandler(_load_catalog(), _stock_policy())
    _echo_counts({status.value: count for status, count in handler.handle(context).items()})


@click.command("rating")
@filter_options
def facets_rating(**options: object) -> None:
    """Show product counts per rating, ignoring the rating filter."""
    context = build_context(**options)  # type: ignore[arg-type]
    handler = GetRatingCountsHandler(_load_catalog(), _stock_policy())
    _echo_counts({str(rating): count for rating, count in sorted(handler.handle(context).items())})


@click.command("attribute")
@click.argument("dimension")
@filter_options
def facets_attribute(dimension: str, **options: object) -> None:
    """Show product counts per term of DIMENSION, ignoring its own filter."""
    context = build_context(**options)  # type: ignore[arg-type]
    handler = GetAttributeCountsHandler(_load_catalog(), _stock_policy())

    try:
        counts = handler.handle(context, dimension)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_counts(dict(sorted(counts.items())))


# --- Output helpers -----------------------------------------------------------


def _echo_price(price: PriceRange | NoMatch) -> None:
    if isinstance(price, NoMatch):
        click.echo(f"Price: {price}")
    else:
        click.echo(f"Price: {price.min} - {price.max}")


def _echo_counts(counts: dict[str, int]) -> None:
    if not counts:
        click.echo("  (none)")
        return
    for key, count in counts.items():
        click.echo(f"  {key:<20} {count:>6}")


def _echo_summary(summary: FacetSummaryDTO) -> None:
    _echo_price(summary.price)

    click.echo("Stock status:")
    _echo_counts({status.value: summary.stock_status[status] for status in StockStatus})

    click.echo("Rating:")
    _echo_counts({str(rating): count for rating, count in sorted(summary.rating.items())})

    for dimension, counts in summary.attributes.items():
        click.echo(f"Attribute {dimension}:")
        _echo_counts(dict(sorted(counts.items())))
