import click

from storefacets.domain.exceptions import DomainException
from storefacets.infrastructure.bootstrap import settings
from storefacets.infrastructure.cli.facet_commands import (
    facets_attribute,
    facets_price,
    facets_rating,
    facets_show,
    facets_stock,
)
from storefacets.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level.")
def cli(log_level: str | None) -> None:
    """storefacets: faceted search counts for a product catalog"""
    try:
        level = log_level or settings().log_level
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(level)


@cli.group()
def facets() -> None:
    """Query catalog facets."""


# Register subcommands
facets.add_command(facets_attribute)
facets.add_command(facets_price)
facets.add_command(facets_rating)
facets.add_command(facets_show)
facets.add_command(facets_stock)
