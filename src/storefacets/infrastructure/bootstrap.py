"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

import pydantic

from storefacets.domain.exceptions import ConfigurationError
from storefacets.infrastructure.config import Settings
from storefacets.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    try:
        return Settings()
    except pydantic.ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {errors}") from exc


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(settings().catalog_path)
