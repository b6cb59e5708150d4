"""JSON-file-backed implementation of CatalogRepository (read-only)."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import structlog

from storefacets.domain.exceptions import CatalogLoadError, DomainException
from storefacets.domain.model.catalog import CatalogSnapshot
from storefacets.domain.model.product import (
    Product,
    ProductKind,
    Variation,
    VariationProps,
)
from storefacets.domain.model.value_objects import Money, Rating, StockStatus
from storefacets.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogRepository interface ------------------------------------------

    def snapshot(self) -> CatalogSnapshot:
        try:
            content = self._file_path.read_bytes()
        except OSError as exc:
            raise CatalogLoadError(f"Cannot read catalog {self._file_path}: {exc}") from exc

        try:
            raw = json.loads(content)
        except ValueError as exc:
            raise CatalogLoadError(f"Catalog {self._file_path} is not valid JSON: {exc}") from exc

        try:
            snapshot = self._to_snapshot(raw, default_version=hashlib.sha256(content).hexdigest())
        except DomainException as exc:
            raise CatalogLoadError(f"Invalid catalog {self._file_path}: {exc}") from exc
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CatalogLoadError(
                f"Malformed catalog entry in {self._file_path}: {exc!r}"
            ) from exc

        logger.info(
            "catalog_loaded",
            path=str(self._file_path),
            products=len(snapshot),
            dimensions=sorted(snapshot.attribute_dimensions or ()),
            version=snapshot.version,
        )
        return snapshot

    # --- Deserialization helpers ----------------------------------------------

    def _to_snapshot(self, raw: Any, default_version: str) -> CatalogSnapshot:
        if isinstance(raw, list):
            raw = {"products": raw}
        dimensions = raw.get("attribute_dimensions")
        return CatalogSnapshot(
            products=tuple(self._to_product(item) for item in raw.get("products", [])),
            attribute_dimensions=None if dimensions is None else frozenset(dimensions),
            version=str(raw.get("version") or default_version),
        )

    @staticmethod
    def _to_product(item: dict[str, Any]) -> Product:
        product_id = str(item["id"])
        kind = ProductKind(item.get("type", ProductKind.SIMPLE.value))

        if "rating" in item and item["rating"] is not None:
            rating = Rating.of(item["rating"])
        else:
            rating = Rating.from_scores(item.get("reviews", []))

        return Product(
            id=product_id,
            name=item.get("name", product_id),
            kind=kind,
            regular_price=_money(item.get("regular_price")),
            stock_status=StockStatus.parse(item.get("stock_status", StockStatus.IN_STOCK.value)),
            rating=rating,
            attributes=item.get("attributes", {}),
            variations=tuple(
                Variation(
                    id=str(variation["id"]),
                    parent_id=product_id,
                    props=VariationProps(
                        regular_price=_money(variation.get("regular_price")),
                        stock_status=StockStatus.parse(
                            variation.get("stock_status", StockStatus.IN_STOCK.value)
                        ),
                        attributes=variation.get("attributes", {}),
                    ),
                )
                for variation in item.get("variations", [])
            ),
        )


def _money(value: Any) -> Money | None:
    if value is None or value == "":
        return None
    return Money.of(value)
