"""Application configuration.

Loads settings from environment variables (prefix ``STOREFACETS_``) with
sensible defaults.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from storefacets.domain.service.predicate_composer import StockMatchPolicy

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFACETS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Catalog
    catalog_path: Path = _DATA_DIR / "catalog.json"

    # Matching
    stock_match_policy: StockMatchPolicy = StockMatchPolicy.ANY

    # Logging
    log_level: str = "WARNING"
