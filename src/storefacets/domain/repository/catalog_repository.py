"""Abstract repository for catalog snapshots.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete providers (JSON file, database, search index)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefacets.domain.model.catalog import CatalogSnapshot


class CatalogRepository(ABC):

    @abstractmethod
    def snapshot(self) -> CatalogSnapshot:
        """Return the complete catalog scope as one read-only snapshot.

        Partial or paginated snapshots are not allowed: facet counts are
        only correct over the whole candidate set.
        """
