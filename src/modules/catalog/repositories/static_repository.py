"""In-process implementation of the catalog repository.

Backed by the immutable ``AVAILABLE_ENTRIES`` tuple; safe to share
between threads without locking.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from modules.catalog.constants import AVAILABLE_ENTRIES
from modules.catalog.models import CatalogEntry
from modules.catalog.repositories.interfaces import ICatalogRepository


class StaticCatalogRepository(ICatalogRepository):
    """Catalog repository over a fixed set of entries."""

    def __init__(self, entries: Iterable[CatalogEntry] = AVAILABLE_ENTRIES) -> None:
        self._entries = tuple(entries)
        self._by_id: Dict[str, CatalogEntry] = {
            entry.id: entry for entry in self._entries
        }

    def resolve(self, type_id: Optional[str]) -> Optional[CatalogEntry]:
        if type_id is None:
            return None
        return self._by_id.get(type_id)

    def list_all(self) -> List[CatalogEntry]:
        return list(self._entries)


catalog_repository = StaticCatalogRepository()
