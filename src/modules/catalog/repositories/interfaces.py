"""Catalog repository interface.

The order service resolves requested entry types through this contract
and never touches the concrete lookup table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from modules.catalog.models import CatalogEntry


class ICatalogRepository(ABC):
    """Read-only lookup of catalog entries by type code."""

    @abstractmethod
    def resolve(self, type_id: Optional[str]) -> Optional[CatalogEntry]:
        """Return the entry for *type_id*, or ``None`` if it is unknown."""

    @abstractmethod
    def list_all(self) -> List[CatalogEntry]:
        """Return every entry in declaration order."""
