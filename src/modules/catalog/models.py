"""Catalog entry value object.

A ``CatalogEntry`` is a named pizza variant with its base ingredients.
Entries are immutable and shared by reference between order line items.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    description: str
    ingredients: Tuple[str, ...]
