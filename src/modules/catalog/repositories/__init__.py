"""Catalog repositories package."""

from modules.catalog.repositories.interfaces import ICatalogRepository
from modules.catalog.repositories.static_repository import (
    StaticCatalogRepository,
    catalog_repository,
)

__all__ = ["ICatalogRepository", "StaticCatalogRepository", "catalog_repository"]
