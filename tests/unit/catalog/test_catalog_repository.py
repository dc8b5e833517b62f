"""Unit tests for the static catalog repository."""

from __future__ import annotations

import pytest

from modules.catalog.constants import AVAILABLE_ENTRIES
from modules.catalog.models import CatalogEntry
from modules.catalog.repositories import StaticCatalogRepository, catalog_repository

pytestmark = pytest.mark.unit


class TestResolve:
    @pytest.mark.parametrize(
        "type_id,description",
        [
            ("MARG", "Margherita"),
            ("BUFA", "Bufalina"),
            ("DIAV", "Diavola"),
            ("WURS", "Wurstel"),
        ],
    )
    def test_known_codes_resolve(self, catalog_repo, type_id, description):
        entry = catalog_repo.resolve(type_id)
        assert entry is not None
        assert entry.id == type_id
        assert entry.description == description

    def test_margherita_ingredients_in_order(self, catalog_repo):
        entry = catalog_repo.resolve("MARG")
        assert entry.ingredients == ("Pomodoro", "Mozzarella", "Basilico")

    def test_unknown_code_returns_none(self, catalog_repo):
        assert catalog_repo.resolve("CAPR") is None

    def test_none_returns_none(self, catalog_repo):
        assert catalog_repo.resolve(None) is None

    def test_lookup_is_case_sensitive(self, catalog_repo):
        assert catalog_repo.resolve("marg") is None

    def test_same_instance_returned_each_time(self, catalog_repo):
        assert catalog_repo.resolve("DIAV") is catalog_repo.resolve("DIAV")


class TestListAll:
    def test_lists_entries_in_declaration_order(self, catalog_repo):
        ids = [entry.id for entry in catalog_repo.list_all()]
        assert ids == ["MARG", "BUFA", "DIAV", "WURS"]

    def test_returned_list_does_not_alias_storage(self, catalog_repo):
        entries = catalog_repo.list_all()
        entries.clear()
        assert len(catalog_repo.list_all()) == len(AVAILABLE_ENTRIES)


class TestCustomEntries:
    def test_repository_accepts_custom_entries(self):
        entry = CatalogEntry(id="TEST", description="Test", ingredients=("a",))
        repo = StaticCatalogRepository([entry])
        assert repo.resolve("TEST") is entry
        assert repo.resolve("MARG") is None


def test_module_singleton_uses_default_catalog():
    assert catalog_repository.resolve("WURS") is not None


def test_catalog_entries_are_immutable():
    entry = AVAILABLE_ENTRIES[0]
    with pytest.raises(AttributeError):
        entry.description = "Changed"  # type: ignore[misc]
