"""Fixed pizza catalog, loaded once at import time."""

from modules.catalog.models import CatalogEntry

AVAILABLE_ENTRIES: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="MARG",
        description="Margherita",
        ingredients=("Pomodoro", "Mozzarella", "Basilico"),
    ),
    CatalogEntry(
        id="BUFA",
        description="Bufalina",
        ingredients=("Pomodoro", "Pomodorini freschi", "Mozzarella di Bufala"),
    ),
    CatalogEntry(
        id="DIAV",
        description="Diavola",
        ingredients=("Pomodoro", "Mozzarella", "Salame piccante"),
    ),
    CatalogEntry(
        id="WURS",
        description="Wurstel",
        ingredients=("Pomodoro", "Mozzarella", "Wurstel"),
    ),
)
