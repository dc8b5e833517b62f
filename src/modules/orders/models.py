"""Order and OrderLineItem domain models.

Both are frozen dataclasses: a status change produces a new ``Order``
instance that replaces the stored one, so every value returned by the
store is an immutable snapshot.

Invariants:
- ``line_items`` is non-empty and every item references a resolved
  ``CatalogEntry``.
- ``status`` only moves forward along ``VALID_TRANSITIONS``.
- ``id`` never changes for the lifetime of the order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Tuple

from modules.catalog.models import CatalogEntry
from modules.orders.constants import VALID_TRANSITIONS, OrderStatus


@dataclass(frozen=True)
class OrderLineItem:
    """One ordered quantity of a catalog entry."""

    catalog_entry: CatalogEntry
    quantity: int
    additional_ingredients: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1.")


@dataclass(frozen=True)
class Order:
    """Order aggregate root."""

    id: str
    customer_name: str
    line_items: Tuple[OrderLineItem, ...]
    created_at: datetime
    status: OrderStatus = OrderStatus.WAITING

    def __post_init__(self) -> None:
        if not self.customer_name:
            raise ValueError("Customer name must not be empty.")
        if not self.line_items:
            raise ValueError("Order must have at least one line item.")

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        allowed = VALID_TRANSITIONS.get(self.status, set())
        return new_status in allowed

    def with_status(self, new_status: OrderStatus) -> Order:
        """Return a copy of this order carrying *new_status*."""
        return replace(self, status=new_status)
