"""Order repository interface.

The repository is the exclusive owner of order state and of the single
"in-progress" slot.  The Service Layer depends exclusively on this
contract and is the only caller of the mutating primitives
(``mark_in_progress`` / ``mark_completed``).

Primitives do **not** re-check the lifecycle invariant: callers must
hold ``lock`` and validate the transition before invoking them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ContextManager, List, Optional

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(ABC):
    """Repository contract for the Order aggregate root."""

    @property
    @abstractmethod
    def lock(self) -> ContextManager:
        """Re-entrant lock guarding every read and write of the store."""

    @abstractmethod
    def next_id(self) -> str:
        """Return a fresh, collision-resistant order identifier."""

    @abstractmethod
    def insert(self, order: Order) -> None:
        """Append *order*; its id must not already be stored."""

    @abstractmethod
    def find(self, order_id: Optional[str]) -> Optional[Order]:
        """Retrieve an order snapshot by id."""

    @abstractmethod
    def list_all(self) -> List[Order]:
        """Return every order in insertion order."""

    @abstractmethod
    def list_pending(self) -> List[Order]:
        """Return WAITING orders in insertion order."""

    @abstractmethod
    def current_in_progress_id(self) -> Optional[str]:
        """Return the id holding the in-progress slot, if any."""

    @abstractmethod
    def mark_in_progress(self, order: Order) -> Order:
        """Set *order* IN_PROGRESS and record it in the in-progress slot."""

    @abstractmethod
    def mark_completed(self, order: Order) -> Order:
        """Set *order* COMPLETED and clear the in-progress slot."""

    @abstractmethod
    def clear(self) -> None:
        """Reset to an empty store (test support only)."""
