"""In-memory implementation of the Order repository.

Satisfies ``IOrderRepository`` with a list (insertion order) plus an
id → position index.  A single ``threading.RLock`` guards every
operation; the Service Layer re-enters the same lock to make its
check-then-mutate sequences atomic.

Orders are frozen dataclasses, so a status change replaces the stored
instance and the in-progress slot in one locked step.  Neither can be
updated without the other.

Storage lives in the process: it is neither durable nor shared between
instances.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional
from uuid import uuid4

import structlog

from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class InMemoryOrderRepository(IOrderRepository):
    """Concrete Order repository backed by process memory."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._orders: List[Order] = []
        self._positions: Dict[str, int] = {}
        self._in_progress_id: Optional[str] = None

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def next_id(self) -> str:
        return str(uuid4())

    def insert(self, order: Order) -> None:
        with self._lock:
            self._positions[order.id] = len(self._orders)
            self._orders.append(order)
        logger.debug("order.inserted", order_id=order.id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def find(self, order_id: Optional[str]) -> Optional[Order]:
        """Return the stored snapshot, or ``None`` for unknown ids."""
        if order_id is None:
            return None
        with self._lock:
            position = self._positions.get(order_id)
            if position is None:
                return None
            return self._orders[position]

    def list_all(self) -> List[Order]:
        with self._lock:
            return list(self._orders)

    def list_pending(self) -> List[Order]:
        with self._lock:
            return [o for o in self._orders if o.status == OrderStatus.WAITING]

    def current_in_progress_id(self) -> Optional[str]:
        with self._lock:
            return self._in_progress_id

    # ------------------------------------------------------------------
    # Mutation primitives
    # ------------------------------------------------------------------

    def mark_in_progress(self, order: Order) -> Order:
        with self._lock:
            updated = self._replace(order, OrderStatus.IN_PROGRESS)
            self._in_progress_id = updated.id
        return updated

    def mark_completed(self, order: Order) -> Order:
        with self._lock:
            updated = self._replace(order, OrderStatus.COMPLETED)
            self._in_progress_id = None
        return updated

    def clear(self) -> None:
        with self._lock:
            self._orders.clear()
            self._positions.clear()
            self._in_progress_id = None

    def _replace(self, order: Order, status: OrderStatus) -> Order:
        position = self._positions[order.id]
        updated = self._orders[position].with_status(status)
        self._orders[position] = updated
        return updated


# Process-wide store shared by every request (single instance)

order_repository = InMemoryOrderRepository()
