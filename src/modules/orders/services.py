"""Order service layer (Use Cases).

Orchestrates order creation and the WAITING → IN_PROGRESS → COMPLETED
lifecycle.  This service is the only caller of the repository's
mutating primitives.

Rules enforced:
- Every requested entry type must resolve in the catalog; creation is
  all-or-nothing.
- At most one order is IN_PROGRESS at any instant.  Start and complete
  hold the repository lock across check and mutation, so concurrent
  callers are totally ordered.
- A failed transition leaves the order unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional

import structlog
from django.utils import timezone

from modules.orders.constants import OrderStatus
from modules.orders.events import OrderCompleted, OrderCreated, OrderProcessingStarted
from modules.orders.exceptions import (
    InvalidEntryType,
    OrderAlreadyInProgress,
    OrderAlreadyProcessed,
    OrderNotFound,
    OrderNotInProgress,
)
from modules.orders.models import Order, OrderLineItem
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.catalog.repositories.interfaces import ICatalogRepository
    from modules.orders.dtos import CreateOrderDTO, CreateOrderEntryDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories, the clock and the event bus via constructor
    injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        catalog_repository: ICatalogRepository,
        clock: Callable[[], datetime] = timezone.now,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._catalog_repo = catalog_repository
        self._clock = clock
        self._event_bus = event_bus if event_bus is not None else default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> str:
        """Create a WAITING order and return its id.

        All entries are resolved before anything is stored, so an
        unknown type leaves the repository untouched.

        Raises:
            InvalidEntryType: an entry type is not in the catalog.
        """
        log = logger.bind(entry_count=len(dto.entries))

        line_items = tuple(self._build_line_item(entry) for entry in dto.entries)

        order = Order(
            id=self._order_repo.next_id(),
            customer_name=dto.username,
            line_items=line_items,
            created_at=self._clock(),
            status=OrderStatus.WAITING,
        )
        self._order_repo.insert(order)

        log.info("order.created", order_id=order.id)
        self._event_bus.publish(
            OrderCreated(
                aggregate_id=order.id,
                customer_name=order.customer_name,
                pizza_count=sum(item.quantity for item in line_items),
            )
        )
        return order.id

    def start_processing(self, order_id: str) -> None:
        """Move a WAITING order into the in-progress slot.

        Re-starting the order that already holds the slot is rejected
        like any other start while the slot is taken.

        Raises:
            OrderAlreadyInProgress: the in-progress slot is occupied.
            OrderNotFound: order does not exist.
            OrderAlreadyProcessed: order is not WAITING.
        """
        log = logger.bind(order_id=order_id)

        with self._order_repo.lock:
            current_id = self._order_repo.current_in_progress_id()
            if current_id is not None:
                log.warning("order.start_rejected", in_progress_id=current_id)
                raise OrderAlreadyInProgress()

            order = self._order_repo.find(order_id)
            if order is None:
                raise OrderNotFound()

            if not order.can_transition_to(OrderStatus.IN_PROGRESS):
                log.warning("order.already_processed", current_status=order.status)
                raise OrderAlreadyProcessed()

            self._order_repo.mark_in_progress(order)

        log.info("order.processing_started")
        self._event_bus.publish(OrderProcessingStarted(aggregate_id=order_id))

    def complete_processing(self, order_id: str) -> None:
        """Complete the order currently in progress.

        Raises:
            OrderNotInProgress: nothing, or a different order, is in progress.
            OrderNotFound: the in-progress id does not resolve.
        """
        log = logger.bind(order_id=order_id)

        with self._order_repo.lock:
            current_id = self._order_repo.current_in_progress_id()
            if current_id is None or current_id != order_id:
                log.warning("order.complete_rejected", in_progress_id=current_id)
                raise OrderNotInProgress()

            order = self._order_repo.find(order_id)
            if order is None:
                log.error("order.in_progress_missing")
                raise OrderNotFound()

            self._order_repo.mark_completed(order)

        log.info("order.completed")
        self._event_bus.publish(OrderCompleted(aggregate_id=order_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_details(self, order_id: str) -> Order:
        """Retrieve a single order snapshot by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.find(order_id)
        if order is None:
            raise OrderNotFound()
        return order

    def get_status(self, order_id: str) -> OrderStatus:
        """Return the current status of an order.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        return self.get_details(order_id).status

    def list_pending(self) -> List[Order]:
        """Return WAITING orders in creation order."""
        return self._order_repo.list_pending()

    def list_all(self) -> List[Order]:
        """Return every order in creation order."""
        return self._order_repo.list_all()

    def get_order_in_progress(self) -> Optional[Order]:
        """Return the order holding the in-progress slot, or ``None``."""
        with self._order_repo.lock:
            current_id = self._order_repo.current_in_progress_id()
            if current_id is None:
                return None
            return self._order_repo.find(current_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _build_line_item(self, entry: CreateOrderEntryDTO) -> OrderLineItem:
        catalog_entry = self._catalog_repo.resolve(entry.type)
        if catalog_entry is None:
            logger.warning("order.invalid_entry_type", entry_type=entry.type)
            raise InvalidEntryType(f"Invalid entry type {entry.type!r}")

        return OrderLineItem(
            catalog_entry=catalog_entry,
            quantity=entry.quantity,
            additional_ingredients=tuple(entry.additional_ingredients),
        )
