"""Kitchen log for order lifecycle events.

Each handler records what changed for the order and how many orders
are still waiting, so the log reads as the kitchen's queue history.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.orders.events import OrderCreated, OrderStatusChanged
from modules.orders.repositories import order_repository
from shared.domain.bus import IEventHandler

if TYPE_CHECKING:
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderQueuedHandler(IEventHandler[OrderCreated]):
    def __init__(self, orders: IOrderRepository) -> None:
        self._orders = orders

    def handle(self, event: OrderCreated) -> None:
        logger.info(
            "kitchen.order_queued",
            order_id=event.aggregate_id,
            customer_name=event.customer_name,
            pizza_count=event.pizza_count,
            pending=len(self._orders.list_pending()),
        )


class OrderTransitionHandler(IEventHandler[OrderStatusChanged]):
    """Logs every status change; subscribed once to ``OrderStatusChanged``."""

    def __init__(self, orders: IOrderRepository) -> None:
        self._orders = orders

    def handle(self, event: OrderStatusChanged) -> None:
        logger.info(
            "kitchen.order_transition",
            order_id=event.aggregate_id,
            transition=f"{event.previous_status} -> {event.new_status}",
            pending=len(self._orders.list_pending()),
        )


order_queued_handler = OrderQueuedHandler(order_repository)
order_transition_handler = OrderTransitionHandler(order_repository)
