"""Domain events for the Orders bounded context.

Lifecycle events carry the transition they record, so subscribers can
follow an order through the kitchen without reading the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from modules.orders.constants import OrderStatus
from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Raised when an order joins the kitchen queue."""

    customer_name: str = ""
    pizza_count: int = 0


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Base for events that move an order along its lifecycle."""

    previous_status: str = ""
    new_status: str = ""


@dataclass(frozen=True)
class OrderProcessingStarted(OrderStatusChanged):
    """Raised when an order takes the in-progress slot."""

    previous_status: str = OrderStatus.WAITING
    new_status: str = OrderStatus.IN_PROGRESS


@dataclass(frozen=True)
class OrderCompleted(OrderStatusChanged):
    """Raised when the in-progress order is completed."""

    previous_status: str = OrderStatus.IN_PROGRESS
    new_status: str = OrderStatus.COMPLETED
