"""Order domain exceptions.

Raised by the Service Layer when a lifecycle rule is violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.  Each exception carries a stable ``code``
used in the error body.
"""

from __future__ import annotations

from typing import Optional


class OrderDomainError(Exception):
    """Base class for recoverable order lifecycle failures."""

    code: str = "ORDER_ERROR"
    default_message: str = "Order operation failed."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidEntryType(OrderDomainError):
    """A requested catalog type code does not resolve."""

    code = "INVALID_ENTRY_TYPE"
    default_message = "Invalid entry type"


class OrderNotFound(OrderDomainError):
    """The requested order does not exist."""

    code = "ORDER_NOT_FOUND"
    default_message = "Order id not found"


class OrderAlreadyInProgress(OrderDomainError):
    """Another order (or the same one) already holds the in-progress slot."""

    code = "ORDER_ALREADY_IN_PROGRESS"
    default_message = "Cannot start an order when another one is in progress"


class OrderAlreadyProcessed(OrderDomainError):
    """The order is no longer WAITING and cannot be started."""

    code = "ORDER_ALREADY_PROCESSED"
    default_message = "Order cannot be started because already processed"


class OrderNotInProgress(OrderDomainError):
    """Nothing, or a different order, is in progress."""

    code = "ORDER_NOT_IN_PROGRESS"
    default_message = "Order is not in progress"
