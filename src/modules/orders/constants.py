"""Order domain constants.

Defines status choices and valid status transitions for the order
lifecycle state machine.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    WAITING = "WAITING", "Waiting"
    IN_PROGRESS = "IN_PROGRESS", "In progress"
    COMPLETED = "COMPLETED", "Completed"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.WAITING: {OrderStatus.IN_PROGRESS},
    OrderStatus.IN_PROGRESS: {OrderStatus.COMPLETED},
    OrderStatus.COMPLETED: set(),
}
