from django.apps import AppConfig


class OrdersConfig(AppConfig):
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import OrderCreated, OrderStatusChanged
        from modules.orders.handlers import (
            order_queued_handler,
            order_transition_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderCreated, order_queued_handler)
        event_bus.subscribe(OrderStatusChanged, order_transition_handler)
