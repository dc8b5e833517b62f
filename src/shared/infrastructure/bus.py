"""In-memory event bus implementation."""

from __future__ import annotations

import threading
from typing import Dict, List, Type

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent


class InMemoryEventBus(IEventBus):
    """In-process event bus with synchronous delivery.

    A handler subscribed to an event class also receives its subclasses,
    so one subscription to a base event covers a whole family. Each
    handler runs at most once per published event, most specific
    subscription first, on the publishing thread.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        with self._lock:
            handlers = self._handlers.setdefault(event_class, [])
            if handler not in handlers:
                handlers.append(handler)

    def handlers_for(self, event_class: Type[DomainEvent]) -> List[IEventHandler]:
        """Return the handlers an ``event_class`` instance is delivered to."""
        resolved: List[IEventHandler] = []
        with self._lock:
            for klass in event_class.__mro__:
                for handler in self._handlers.get(klass, ()):
                    if handler not in resolved:
                        resolved.append(handler)
        return resolved

    def publish(self, event: DomainEvent) -> None:
        for handler in self.handlers_for(type(event)):
            handler.handle(event)


event_bus = InMemoryEventBus()
