"""A minimal multicast event: subscribe callbacks, then invoke them all."""

from __future__ import annotations

from itertools import count
from typing import Any, Callable

EventCallback = Callable[[Any], None]


class Event:
    """Holds subscribed callbacks and calls each of them on invoke."""

    def __init__(self) -> None:
        self._ids = count(1)
        self._handlers: dict[int, EventCallback] = {}

    def subscribe(self, handler: EventCallback) -> int:
        """Register *handler* and return the identifier that unsubscribes it."""
        event_id = next(self._ids)
        self._handlers[event_id] = handler
        return event_id

    def unsubscribe(self, event_id: int) -> None:
        """Remove the handler registered under *event_id*; unknown ids are ignored."""
        self._handlers.pop(event_id, None)

    def invoke(self, sender: Any) -> None:
        """Call every handler, in subscription order, with *sender*."""
        for handler in list(self._handlers.values()):
            handler(sender)

    def __len__(self) -> int:
        return len(self._handlers)