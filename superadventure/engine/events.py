"""
Player notification channels.

Two event kinds leave the engine:
- PropertyChanged: an attribute of the Player changed, named the way the
  presentation layer keys its refresh logic ("CurrentLocation", "Gold",
  "Weapons", "Potions", ...)
- Message: one line of narration, rendered in emission order

Handlers run synchronously in subscription order. A failing handler is
logged and isolated so narration always reaches the other subscribers.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyChanged:
    """A named Player attribute changed."""

    name: str


@dataclass(frozen=True)
class Message:
    """A line of narration."""

    text: str
    add_extra_new_line: bool = False


Handler = Callable[[Any], None]


class EventBus:
    """Synchronous publish/subscribe keyed by event type."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[type, list[Handler]] = defaultdict(list)
        self._last_publish_errors: list[Exception] = []

    def subscribe(self, event_type: type, handler: Handler) -> None:
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Handler) -> None:
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: object) -> None:
        self._last_publish_errors = []
        event_type = type(event)
        for handler in list(self._subscribers[event_type]):
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                handler_name = getattr(handler, "__qualname__", repr(handler))
                logger.exception(
                    "Event handler %s failed on %s and was isolated",
                    handler_name,
                    event_type.__name__,
                )

    def last_publish_errors(self) -> list[Exception]:
        return list(self._last_publish_errors)


class EventRecorder:
    """
    Collects published events in order.

    Used by the console shell and by tests to inspect exactly what a
    Player action emitted.
    """

    def __init__(self, bus: EventBus) -> None:
        self.messages: list[Message] = []
        self.properties: list[str] = []
        bus.subscribe(Message, self.messages.append)
        bus.subscribe(PropertyChanged, self._on_property_changed)

    def _on_property_changed(self, event: PropertyChanged) -> None:
        self.properties.append(event.name)

    @property
    def lines(self) -> list[str]:
        return [message.text for message in self.messages]

    def clear(self) -> None:
        self.messages.clear()
        self.properties.clear()
