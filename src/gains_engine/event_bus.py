"""In-process event bus with an explicit subscriber list.

Replaces broadcast-by-string notifications: handlers subscribe to a
concrete event class and receive the typed event object. The bus has an
explicit lifecycle (construct, use, ``close()``) and is passed to the
components that publish rather than accessed globally.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from gains_engine.exceptions import EventBusClosedError
from gains_engine.models.events import Event

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class EventPublisher(Protocol):
    """Anything that accepts published events."""

    def publish(self, event: Event) -> None: ...


class EventBus:
    """Synchronous publish/subscribe dispatcher.

    Usage::

        with EventBus() as bus:
            bus.subscribe(TierChanged, on_tier_changed)
            engine = ProgressionEngine(bus=bus)
            engine.add_experience(250_000)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[Handler]] = {}
        self._catch_all: list[Handler] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, event_type: type[Event], handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``event_type``. Returns an unsubscribe callable."""
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for every event type."""
        self._catch_all.append(handler)

        def unsubscribe() -> None:
            if handler in self._catch_all:
                self._catch_all.remove(handler)

        return unsubscribe

    def publish(self, event: Event) -> None:
        """Deliver ``event`` to its subscribers in subscription order.

        Every handler runs even if an earlier one raises; the first error
        is re-raised once delivery is finished.

        Raises:
            EventBusClosedError: If the bus has been closed.
        """
        if self._closed:
            raise EventBusClosedError(f"cannot publish {event.name}: bus is closed")

        handlers = list(self._handlers.get(type(event), ())) + list(self._catch_all)
        logger.debug("Publishing %s to %d handler(s)", event.name, len(handlers))

        first_error: Exception | None = None
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                logger.warning("Handler %r failed for %s: %s", handler, event.name, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def close(self) -> None:
        """Drop all subscribers and refuse further publishes."""
        self._handlers.clear()
        self._catch_all.clear()
        self._closed = True

    def __enter__(self) -> EventBus:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class EventLog:
    """Subscriber that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [e.name for e in self.events]
