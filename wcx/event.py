"""Bounded event queue with publish/subscribe dispatch."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass


class EventBusFullError(OverflowError):
    """Raised when the event queue or the subscription table is full."""


@dataclass(frozen=True)
class Event:
    """A queued event: an identifier and a one-byte payload."""

    id: int
    data: int = 0


EventHandler = Callable[[Event], None]


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value}")


class EventBus:
    """Queues events and delivers them to subscribers in subscription order."""

    def __init__(self, queue_capacity: int, subs_capacity: int) -> None:
        if queue_capacity <= 0 or subs_capacity <= 0:
            raise ValueError("capacities must be positive")
        self.queue_capacity = queue_capacity
        self.subs_capacity = subs_capacity
        self._queue: deque[Event] = deque()
        self._subs: list[tuple[int, EventHandler]] = []

    def subscribe(self, event_id: int, handler: EventHandler) -> None:
        """Register ``handler`` for ``event_id``; raise when the table is full."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        _check_byte("event_id", event_id)
        if len(self._subs) >= self.subs_capacity:
            raise EventBusFullError("subscription table is full")
        self._subs.append((event_id, handler))

    def publish(self, event_id: int, data: int = 0) -> None:
        """Queue an event; raise :class:`EventBusFullError` when the queue is full."""
        _check_byte("event_id", event_id)
        _check_byte("data", data)
        if len(self._queue) >= self.queue_capacity:
            raise EventBusFullError("event queue is full")
        self._queue.append(Event(event_id, data))

    def dispatch(self) -> int:
        """Drain the queue, including events published by handlers.

        Return the number of handler calls made.
        """
        calls = 0
        while self._queue:
            event = self._queue.popleft()
            for event_id, handler in self._subs:
                if event_id == event.id:
                    handler(event)
                    calls += 1
        return calls

    def pending(self) -> int:
        return len(self._queue)