"""Queued, typed event dispatch."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

ListenerID = int
Listener = Callable[[Any], None]

_ID_MASK = 0xFFFF


class EventManager:
    """Queues events and hands them to the listeners of their type on poll.

    When constructed with event types, only those types may be listened to
    or emitted; without any, every type is accepted.
    """

    def __init__(self, *event_types: type) -> None:
        self._restricted = bool(event_types)
        self._listeners: dict[type, list[tuple[ListenerID, Listener]]] = {
            event_type: [] for event_type in event_types
        }
        self._queue: deque[tuple[type, Any]] = deque()
        self._next_listener_id: ListenerID = 0

    def _listeners_of(self, event_type: type) -> list[tuple[ListenerID, Listener]]:
        listeners = self._listeners.get(event_type)
        if listeners is None:
            if self._restricted:
                raise TypeError(f"{event_type.__name__} is not an event type of this manager")
            listeners = self._listeners[event_type] = []
        return listeners

    def add_listener(self, event_type: type, listener: Listener) -> ListenerID:
        """Register a listener for an event type and return its id."""
        listeners = self._listeners_of(event_type)
        listener_id = self._next_listener_id
        self._next_listener_id = (self._next_listener_id + 1) & _ID_MASK
        listeners.append((listener_id, listener))
        return listener_id

    def remove_listener(self, event_type: type, listener_id: ListenerID) -> None:
        """Unregister a listener; the last listener takes its place."""
        listeners = self._listeners_of(event_type)
        for position, (existing_id, _) in enumerate(listeners):
            if existing_id == listener_id:
                listeners[position] = listeners[-1]
                listeners.pop()
                return
        raise KeyError(f"listener {listener_id} does not exist")

    def emit(self, event: Any) -> None:
        """Queue an event; a type queues a default-constructed event of it."""
        if isinstance(event, type):
            self._listeners_of(event)
            event = event()
        else:
            self._listeners_of(type(event))
        self._queue.append((type(event), event))

    def clear(self, event_type: type) -> None:
        """Remove every listener of an event type."""
        self._listeners_of(event_type).clear()

    def poll(self) -> None:
        """Dispatch queued events, in order, until the queue is empty."""
        while self._queue:
            event_type, event = self._queue.popleft()
            for _, listener in tuple(self._listeners_of(event_type)):
                listener(event)