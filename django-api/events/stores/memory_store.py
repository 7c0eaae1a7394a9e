"""In-memory implementation of the EventStore."""

import threading
from collections.abc import Iterable
from typing import ContextManager

from events.domain import Event, EventId, Registration
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Process-local catalog and ledger."""

    def __init__(
        self, events: Iterable[Event] = (), registrations: Iterable[Registration] = ()
    ) -> None:
        self._lock = threading.RLock()
        # dicts keep insertion order, which is catalog order
        self._events: dict[EventId, Event] = {}
        self._registrations: list[Registration] = list(registrations)
        for event in events:
            self.add_event(event)

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def add_event(self, event: Event) -> None:
        with self._lock:
            if event.id in self._events:
                raise ValueError(f"Duplicate event id {event.id}")
            self._events[event.id] = event

    def save_event(self, event: Event) -> None:
        with self._lock:
            if event.id not in self._events:
                raise KeyError(f"Unknown event {event.id}")
            self._events[event.id] = event

    def list_registrations(self) -> list[Registration]:
        with self._lock:
            return list(self._registrations)

    def add_registration(self, registration: Registration) -> None:
        with self._lock:
            self._registrations.append(registration)

    def atomic(self) -> ContextManager:
        return self._lock
