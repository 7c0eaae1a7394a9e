"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import ContextManager

from events.domain import Event, EventId, Registration


class EventStore(ABC):
    """Interface for catalog and ledger persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in catalog order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Append an event to the catalog."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Replace the catalog entry that has the same ID, keeping its position."""
        ...

    @abstractmethod
    def list_registrations(self) -> list[Registration]:
        """Return the ledger in creation order."""
        ...

    @abstractmethod
    def add_registration(self, registration: Registration) -> None:
        """Append a registration to the ledger."""
        ...

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Return a context manager serializing read-modify-write sequences."""
        ...
