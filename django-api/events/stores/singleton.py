"""Process-wide catalog and ledger."""

from events.seed import SEED_EVENTS, SEED_REGISTRATIONS
from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore

_event_store: EventStore | None = None


def get_event_store() -> EventStore:
    """Return the shared event store, seeding it on first use."""
    global _event_store
    if _event_store is None:
        _event_store = InMemoryEventStore(SEED_EVENTS, SEED_REGISTRATIONS)
    return _event_store


def set_event_store(store: EventStore) -> None:
    global _event_store
    _event_store = store


def reset_event_store() -> None:
    """Drop the shared store; the next access reseeds it."""
    global _event_store
    _event_store = None
