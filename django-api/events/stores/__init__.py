from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore
from events.stores.singleton import get_event_store, reset_event_store, set_event_store

__all__ = [
    "EventStore",
    "InMemoryEventStore",
    "get_event_store",
    "set_event_store",
    "reset_event_store",
]
