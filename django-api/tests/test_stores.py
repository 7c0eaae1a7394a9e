"""Tests for the in-memory stores.

Run with: pytest tests/test_stores.py -v
"""

from dataclasses import replace

import pytest

from accounts.domain import User, UserId
from accounts.stores import InMemoryUserStore, SessionClientStorage, get_user_store
from events.domain import EventId, TicketCount
from events.seed import SEED_EVENTS
from events.stores import InMemoryEventStore, get_event_store, reset_event_store


class TestInMemoryEventStore:
    def test_keeps_catalog_order(self):
        store = InMemoryEventStore(SEED_EVENTS)
        assert [e.id.value for e in store.list_events()] == ["1", "2", "3", "4", "5", "6"]

    def test_save_event_replaces_in_place(self):
        store = InMemoryEventStore(SEED_EVENTS)
        updated = replace(SEED_EVENTS[2], available_tickets=TicketCount(1))
        store.save_event(updated)
        assert store.list_events()[2] == updated
        assert store.get_event(EventId("3")).available_tickets.value == 1

    def test_save_unknown_event_raises(self):
        store = InMemoryEventStore()
        with pytest.raises(KeyError):
            store.save_event(SEED_EVENTS[0])

    def test_duplicate_event_id_rejected(self):
        store = InMemoryEventStore(SEED_EVENTS)
        with pytest.raises(ValueError):
            store.add_event(SEED_EVENTS[0])

    def test_list_returns_copy(self):
        store = InMemoryEventStore(SEED_EVENTS)
        store.list_events().clear()
        assert len(store.list_events()) == 6


class TestSingletons:
    def test_event_store_is_seeded_and_shared(self):
        assert get_event_store() is get_event_store()
        assert len(get_event_store().list_events()) == 6
        assert len(get_event_store().list_registrations()) == 2

    def test_reset_reseeds(self):
        first = get_event_store()
        reset_event_store()
        assert get_event_store() is not first

    def test_user_store_is_seeded(self):
        emails = [u.email for u in get_user_store().list_users()]
        assert emails == ["john@example.com", "jane@example.com", "admin@example.com"]


class TestInMemoryUserStore:
    def test_add_user_enforces_unique_email(self):
        store = InMemoryUserStore()
        assert store.add_user(User(id=UserId("a"), name="A", email="x@example.com"))
        assert not store.add_user(User(id=UserId("b"), name="B", email="x@example.com"))
        assert len(store.list_users()) == 1

    def test_save_user_replaces_record(self):
        store = InMemoryUserStore()
        user = User(id=UserId("a"), name="A", email="x@example.com")
        store.add_user(user)
        store.save_user(user.with_registered_event("1"))
        assert store.get_user(UserId("a")).registered_events == ("1",)


class TestSessionClientStorage:
    def test_reads_and_writes_session(self):
        session = {}
        storage = SessionClientStorage(session)
        storage.set_item("user", "{}")
        assert storage.get_item("user") == "{}"
        storage.remove_item("user")
        assert storage.get_item("user") is None
        storage.remove_item("user")
