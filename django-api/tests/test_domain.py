"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, time
from decimal import Decimal

import pytest

from accounts.domain import Role, User, UserId, dump_snapshot, load_snapshot
from events.domain import Event, EventDraft, EventId, Money, TicketCount


def make_draft(**overrides) -> EventDraft:
    values = dict(
        title="Jazz Night",
        description="Live jazz",
        date=date(2025, 10, 1),
        time=time(20, 0),
        location="Blue Note",
        organizer="Jane Smith",
        image_url="https://example.com/jazz.jpg",
        category="Music",
        price=Money.of(25),
        available_tickets=TicketCount(40),
    )
    values.update(overrides)
    return EventDraft(**values)


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        assert Money.of(0).is_free

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-1"))

    def test_money_str_format(self):
        assert str(Money.of(299)) == "299.00"

    def test_times_multiplies_amount(self):
        assert Money.of(299).times(2) == Money.of(598)


class TestTicketCount:
    """Tests for TicketCount value object."""

    def test_accepts_zero(self):
        assert TicketCount(0).value == 0

    def test_rejects_negative_value(self):
        with pytest.raises(ValueError):
            TicketCount(-1)

    def test_covers(self):
        assert TicketCount(3).covers(3)
        assert not TicketCount(3).covers(4)

    def test_minus_cannot_go_below_zero(self):
        with pytest.raises(ValueError):
            TicketCount(2).minus(3)

    def test_minus_requires_positive_quantity(self):
        with pytest.raises(ValueError):
            TicketCount(2).minus(0)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_keeps_surrounding_whitespace(self):
        assert EventId.from_string(" 5 ") != EventId("5")

    def test_blank_id_rejected(self):
        with pytest.raises(ValueError):
            EventId.from_string("   ")

    def test_generated_ids_are_unique(self):
        assert len({EventId.generate() for _ in range(100)}) == 100


class TestEvent:
    def test_from_draft_copies_fields(self):
        event = Event.from_draft(EventId("e1"), make_draft(), creator_id=UserId("2"))
        assert event.title == "Jazz Night"
        assert event.available_tickets == TicketCount(40)
        assert event.creator_id == UserId("2")

    def test_with_tickets_sold_returns_replacement(self):
        event = Event.from_draft(EventId("e1"), make_draft())
        updated = event.with_tickets_sold(40)
        assert updated.is_sold_out
        assert event.available_tickets.value == 40
        assert updated.id == event.id


class TestUser:
    def test_roles_that_can_create_events(self):
        assert Role.ORGANIZER.can_create_events
        assert Role.ADMIN.can_create_events
        assert not Role.USER.can_create_events

    def test_with_registered_event_does_not_duplicate(self):
        user = User(id=UserId("9"), name="A", email="a@example.com")
        once = user.with_registered_event("5")
        assert once.with_registered_event("5").registered_events == ("5",)

    def test_snapshot_round_trip(self):
        user = User(
            id=UserId("9"),
            name="A",
            email="a@example.com",
            role=Role.ORGANIZER,
            registered_events=("1",),
        )
        assert load_snapshot(dump_snapshot(user)) == user

    @pytest.mark.parametrize(
        "raw",
        ["not json", "[1, 2]", '{"name": "x"}', '{"id": "1", "name": "x", "email": "e", "role": "root"}'],
    )
    def test_load_snapshot_rejects_malformed_data(self, raw):
        with pytest.raises(ValueError):
            load_snapshot(raw)
