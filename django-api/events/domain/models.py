"""Domain models representing catalog and ledger state.

These are pure domain objects with no API input rules.
Records are immutable; updates produce replacement records.
"""

from dataclasses import dataclass, fields, replace
from datetime import date, time

from accounts.domain import UserId
from events.domain.value_objects import EventId, Money, RegistrationId, TicketCount

ALL_CATEGORIES = "All"

CATEGORIES = (
    "Technology",
    "Business",
    "Music",
    "Food",
    "Health",
    "Sports",
    "Arts",
    "Education",
    "Entertainment",
    "Other",
)


@dataclass(frozen=True)
class EventDraft:
    """Everything needed to publish an Event except its identifier."""

    title: str
    description: str
    date: date
    time: time
    location: str
    organizer: str
    image_url: str
    category: str
    price: Money
    available_tickets: TicketCount
    is_featured: bool = False


@dataclass(frozen=True)
class Event:
    """Domain representation of a published Event."""

    id: EventId
    title: str
    description: str
    date: date
    time: time
    location: str
    organizer: str
    image_url: str
    category: str
    price: Money
    available_tickets: TicketCount
    is_featured: bool = False
    creator_id: UserId | None = None

    @classmethod
    def from_draft(
        cls, event_id: EventId, draft: EventDraft, creator_id: UserId | None = None
    ) -> "Event":
        values = {f.name: getattr(draft, f.name) for f in fields(draft)}
        return cls(id=event_id, creator_id=creator_id, **values)

    @property
    def is_sold_out(self) -> bool:
        return self.available_tickets.value == 0

    def with_tickets_sold(self, quantity: int) -> "Event":
        """Return a copy with ``quantity`` tickets removed from inventory."""
        return replace(self, available_tickets=self.available_tickets.minus(quantity))


@dataclass(frozen=True)
class Registration:
    """Ledger entry for one user's ticket purchase for one event."""

    id: RegistrationId
    event_id: EventId
    user_id: UserId
    ticket_quantity: int
    total_price: Money
    registration_date: date

    def __post_init__(self) -> None:
        if self.ticket_quantity < 1:
            raise ValueError("Ticket quantity must be at least 1")


@dataclass(frozen=True)
class Dashboard:
    """Per-user view over the catalog and ledger."""

    upcoming: tuple[Event, ...] = ()
    past: tuple[Event, ...] = ()
    created: tuple[Event, ...] = ()
    registrations: tuple[Registration, ...] = ()
