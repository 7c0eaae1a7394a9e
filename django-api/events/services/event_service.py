"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores) and the identity service
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models, booleans for mutations, or domain errors
"""

import logging
from collections.abc import Callable
from datetime import date

from accounts.services import IdentityService
from events.domain import (
    ALL_CATEGORIES,
    Dashboard,
    Event,
    EventDraft,
    EventId,
    Registration,
    RegistrationId,
)
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for catalog queries and ticket registration."""

    def __init__(
        self,
        store: EventStore,
        identity: IdentityService,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._identity = identity
        self._today = today

    def list_events(self) -> list[Event]:
        """Return the full catalog."""
        return self._store.list_events()

    def featured_events(self) -> list[Event]:
        return [event for event in self._store.list_events() if event.is_featured]

    def user_events(self) -> list[Event]:
        """Events the current user registered for or created."""
        user = self._identity.current_user
        if user is None:
            return []
        return [
            event
            for event in self._store.list_events()
            if user.is_registered_for(event.id.value) or event.creator_id == user.id
        ]

    def created_events(self) -> list[Event]:
        user = self._identity.current_user
        if user is None or not user.can_create_events:
            return []
        return [e for e in self._store.list_events() if e.creator_id == user.id]

    def user_registrations(self) -> list[Registration]:
        user = self._identity.current_user
        if user is None:
            return []
        return [r for r in self._store.list_registrations() if r.user_id == user.id]

    def dashboard(self) -> Dashboard:
        today = self._today()
        events = self.user_events()
        return Dashboard(
            upcoming=tuple(e for e in events if e.date >= today),
            past=tuple(e for e in events if e.date < today),
            created=tuple(self.created_events()),
            registrations=tuple(self.user_registrations()),
        )

    def get_event_by_id(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if there is no such event."""
        try:
            return self._store.get_event(EventId.from_string(event_id))
        except ValueError:
            return None

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except ValueError:
            raise InvalidEventIdError() from None
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def search_events(self, query: str | None) -> list[Event]:
        """Case-insensitive substring search over title, description, location and category."""
        events = self.list_events()
        if not query:
            return events
        needle = query.lower()
        return [
            event
            for event in events
            if needle in event.title.lower()
            or needle in event.description.lower()
            or needle in event.location.lower()
            or needle in event.category.lower()
        ]

    def filter_events_by_category(self, category: str | None) -> list[Event]:
        events = self.list_events()
        if not category or category == ALL_CATEGORIES:
            return events
        return [event for event in events if event.category == category]

    def browse_events(self, search: str | None, category: str | None) -> list[Event]:
        """Catalog listing narrowed by both a search query and a category."""
        matching = {event.id for event in self.filter_events_by_category(category)}
        return [event for event in self.search_events(search) if event.id in matching]

    def events_in_month(self, year: int, month: int) -> list[Event]:
        events = [
            e for e in self.list_events() if (e.date.year, e.date.month) == (year, month)
        ]
        return sorted(events, key=lambda e: (e.date, e.time))

    def create_event(self, draft: EventDraft) -> Event:
        """Publish an event under a fresh ID.

        No validation or authorization happens here; callers are expected to
        have done both.
        """
        user = self._identity.current_user
        event = Event.from_draft(
            EventId.generate(), draft, creator_id=user.id if user else None
        )
        self._store.add_event(event)
        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    def is_registered(self, event_id: str) -> bool:
        user = self._identity.current_user
        return user is not None and user.is_registered_for(event_id)

    def register_for_event(self, event_id: str, ticket_quantity: int) -> bool:
        """Buy ``ticket_quantity`` tickets for the current user.

        Fails without any state change when there is no session, the event
        does not exist, the user is already registered, or the quantity is
        not between 1 and the event's available tickets.
        """
        user = self._identity.current_user
        if user is None:
            return False
        with self._store.atomic():
            event = self.get_event_by_id(event_id)
            if event is None:
                return False
            if user.is_registered_for(event.id.value):
                logger.info("User %s already registered for event %s", user.id, event.id)
                return False
            if ticket_quantity < 1 or not event.available_tickets.covers(ticket_quantity):
                logger.info(
                    "Rejected %s tickets for event %s: %s available",
                    ticket_quantity,
                    event.id,
                    event.available_tickets.value,
                )
                return False
            if not self._identity.record_registration(user.id, event.id.value):
                return False
            registration = Registration(
                id=RegistrationId.generate(),
                event_id=event.id,
                user_id=user.id,
                ticket_quantity=ticket_quantity,
                total_price=event.price.times(ticket_quantity),
                registration_date=self._today(),
            )
            self._store.add_registration(registration)
            self._store.save_event(event.with_tickets_sold(ticket_quantity))
        logger.info(
            "User %s registered for event %s (%s tickets)", user.id, event.id, ticket_quantity
        )
        return True
