from events.domain.models import (
    ALL_CATEGORIES,
    CATEGORIES,
    Dashboard,
    Event,
    EventDraft,
    Registration,
)
from events.domain.value_objects import EventId, Money, RegistrationId, TicketCount

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES",
    "Dashboard",
    "Event",
    "EventDraft",
    "Registration",
    "EventId",
    "RegistrationId",
    "Money",
    "TicketCount",
]
