"""Mock catalog and ledger loaded at startup."""

from datetime import date, time

from accounts.domain import UserId
from events.domain import Event, EventId, Money, Registration, RegistrationId, TicketCount

SEED_EVENTS: tuple[Event, ...] = (
    Event(
        id=EventId("1"),
        title="Tech Conference 2025",
        description=(
            "Join us for the biggest tech conference of the year featuring keynotes "
            "from industry leaders, workshops, and networking opportunities."
        ),
        date=date(2025, 6, 15),
        time=time(9, 0),
        location="San Francisco Convention Center",
        organizer="TechEvents Inc.",
        image_url="https://images.pexels.com/photos/2774556/pexels-photo-2774556.jpeg",
        category="Technology",
        price=Money.of(299),
        available_tickets=TicketCount(1000),
        is_featured=True,
    ),
    Event(
        id=EventId("2"),
        title="Music Festival",
        description=(
            "Three days of amazing performances by top artists across multiple "
            "stages in a beautiful outdoor setting."
        ),
        date=date(2025, 7, 10),
        time=time(12, 0),
        location="Golden Gate Park",
        organizer="Festival Productions",
        image_url="https://images.pexels.com/photos/1190297/pexels-photo-1190297.jpeg",
        category="Music",
        price=Money.of(149),
        available_tickets=TicketCount(5000),
        is_featured=True,
    ),
    Event(
        id=EventId("3"),
        title="Business Leadership Summit",
        description=(
            "Learn from top executives and thought leaders about strategies for "
            "business growth and leadership."
        ),
        date=date(2025, 5, 20),
        time=time(10, 0),
        location="Grand Hotel Conference Center",
        organizer="Business Network",
        image_url="https://images.pexels.com/photos/2977565/pexels-photo-2977565.jpeg",
        category="Business",
        price=Money.of(399),
        available_tickets=TicketCount(300),
    ),
    Event(
        id=EventId("4"),
        title="Wellness Retreat",
        description=(
            "A weekend of yoga, meditation, and wellness workshops to rejuvenate "
            "your mind and body."
        ),
        date=date(2025, 8, 5),
        time=time(8, 0),
        location="Mountain View Resort",
        organizer="Wellness Collective",
        image_url="https://images.pexels.com/photos/8436589/pexels-photo-8436589.jpeg",
        category="Health",
        price=Money.of(249),
        available_tickets=TicketCount(150),
    ),
    Event(
        id=EventId("5"),
        title="Startup Pitch Competition",
        description=(
            "Watch innovative startups pitch their ideas to investors and compete "
            "for funding."
        ),
        date=date(2025, 4, 10),
        time=time(13, 0),
        location="Innovation Hub",
        organizer="Venture Capital Group",
        image_url="https://images.pexels.com/photos/3184360/pexels-photo-3184360.jpeg",
        category="Business",
        price=Money.of(0),
        available_tickets=TicketCount(200),
        is_featured=True,
    ),
    Event(
        id=EventId("6"),
        title="Food & Wine Festival",
        description=(
            "Taste exquisite dishes and wines from top chefs and vineyards in the region."
        ),
        date=date(2025, 9, 25),
        time=time(16, 0),
        location="Riverside Gardens",
        organizer="Culinary Association",
        image_url="https://images.pexels.com/photos/5638646/pexels-photo-5638646.jpeg",
        category="Food",
        price=Money.of(85),
        available_tickets=TicketCount(500),
    ),
)

SEED_REGISTRATIONS: tuple[Registration, ...] = (
    Registration(
        id=RegistrationId("1"),
        event_id=EventId("1"),
        user_id=UserId("1"),
        ticket_quantity=2,
        total_price=Money.of(598),
        registration_date=date(2025, 3, 15),
    ),
    Registration(
        id=RegistrationId("2"),
        event_id=EventId("5"),
        user_id=UserId("1"),
        ticket_quantity=1,
        total_price=Money.of(0),
        registration_date=date(2025, 2, 28),
    ),
)
