"""Serializers for transforming domain models to API responses and parsing input."""

from decimal import Decimal

from rest_framework import serializers

from events.domain import EventDraft, Money, TicketCount

DEFAULT_IMAGE_URL = "https://images.pexels.com/photos/2774556/pexels-photo-2774556.jpeg"

MAX_TICKETS_PER_ORDER = 10


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField(format="%H:%M")
    location = serializers.CharField()
    organizer = serializers.CharField()
    image_url = serializers.CharField()
    category = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    is_free = serializers.BooleanField(source="price.is_free")
    available_tickets = serializers.IntegerField(source="available_tickets.value")
    is_featured = serializers.BooleanField()
    is_sold_out = serializers.BooleanField()
    creator_id = serializers.SerializerMethodField()

    def get_creator_id(self, event) -> str | None:
        return event.creator_id.value if event.creator_id else None


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.CharField(source="id.value")
    event_id = serializers.CharField(source="event_id.value")
    user_id = serializers.CharField(source="user_id.value")
    ticket_quantity = serializers.IntegerField()
    total_price = serializers.DecimalField(
        source="total_price.amount", max_digits=12, decimal_places=2
    )
    registration_date = serializers.DateField()


class DashboardSerializer(serializers.Serializer):
    upcoming = EventSerializer(many=True)
    past = EventSerializer(many=True)
    created = EventSerializer(many=True)
    registrations = RegistrationSerializer(many=True)


class EventQuerySerializer(serializers.Serializer):
    """Query parameters accepted by the event listing."""

    search = serializers.CharField(allow_blank=True, trim_whitespace=False, default="")
    category = serializers.CharField(allow_blank=True, trim_whitespace=False, default="")


class CalendarQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(required=False, min_value=1, max_value=9999)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)


class EventCreateSerializer(serializers.Serializer):
    """Input rules for publishing an event."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    date = serializers.DateField()
    time = serializers.TimeField()
    location = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=100)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    available_tickets = serializers.IntegerField(min_value=1)
    image_url = serializers.URLField(max_length=500, default=DEFAULT_IMAGE_URL)
    is_featured = serializers.BooleanField(default=False)

    def to_draft(self, organizer: str) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data["title"],
            description=data["description"],
            date=data["date"],
            time=data["time"],
            location=data["location"],
            organizer=organizer,
            image_url=data["image_url"],
            category=data["category"],
            price=Money(data["price"]),
            available_tickets=TicketCount(data["available_tickets"]),
            is_featured=data["is_featured"],
        )


class TicketRequestSerializer(serializers.Serializer):
    ticket_quantity = serializers.IntegerField(
        min_value=1, max_value=MAX_TICKETS_PER_ORDER, default=1
    )
