"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Gate event creation and the dashboard on session and role
- Never contain business logic
- Never expose internal error details
"""

from datetime import date

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import User
from accounts.handlers import identity_for
from accounts.services import IdentityService
from events.domain import ALL_CATEGORIES, CATEGORIES
from events.domain.errors import AuthenticationRequiredError, PermissionDeniedError
from events.handlers.serializers import (
    CalendarQuerySerializer,
    DashboardSerializer,
    EventCreateSerializer,
    EventQuerySerializer,
    EventSerializer,
    RegistrationSerializer,
    TicketRequestSerializer,
)
from events.services import EventService
from events.stores import get_event_store

ALREADY_REGISTERED = "You are already registered for this event."
NOT_ENOUGH_TICKETS = "Unable to register. Not enough tickets available."


def event_service_for(identity: IdentityService) -> EventService:
    return EventService(get_event_store(), identity)


def require_session(identity: IdentityService) -> User:
    user = identity.current_user
    if user is None:
        raise AuthenticationRequiredError()
    return user


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        service = event_service_for(identity_for(request))
        events = service.browse_events(
            query.validated_data["search"], query.validated_data["category"]
        )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        identity = identity_for(request)
        user = require_session(identity)
        if not user.can_create_events:
            raise PermissionDeniedError("create events")
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = event_service_for(identity).create_event(serializer.to_draft(organizer=user.name))
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class FeaturedEventListView(APIView):
    """Handler for GET /api/events/featured"""

    def get(self, request: Request) -> Response:
        events = event_service_for(identity_for(request)).featured_events()
        return Response(EventSerializer(events, many=True).data)


class CategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        return Response([ALL_CATEGORIES, *CATEGORIES])


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        identity = identity_for(request)
        service = event_service_for(identity)
        event = service.get_event(event_id)
        data = EventSerializer(event).data
        data["is_registered"] = service.is_registered(event.id.value)
        return Response(data)


class EventRegistrationView(APIView):
    """Handler for POST /api/events/{event_id}/registrations"""

    def post(self, request: Request, event_id: str) -> Response:
        identity = identity_for(request)
        require_session(identity)
        service = event_service_for(identity)
        event_id = service.get_event(event_id).id.value
        serializer = TicketRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        if service.is_registered(event_id):
            return Response({"detail": ALREADY_REGISTERED}, status=status.HTTP_400_BAD_REQUEST)
        if not service.register_for_event(event_id, serializer.validated_data["ticket_quantity"]):
            return Response({"detail": NOT_ENOUGH_TICKETS}, status=status.HTTP_400_BAD_REQUEST)
        registration = [
            r for r in service.user_registrations() if r.event_id.value == event_id
        ][-1]
        return Response(
            {
                "registration": RegistrationSerializer(registration).data,
                "event": EventSerializer(service.get_event(event_id)).data,
            },
            status=status.HTTP_201_CREATED,
        )


class CalendarView(APIView):
    """Handler for GET /api/calendar"""

    def get(self, request: Request) -> Response:
        query = CalendarQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        today = date.today()
        year = query.validated_data.get("year", today.year)
        month = query.validated_data.get("month", today.month)
        events = event_service_for(identity_for(request)).events_in_month(year, month)
        by_day: dict[int, list[str]] = {}
        for event in events:
            by_day.setdefault(event.date.day, []).append(event.id.value)
        return Response(
            {
                "year": year,
                "month": month,
                "events": EventSerializer(events, many=True).data,
                "by_day": by_day,
            }
        )


class DashboardView(APIView):
    """Handler for GET /api/dashboard"""

    def get(self, request: Request) -> Response:
        identity = identity_for(request)
        user = require_session(identity)
        dashboard = event_service_for(identity).dashboard()
        data = DashboardSerializer(dashboard).data
        data["can_create_events"] = user.can_create_events
        return Response(data)
