from django.urls import path

from events.handlers import (
    CalendarView,
    CategoryListView,
    DashboardView,
    EventDetailView,
    EventListView,
    EventRegistrationView,
    FeaturedEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/featured", FeaturedEventListView.as_view(), name="event-featured"),
    path("events/categories", CategoryListView.as_view(), name="event-categories"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registrations",
        EventRegistrationView.as_view(),
        name="event-registrations",
    ),
    path("calendar", CalendarView.as_view(), name="calendar"),
    path("dashboard", DashboardView.as_view(), name="dashboard"),
]
