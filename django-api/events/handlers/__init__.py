from events.handlers.views import (
    CalendarView,
    CategoryListView,
    DashboardView,
    EventDetailView,
    EventListView,
    EventRegistrationView,
    FeaturedEventListView,
)

__all__ = [
    "CalendarView",
    "CategoryListView",
    "DashboardView",
    "EventDetailView",
    "EventListView",
    "EventRegistrationView",
    "FeaturedEventListView",
]
