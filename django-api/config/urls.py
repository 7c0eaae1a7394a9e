from django.urls import include, path, re_path
from django.views.generic import RedirectView
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView


class IndexView(APIView):
    """Handler for GET /"""

    def get(self, request: Request) -> Response:
        return Response(
            {
                "events": "/api/events",
                "featured": "/api/events/featured",
                "categories": "/api/events/categories",
                "calendar": "/api/calendar",
                "dashboard": "/api/dashboard",
                "login": "/api/auth/login",
                "register": "/api/auth/register",
                "logout": "/api/auth/logout",
                "me": "/api/auth/me",
            }
        )


urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("api/", include("events.urls")),
    path("api/", include("accounts.urls")),
    re_path(r"^.*$", RedirectView.as_view(url="/", permanent=False)),
]
