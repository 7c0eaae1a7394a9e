"""HTTP handlers for login, account creation and logout.

Handlers:
- Parse requests and validate input format
- Call the identity service
- Map boolean failures to user-facing messages
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.serializers import LoginSerializer, RegisterSerializer, UserSerializer
from accounts.services import IdentityService
from accounts.stores import SessionClientStorage, get_user_store


def identity_for(request: Request) -> IdentityService:
    """Build the identity service for the client behind ``request``."""
    return IdentityService(
        get_user_store(),
        SessionClientStorage(request.session),
        latency=settings.SIMULATED_LATENCY_SECONDS,
    )


def session_payload(identity: IdentityService) -> dict:
    user = identity.current_user
    return {
        "is_authenticated": user is not None,
        "user": UserSerializer(user).data if user is not None else None,
    }


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = identity_for(request)
        if not async_to_sync(identity.login)(
            serializer.validated_data["email"], serializer.validated_data["password"]
        ):
            return Response(
                {"detail": "Invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response(session_payload(identity))


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = identity_for(request)
        data = serializer.validated_data
        if not async_to_sync(identity.register)(data["name"], data["email"], data["password"]):
            return Response(
                {"detail": "Email is already registered"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(session_payload(identity), status=status.HTTP_201_CREATED)


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    def post(self, request: Request) -> Response:
        identity_for(request).logout()
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    def get(self, request: Request) -> Response:
        return Response(session_payload(identity_for(request)))
