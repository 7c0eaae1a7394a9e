"""Integration tests for the auth HTTP API.

Run with: pytest tests/test_auth_api.py -v
"""

from rest_framework.test import APIClient


class TestAuthApi:
    def test_me_without_session(self, api_client: APIClient):
        assert api_client.get("/api/auth/me").json() == {
            "is_authenticated": False,
            "user": None,
        }

    def test_login_and_me(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/login",
            {"email": "jane@example.com", "password": "anything"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["user"]["role"] == "organizer"
        me = api_client.get("/api/auth/me").json()
        assert me["is_authenticated"] is True
        assert me["user"]["email"] == "jane@example.com"

    def test_login_unknown_email(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/login", {"email": "who@example.com", "password": "x"}, format="json"
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_login_validates_input(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/login", {"email": "not-an-email", "password": ""}, format="json"
        )
        assert response.status_code == 400

    def test_register_creates_user_session(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Sam Lee", "email": "sam@example.com", "password": "pw"},
            format="json",
        )
        assert response.status_code == 201
        user = response.json()["user"]
        assert user["role"] == "user"
        assert user["registered_events"] == []
        assert api_client.get("/api/auth/me").json()["user"]["id"] == user["id"]

    def test_register_duplicate_email(self, api_client: APIClient):
        response = api_client.post(
            "/api/auth/register",
            {"name": "Imposter", "email": "john@example.com", "password": "pw"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email is already registered"

    def test_logout(self, api_login):
        client = api_login("john@example.com")
        assert client.post("/api/auth/logout").status_code == 204
        assert client.get("/api/auth/me").json()["is_authenticated"] is False
