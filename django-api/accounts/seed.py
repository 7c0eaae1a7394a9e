"""Preloaded user directory."""

from accounts.domain import Role, User, UserId

SEED_USERS: tuple[User, ...] = (
    User(
        id=UserId("1"),
        name="John Doe",
        email="john@example.com",
        role=Role.USER,
        registered_events=("1", "5"),
    ),
    User(
        id=UserId("2"),
        name="Jane Smith",
        email="jane@example.com",
        role=Role.ORGANIZER,
    ),
    User(
        id=UserId("3"),
        name="Admin User",
        email="admin@example.com",
        role=Role.ADMIN,
    ),
)
