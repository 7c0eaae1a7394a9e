"""Domain model for users of the event hub."""

import json
from dataclasses import dataclass, replace
from typing import Any

from accounts.domain.value_objects import Role, UserId


@dataclass(frozen=True)
class User:
    """Domain representation of a User.

    ``registered_events`` holds raw event id strings, without duplicates.
    """

    id: UserId
    name: str
    email: str
    role: Role = Role.USER
    registered_events: tuple[str, ...] = ()

    @property
    def can_create_events(self) -> bool:
        return self.role.can_create_events

    def is_registered_for(self, event_id: str) -> bool:
        return event_id in self.registered_events

    def with_registered_event(self, event_id: str) -> "User":
        if self.is_registered_for(event_id):
            return self
        return replace(self, registered_events=(*self.registered_events, event_id))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "registered_events": list(self.registered_events),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Build a User from a snapshot dict.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If the id is blank or the role is unknown.
        """
        return cls(
            id=UserId.from_string(data["id"]),
            name=data["name"],
            email=data["email"],
            role=Role(data.get("role", Role.USER.value)),
            registered_events=tuple(dict.fromkeys(data.get("registered_events", ()))),
        )


def dump_snapshot(user: User) -> str:
    """Serialize a user for client storage."""
    return json.dumps(user.to_dict())


def load_snapshot(raw: str) -> User:
    """Parse a client storage snapshot.

    Raises:
        ValueError: If the snapshot is not valid JSON or not a user record.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("User snapshot must be a JSON object")
    try:
        return User.from_dict(data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed user snapshot: {exc}") from exc
