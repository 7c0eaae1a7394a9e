"""Identity primitives."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import uuid4


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4().hex)

    def __str__(self) -> str:
        return self.value


class Role(str, Enum):
    """Capability level of a user. Not a hierarchy."""

    USER = "user"
    ORGANIZER = "organizer"
    ADMIN = "admin"

    @property
    def can_create_events(self) -> bool:
        return self in (Role.ORGANIZER, Role.ADMIN)
