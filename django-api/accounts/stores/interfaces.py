"""Store interfaces for identity state.

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import ContextManager

from accounts.domain import User, UserId

SESSION_KEY = "user"


class UserStore(ABC):
    """Interface for the user directory."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """Return all users in insertion order."""
        ...

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""
        ...

    @abstractmethod
    def add_user(self, user: User) -> bool:
        """Add a user. Return False without change if the email is taken."""
        ...

    @abstractmethod
    def save_user(self, user: User) -> None:
        """Replace the stored record that has the same ID."""
        ...

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Return a context manager serializing read-modify-write sequences."""
        ...


class ClientStorage(ABC):
    """String-valued key-value storage held on behalf of one client."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...
