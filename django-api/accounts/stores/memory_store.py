"""In-memory implementation of the UserStore."""

import threading
from collections.abc import Iterable
from typing import ContextManager

from accounts.domain import User, UserId
from accounts.stores.interfaces import UserStore


class InMemoryUserStore(UserStore):
    """Process-local user directory keyed by user ID."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.RLock()
        self._users: dict[UserId, User] = {}
        for user in users:
            self.add_user(user)

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id: UserId) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self.list_users() if u.email == email), None)

    def add_user(self, user: User) -> bool:
        with self._lock:
            if user.id in self._users or self.find_by_email(user.email) is not None:
                return False
            self._users[user.id] = user
            return True

    def save_user(self, user: User) -> None:
        with self._lock:
            if user.id not in self._users:
                raise KeyError(f"Unknown user {user.id}")
            self._users[user.id] = user

    def atomic(self) -> ContextManager:
        return self._lock
