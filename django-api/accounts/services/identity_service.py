"""Identity service - owns the current session and account operations.

The session binds a user ID only. The user record is always re-read from
the UserStore, which is the single owner of user state.
"""

import asyncio
import logging

from accounts.domain import Role, User, UserId, dump_snapshot, load_snapshot
from accounts.stores.interfaces import SESSION_KEY, ClientStorage, UserStore

logger = logging.getLogger(__name__)


class IdentityService:
    """Login, account creation and logout for one client."""

    def __init__(
        self, store: UserStore, storage: ClientStorage, latency: float = 0.0
    ) -> None:
        self._store = store
        self._storage = storage
        self._latency = latency
        self._user_id: UserId | None = None
        self.restore()

    @property
    def current_user(self) -> User | None:
        if self._user_id is None:
            return None
        return self._store.get_user(self._user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def restore(self) -> None:
        """Bind the session persisted in client storage, if it is usable."""
        self._user_id = None
        raw = self._storage.get_item(SESSION_KEY)
        if raw is None:
            return
        try:
            snapshot = load_snapshot(raw)
        except ValueError as exc:
            logger.warning("Discarding unreadable stored session: %s", exc)
            self._storage.remove_item(SESSION_KEY)
            return
        if self._store.get_user(snapshot.id) is None:
            logger.warning("Discarding stored session for unknown user %s", snapshot.id)
            self._storage.remove_item(SESSION_KEY)
            return
        self._user_id = snapshot.id

    async def login(self, email: str, password: str) -> bool:
        """Bind the user with this email. The password is not checked."""
        await asyncio.sleep(self._latency)
        user = self._store.find_by_email(email)
        if user is None:
            logger.info("Login failed for unknown email")
            return False
        self._bind(user)
        logger.info("User %s logged in", user.id)
        return True

    async def register(self, name: str, email: str, password: str) -> bool:
        """Create a ``user`` role account and bind it.

        Returns False, leaving the directory unchanged, if the email is taken.
        """
        await asyncio.sleep(self._latency)
        user = User(id=UserId.generate(), name=name, email=email, role=Role.USER)
        if not self._store.add_user(user):
            logger.info("Account creation rejected: email already registered")
            return False
        self._bind(user)
        logger.info("Created account %s", user.id)
        return True

    def logout(self) -> None:
        self._user_id = None
        self._storage.remove_item(SESSION_KEY)

    def record_registration(self, user_id: UserId, event_id: str) -> bool:
        """Add ``event_id`` to the user's registered events.

        Returns False if the user is unknown or already registered.
        """
        with self._store.atomic():
            user = self._store.get_user(user_id)
            if user is None or user.is_registered_for(event_id):
                return False
            updated = user.with_registered_event(event_id)
            self._store.save_user(updated)
        if user_id == self._user_id:
            self._storage.set_item(SESSION_KEY, dump_snapshot(updated))
        return True

    def _bind(self, user: User) -> None:
        self._user_id = user.id
        self._storage.set_item(SESSION_KEY, dump_snapshot(user))
