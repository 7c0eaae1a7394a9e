"""Process-wide user directory."""

from accounts.seed import SEED_USERS
from accounts.stores.interfaces import UserStore
from accounts.stores.memory_store import InMemoryUserStore

_user_store: UserStore | None = None


def get_user_store() -> UserStore:
    """Return the shared user store, seeding it on first use."""
    global _user_store
    if _user_store is None:
        _user_store = InMemoryUserStore(SEED_USERS)
    return _user_store


def set_user_store(store: UserStore) -> None:
    global _user_store
    _user_store = store


def reset_user_store() -> None:
    """Drop the shared store; the next access reseeds it."""
    global _user_store
    _user_store = None
