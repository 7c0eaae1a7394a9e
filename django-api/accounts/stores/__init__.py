from accounts.stores.client_storage import MemoryClientStorage, SessionClientStorage
from accounts.stores.interfaces import SESSION_KEY, ClientStorage, UserStore
from accounts.stores.memory_store import InMemoryUserStore
from accounts.stores.singleton import get_user_store, reset_user_store, set_user_store

__all__ = [
    "SESSION_KEY",
    "ClientStorage",
    "UserStore",
    "InMemoryUserStore",
    "MemoryClientStorage",
    "SessionClientStorage",
    "get_user_store",
    "set_user_store",
    "reset_user_store",
]
