"""ClientStorage implementations."""

from django.contrib.sessions.backends.base import SessionBase

from accounts.stores.interfaces import ClientStorage


class SessionClientStorage(ClientStorage):
    """Client storage backed by the Django session of the current request.

    With the signed-cookie session engine the data travels with the client.
    """

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def get_item(self, key: str) -> str | None:
        value = self._session.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        self._session[key] = value

    def remove_item(self, key: str) -> None:
        self._session.pop(key, None)


class MemoryClientStorage(ClientStorage):
    """Dict-backed client storage, used outside a request cycle."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
