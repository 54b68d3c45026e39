"""Session storage for the bearer token.

The host application chooses the store when it builds the SDK:
:class:`MemorySessionStore` keeps the token for the lifetime of the
interactive session, :class:`NullSessionStore` never keeps anything and
suits batch jobs and other non-interactive contexts.
"""

from typing import Protocol


class SessionStore(Protocol):
    """Storage for a single opaque bearer token."""

    def put(self, token: str) -> None: ...

    def get(self) -> str | None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    """Keeps the token in memory, scoped to this store object."""

    def __init__(self) -> None:
        self._token: str | None = None

    def put(self, token: str) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def clear(self) -> None:
        self._token = None


class NullSessionStore:
    """Store that never holds a token. All operations are no-ops."""

    def put(self, token: str) -> None:
        pass

    def get(self) -> str | None:
        return None

    def clear(self) -> None:
        pass
