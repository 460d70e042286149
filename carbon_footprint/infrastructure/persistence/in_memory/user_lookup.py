"""In-memory implementation of IUserLookup."""

from typing import Iterable, Optional


class InMemoryUserLookup:
    """Set-backed user registry for tests and development."""

    def __init__(self, user_ids: Optional[Iterable[str]] = None) -> None:
        self._user_ids: set[str] = set(user_ids or ())

    async def exists(self, user_id: str) -> bool:
        return user_id in self._user_ids

    def add(self, user_id: str) -> None:
        self._user_ids.add(user_id)

    def clear(self) -> None:
        self._user_ids.clear()
