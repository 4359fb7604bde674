"""In-memory user directory implementation."""

from __future__ import annotations

from collections.abc import Iterable

from app.interfaces.user_directory import UserDirectory
from app.models.user import User


class InMemoryUserDirectory(UserDirectory):
    """Directory over a fixed pool built once at construction time."""

    def __init__(self, users: Iterable[User]) -> None:
        self._users: tuple[User, ...] = tuple(users)
        seen_ids: set[int] = set()
        for user in self._users:
            if user.id in seen_ids:
                raise ValueError(f"Duplicate user id '{user.id}' in directory pool.")
            seen_ids.add(user.id)

    def all_users(self) -> list[User]:
        return list(self._users)

    def find_by_ids(self, ids: Iterable[int]) -> list[User]:
        wanted = set(ids)
        if not wanted:
            return []
        return [user for user in self._users if user.id in wanted]

    def __len__(self) -> int:
        return len(self._users)
