"""Interface contract for user directories."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.models.user import User


class UserDirectory(ABC):
    """Defines read-only lookup over a fixed pool of users."""

    @abstractmethod
    def all_users(self) -> list[User]:
        """Return every known user in the order the pool was populated."""
        raise NotImplementedError

    @abstractmethod
    def find_by_ids(self, ids: Iterable[int]) -> list[User]:
        """Return users whose id is in ids, keeping all_users() order."""
        raise NotImplementedError
