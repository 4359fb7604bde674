"""Mock user directory seeded with demo users."""

from app.models.user import User
from app.providers.directory.in_memory import InMemoryUserDirectory


class MockUserDirectory(InMemoryUserDirectory):
    """Fixed demo pool used by the HTTP surface for local testing."""

    def __init__(self) -> None:
        super().__init__(
            [
                User(id=1, name="Name1", age=23, email="someone1@domain1.pl"),
                User(id=2, name="Name2", age=31, email="someone2@domain2.pl"),
                User(id=3, name="Name3", age=8, email="someone3@domain3.pl"),
                User(id=4, name="Name4", age=40, email="someone4@domain4.pl"),
                User(id=5, name="Name5", age=17, email="someone5@domain5.pl"),
            ]
        )
