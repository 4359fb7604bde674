"""User model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Message recipient known to a user directory."""

    id: int
    name: str
    age: int
    email: str
