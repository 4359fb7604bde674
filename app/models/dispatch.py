"""Dispatch result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DeliveryStatus = Literal["delivered", "error"]
DispatchErrorKind = Literal["cannot_send_empty_message"]

CANNOT_SEND_EMPTY_MESSAGE: DispatchErrorKind = "cannot_send_empty_message"


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Per-recipient outcome of one dispatch."""

    id: int
    status: DeliveryStatus


@dataclass(frozen=True, slots=True)
class Success:
    """Dispatch went through; carries one result per resolved recipient."""

    results: tuple[DeliveryResult, ...]

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Dispatch was rejected before any delivery attempt."""

    error: DispatchErrorKind

    @property
    def is_success(self) -> bool:
        return False


DispatchOutcome = Success | Failure
