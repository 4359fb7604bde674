"""Domain models package."""

from app.models.dispatch import (
    CANNOT_SEND_EMPTY_MESSAGE,
    DeliveryResult,
    DeliveryStatus,
    DispatchErrorKind,
    DispatchOutcome,
    Failure,
    Success,
)
from app.models.user import User

__all__ = [
    "User",
    "DeliveryResult",
    "DeliveryStatus",
    "DispatchErrorKind",
    "DispatchOutcome",
    "Success",
    "Failure",
    "CANNOT_SEND_EMPTY_MESSAGE",
]
