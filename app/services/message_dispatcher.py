"""Message dispatch service: validate, resolve recipients, deliver, aggregate."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.interfaces.delivery_transport import DeliveryTransport
from app.interfaces.user_directory import UserDirectory
from app.models.dispatch import (
    CANNOT_SEND_EMPTY_MESSAGE,
    DeliveryResult,
    DeliveryStatus,
    DispatchOutcome,
    Failure,
    Success,
)
from app.models.user import User

logger = logging.getLogger(__name__)

MESSAGE_PREFIX = "Message: "


def format_message(message: str) -> str:
    """Build the outbound text sent to every recipient."""
    return f"{MESSAGE_PREFIX}{message}"


class MessageDispatcher:
    """Sends one message to a list of users and reports per-user status."""

    def __init__(self, directory: UserDirectory, transport: DeliveryTransport) -> None:
        self.directory = directory
        self.transport = transport

    def dispatch(self, user_ids: Sequence[int], message: str) -> DispatchOutcome:
        """Dispatch message to every known user in user_ids.

        Unknown ids are dropped without an entry. An empty message is
        rejected before any lookup or delivery attempt.
        """
        if not message:
            logger.info("Rejected dispatch to %d id(s): empty message.", len(user_ids))
            return Failure(error=CANNOT_SEND_EMPTY_MESSAGE)

        users = self.directory.find_by_ids(user_ids)
        formatted_message = format_message(message)
        results = tuple(
            DeliveryResult(id=user.id, status=self._deliver(user=user, message=formatted_message))
            for user in users
        )
        logger.info(
            "Dispatched message to %d of %d requested id(s); %d delivered.",
            len(results),
            len(user_ids),
            sum(1 for result in results if result.status == "delivered"),
        )
        return Success(results=results)

    def _deliver(self, *, user: User, message: str) -> DeliveryStatus:
        try:
            delivered = self.transport.attempt_delivery(user.email, message)
        except Exception:
            logger.warning(
                "Delivery to user %s (%s) raised; recording as error.",
                user.id,
                user.email,
                exc_info=True,
            )
            return "error"
        return "delivered" if delivered else "error"
