"""Mock delivery transport implementation."""

import logging

from app.interfaces.delivery_transport import DeliveryTransport

logger = logging.getLogger(__name__)


class AlwaysDeliverTransport(DeliveryTransport):
    """Stub transport that reports every delivery as successful."""

    def attempt_delivery(self, email: str, message: str) -> bool:
        logger.debug("[MockMessaging] -> email=%s | message=%s", email, message)
        return True
