"""Interface contract for delivery transports."""

from abc import ABC, abstractmethod


class DeliveryTransport(ABC):
    """Defines a single outbound delivery attempt."""

    @abstractmethod
    def attempt_delivery(self, email: str, message: str) -> bool:
        """Try to deliver a message to an email address; report success."""
        raise NotImplementedError
