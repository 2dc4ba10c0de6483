"""Notification port — abstract interface for order confirmations."""

from abc import ABC, abstractmethod


class NotificationGateway(ABC):
    """Abstract interface for confirmation dispatch adapters."""

    @abstractmethod
    def send_confirmation(self, order) -> None:
        """Send a confirmation for a placed order. Fire-and-forget."""
        ...
