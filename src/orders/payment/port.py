"""Payment gateway port (abstract interface).

Defines the contract that all payment adapters must implement, so the
order service can switch between a fake gateway and a real processor
without changing orchestration code.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def process_payment(self, order) -> bool:
        """Capture payment for an order. Returns True when captured."""
        ...
