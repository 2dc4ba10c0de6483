"""Configurable fake payment gateway for development and testing.

Simulates a payment processor without any external calls. It can be
configured at runtime to succeed or fail, either from tests or through the
``/orders/payment/configure`` endpoint outside production.
"""

from uuid import uuid4

from orders.payment.port import PaymentGateway


class FakePaymentGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def process_payment(self, order) -> bool:
        call = {
            "method": "process_payment",
            "order_id": order.id,
            "product": order.product,
            "quantity": order.quantity,
            "succeeded": self.should_succeed,
        }
        if self.should_succeed:
            call["transaction_id"] = f"fake_txn_{uuid4().hex[:12]}"
        else:
            call["failure_reason"] = self.failure_reason
        self.calls.append(call)
        return self.should_succeed

    def reset(self) -> None:
        """Restore the default (succeeding) behavior and clear recorded calls."""
        self.should_succeed = True
        self.failure_reason = "Card declined"
        self.calls.clear()
