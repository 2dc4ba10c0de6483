"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations. Uses
FakePaymentGateway by default; configure via the PAYMENT_ADAPTER
environment variable.
"""

import os

from orders.payment.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway. Defaults to FakePaymentGateway."""
    global _current_gateway
    if _current_gateway is None:
        adapter = os.environ.get("PAYMENT_ADAPTER", "fake")
        if adapter == "fake":
            from orders.payment.fake_adapter import FakePaymentGateway

            _current_gateway = FakePaymentGateway()
        else:
            raise ValueError(f"Unknown payment adapter: {adapter}")
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
