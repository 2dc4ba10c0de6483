"""Fake notifier — records sent confirmations for testing."""

from uuid import uuid4

from orders.notification.port import NotificationGateway


class FakeNotifier(NotificationGateway):
    """Notifier that records confirmations in memory for test assertions."""

    def __init__(self):
        self.sent_confirmations: list[dict] = []

    def send_confirmation(self, order) -> None:
        self.sent_confirmations.append(
            {
                "message_id": f"confirm-{uuid4().hex[:12]}",
                "order_id": order.id,
                "product": order.product,
                "quantity": order.quantity,
            }
        )

    def confirmations_for(self, order_id) -> list[dict]:
        return [sent for sent in self.sent_confirmations if sent["order_id"] == order_id]

    def reset(self):
        """Clear sent confirmations (useful between tests)."""
        self.sent_confirmations.clear()
