"""Order service — places, updates and removes orders.

Placing an order coordinates three collaborators in a fixed sequence:

    1. check stock            → InvalidOperation("insufficient stock"), nothing touched
    2. reserve stock          (decrease_stock)
    3. capture payment
       ├─ captured → mark paid, register, send one confirmation
       └─ declined → restore stock (increase_stock), raise InvalidOperation("payment failed")

An order either fully commits (registered and confirmed) or fully rolls back
(stock restored, nothing registered). Removing an order restores the stock of
its current quantity.

The registry and the id counter are owned by the service and are not
synchronized; the service assumes single-threaded use.
"""

import structlog

from orders.exceptions import InvalidArgument, InvalidOperation
from orders.inventory.port import InventoryGateway
from orders.notification.port import NotificationGateway
from orders.order.order import Order
from orders.payment.port import PaymentGateway

logger = structlog.get_logger(__name__)


class OrderService:
    """Orchestrates order placement over injected inventory, payment and notification ports."""

    def __init__(
        self,
        inventory: InventoryGateway,
        payment: PaymentGateway,
        notification: NotificationGateway,
    ) -> None:
        self.inventory = inventory
        self.payment = payment
        self.notification = notification
        self._orders: dict[int, Order] = {}
        self._last_id = 0

    def _next_id(self) -> int:
        # Ids burnt by failed placements are never reused
        self._last_id += 1
        return self._last_id

    def create_order(self, product: str, quantity: int) -> Order:
        """Place an order for ``quantity`` units of ``product``.

        Raises:
            InvalidArgument: ``quantity`` is not a positive int or ``product`` is blank.
                No collaborator is called.
            InvalidOperation: stock is insufficient, or payment was declined. In
                both cases no order is registered and no stock stays reserved.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidArgument("quantity", "Quantity must be a whole number")
        if quantity <= 0:
            raise InvalidArgument("quantity", "Quantity must be greater than zero")
        if not isinstance(product, str) or not product.strip() or len(product) > 255:
            raise InvalidArgument("product", "Product must be between 1 and 255 characters")

        if not self.inventory.check_stock(product, quantity):
            logger.info("Insufficient stock", product=product, quantity=quantity)
            raise InvalidOperation("insufficient stock", product=product, quantity=quantity)

        self.inventory.decrease_stock(product, quantity)

        order = Order.place(self._next_id(), product, quantity)
        logger.info("Stock reserved", order_id=order.id, product=product, quantity=quantity)

        if not self.payment.process_payment(order):
            self.inventory.increase_stock(product, quantity)
            logger.warning(
                "Payment failed, stock reservation rolled back",
                order_id=order.id,
                product=product,
                quantity=quantity,
            )
            raise InvalidOperation("payment failed", order_id=order.id, product=product, quantity=quantity)

        order.mark_paid()
        self._orders[order.id] = order
        self.notification.send_confirmation(order)

        logger.info("Order placed", order_id=order.id, product=product, quantity=quantity)
        return order

    def update_order(self, order_id: int, new_quantity: int) -> bool:
        """Change the quantity of a registered order.

        Stock is not re-checked and payment is not re-captured. Returns False
        when no order has ``order_id``.

        Raises:
            InvalidArgument: ``new_quantity`` is not positive. The order is left as is.
        """
        order = self._orders.get(order_id)
        if order is None:
            return False

        previous_quantity = order.quantity
        order.change_quantity(new_quantity)

        logger.info(
            "Order quantity updated",
            order_id=order_id,
            previous_quantity=previous_quantity,
            new_quantity=new_quantity,
        )
        return True

    def remove_order(self, order_id: int) -> bool:
        """Deregister an order and return its current quantity to stock.

        Returns False when no order has ``order_id``. Payment is not reversed.
        """
        order = self._orders.pop(order_id, None)
        if order is None:
            return False

        self.inventory.increase_stock(order.product, order.quantity)

        logger.info("Order removed", order_id=order_id, product=order.product, quantity=order.quantity)
        return True

    def get_order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def get_orders(self) -> tuple[Order, ...]:
        """Snapshot of registered orders in placement order."""
        return tuple(self._orders.values())


_service_instance: OrderService | None = None


def get_order_service() -> OrderService:
    """Return the process-wide service wired with the configured adapters."""
    global _service_instance
    if _service_instance is None:
        from orders.inventory import get_inventory
        from orders.notification import get_notifier
        from orders.payment import get_gateway

        _service_instance = OrderService(get_inventory(), get_gateway(), get_notifier())
    return _service_instance


def reset_order_service() -> None:
    """Drop the process-wide service (useful for testing)."""
    global _service_instance
    _service_instance = None
