"""Order aggregate — one placed order.

An Order is only ever registered after stock was reserved and payment was
captured, so a registered Order is always paid. The id and product are
fixed at placement; only the quantity changes afterwards.

State Machine:
    placed (unpaid candidate) → paid → registered
    registered → updated (quantity change) | removed
"""

from protean.fields import Boolean, Integer, String

from orders.domain import orders
from orders.exceptions import InvalidArgument


@orders.aggregate
class Order:
    id = Integer(identifier=True)
    product = String(required=True)
    quantity = Integer(required=True, min_value=1)
    is_paid = Boolean(default=False)

    @classmethod
    def place(cls, order_id, product, quantity):
        """Build an unpaid candidate order.

        The candidate is not registered anywhere; the caller decides whether
        it survives payment.
        """
        return cls(id=order_id, product=product, quantity=quantity, is_paid=False)

    def mark_paid(self):
        """Record a successful payment capture. There is no way back."""
        self.is_paid = True

    def change_quantity(self, new_quantity):
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            raise InvalidArgument("quantity", "Quantity must be a whole number")
        if new_quantity < 1:
            raise InvalidArgument("quantity", "Quantity must be at least 1")
        self.quantity = new_quantity
