"""In-memory inventory adapter — a stock ledger kept in a dict.

Used for development and tests. Stock is seeded per product; every call is
recorded so tests can assert on the exact sequence of reservations and
restorations.
"""

from orders.exceptions import InvalidOperation
from orders.inventory.port import InventoryGateway


class InMemoryInventory(InventoryGateway):
    """Inventory adapter backed by a ``product -> units`` mapping."""

    def __init__(self, stock: dict[str, int] | None = None) -> None:
        self.stock: dict[str, int] = dict(stock or {})
        self.calls: list[dict] = []

    def seed(self, product: str, units: int) -> None:
        """Set the available units for a product."""
        self.stock[product] = units

    def available(self, product: str) -> int:
        return self.stock.get(product, 0)

    def check_stock(self, product: str, quantity: int) -> bool:
        self.calls.append({"method": "check_stock", "product": product, "quantity": quantity})
        return self.available(product) >= quantity

    def decrease_stock(self, product: str, quantity: int) -> None:
        self.calls.append({"method": "decrease_stock", "product": product, "quantity": quantity})
        if self.available(product) < quantity:
            raise InvalidOperation("insufficient stock", product=product, quantity=quantity)
        self.stock[product] = self.available(product) - quantity

    def increase_stock(self, product: str, quantity: int) -> None:
        self.calls.append({"method": "increase_stock", "product": product, "quantity": quantity})
        self.stock[product] = self.available(product) + quantity

    def calls_to(self, method: str) -> list[dict]:
        """Recorded calls for a single port method."""
        return [call for call in self.calls if call["method"] == method]

    def reset(self) -> None:
        """Clear stock and recorded calls (useful between tests)."""
        self.stock.clear()
        self.calls.clear()
