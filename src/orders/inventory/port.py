"""Inventory port — abstract interface for stock tracking.

The order service reserves stock with ``decrease_stock`` and always
restores it with ``increase_stock``; adapters must treat the two as exact
inverses.
"""

from abc import ABC, abstractmethod


class InventoryGateway(ABC):
    """Abstract interface for inventory adapters."""

    @abstractmethod
    def check_stock(self, product: str, quantity: int) -> bool:
        """Return True if at least ``quantity`` units of ``product`` are available."""
        ...

    @abstractmethod
    def decrease_stock(self, product: str, quantity: int) -> None:
        """Reserve ``quantity`` units of ``product``."""
        ...

    @abstractmethod
    def increase_stock(self, product: str, quantity: int) -> None:
        """Return ``quantity`` units of ``product`` to available stock."""
        ...
