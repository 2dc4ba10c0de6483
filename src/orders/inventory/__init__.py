"""Inventory adapter factory.

Provides get_inventory() / set_inventory() to swap implementations.
Uses InMemoryInventory by default; configure via the INVENTORY_ADAPTER
environment variable.
"""

import os

from orders.inventory.port import InventoryGateway

_current_inventory: InventoryGateway | None = None


def get_inventory() -> InventoryGateway:
    """Return the configured inventory adapter (singleton)."""
    global _current_inventory
    if _current_inventory is None:
        adapter = os.environ.get("INVENTORY_ADAPTER", "memory")
        if adapter == "memory":
            from orders.inventory.memory_adapter import InMemoryInventory

            _current_inventory = InMemoryInventory()
        else:
            raise ValueError(f"Unknown inventory adapter: {adapter}")
    return _current_inventory


def set_inventory(inventory: InventoryGateway) -> None:
    """Override the active inventory adapter (useful for tests)."""
    global _current_inventory
    _current_inventory = inventory


def reset_inventory() -> None:
    """Reset the inventory singleton."""
    global _current_inventory
    _current_inventory = None
