"""Application service: Add Product use case."""

from __future__ import annotations

from stockkeeper.domain.exceptions import DuplicateEntityError
from stockkeeper.domain.model.inventory import Inventory


class AddProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def ensure_new(self, code: str) -> None:
        """Reject a code before the operator is asked for a quantity."""
        if code in self._inventory:
            raise DuplicateEntityError(f"Product code already exists: '{code}'")

    def handle(self, code: str, quantity: int) -> None:
        """Add a new product with its initial stock."""
        self._inventory.add(code, quantity)
