"""Application service: Remove Product use case."""

from __future__ import annotations

from stockkeeper.domain.model.inventory import Inventory


class RemoveProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, code: str) -> bool:
        """Remove a product. Removing an unknown code is not an error."""
        return self._inventory.remove(code)
