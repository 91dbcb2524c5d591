"""Application service: Update Stock use case."""

from __future__ import annotations

from stockkeeper.domain.exceptions import EntityNotFoundError
from stockkeeper.domain.model.inventory import Inventory


class UpdateStockHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def ensure_exists(self, code: str) -> None:
        if code not in self._inventory:
            raise EntityNotFoundError(f"Product code not found: '{code}'")

    def handle(self, code: str, quantity: int) -> None:
        """Set the stock of an existing product to *quantity*."""
        self._inventory.update(code, quantity)
