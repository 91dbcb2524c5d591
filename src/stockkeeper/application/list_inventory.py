"""Application service: List Inventory use case (query)."""

from __future__ import annotations

from stockkeeper.application.dto import StockLineDTO
from stockkeeper.domain.model.inventory import Inventory


class ListInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(product_code=code, stock=quantity)
            for code, quantity in self._inventory.items()
        ]
