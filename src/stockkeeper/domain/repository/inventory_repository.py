"""Abstract repository for the Inventory aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockkeeper.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def load(self) -> Inventory:
        """Return the stored inventory, or an empty one if nothing is stored."""

    @abstractmethod
    def save(self, inventory: Inventory) -> None:
        """Persist the whole inventory, replacing what was stored before."""
