"""Inventory aggregate: the stock on hand for every product code.

There is one Inventory per session. It is created empty or reconstituted
by a repository, mutated by the application handlers, and handed back to
the repository at the end of the run.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from stockkeeper.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from stockkeeper.domain.model.value_objects import ProductCode, StockQuantity


class Inventory:
    """Aggregate root mapping product codes to stock quantities.

    Invariants:
    - every product code appears at most once
    - every quantity is >= 0
    - iteration is in ascending product-code order
    """

    def __init__(self, stock: Mapping[str, int] | None = None) -> None:
        self._stock: dict[str, int] = {}
        for code, quantity in (stock or {}).items():
            self.add(code, quantity)

    # --- Queries --------------------------------------------------------------

    def __contains__(self, code: object) -> bool:
        return code in self._stock

    def __len__(self) -> int:
        return len(self._stock)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._stock))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._stock == other._stock

    def __repr__(self) -> str:
        return f"Inventory({self.as_dict()!r})"

    @property
    def is_empty(self) -> bool:
        return not self._stock

    def get(self, code: str) -> int | None:
        return self._stock.get(code)

    def items(self) -> list[tuple[str, int]]:
        """Return (code, quantity) pairs sorted by code."""
        return sorted(self._stock.items())

    def as_dict(self) -> dict[str, int]:
        return dict(self.items())

    # --- Commands -------------------------------------------------------------

    def add(self, code: str, quantity: int) -> None:
        """Register a new product with its initial stock.

        Raises DuplicateEntityError if the code is already tracked; the
        existing quantity is left as it was.
        """
        key = ProductCode(code).value
        if key in self._stock:
            raise DuplicateEntityError(f"Product code already exists: '{key}'")
        self._stock[key] = StockQuantity(quantity).value

    def remove(self, code: str) -> bool:
        """Drop a product. Unknown codes are ignored.

        Returns True when something was removed.
        """
        return self._stock.pop(code, None) is not None

    def update(self, code: str, quantity: int) -> None:
        """Replace the stock of an existing product."""
        if code not in self._stock:
            raise EntityNotFoundError(f"Product code not found: '{code}'")
        self._stock[code] = StockQuantity(quantity).value
