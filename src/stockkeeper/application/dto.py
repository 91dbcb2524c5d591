"""Read-only views handed from the use cases to the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockLineDTO:
    """Output: one product as shown in the inventory listing."""

    product_code: str
    stock: int

    def __str__(self) -> str:
        return f"Product Code: {self.product_code}, Stock: {self.stock}"
