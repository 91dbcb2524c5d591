"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stockkeeper.domain.exceptions import (
    InvalidNumberError,
    NegativeQuantityError,
    ValidationError,
)

# Stored quantities are 32-bit signed integers.
MAX_STOCK = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_whole_number(text: str) -> int:
    """Read a signed 32-bit integer typed by the operator.

    Raises InvalidNumberError for anything else, including digit
    separators and values out of range.
    """
    candidate = text.strip()
    if not _INTEGER_RE.fullmatch(candidate):
        raise InvalidNumberError(f"Not a whole number: {text!r}")
    value = int(candidate)
    if value > MAX_STOCK or value < -MAX_STOCK - 1:
        raise InvalidNumberError(f"Number out of range: {text!r}")
    return value


@dataclass(frozen=True, order=True)
class ProductCode:
    """A single opaque token identifying a stock item."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Product code must be text, got {type(self.value).__name__}"
            )
        if not self.value:
            raise ValidationError("Product code is required")
        if any(ch.isspace() for ch in self.value):
            raise ValidationError(
                f"Product code cannot contain whitespace: {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StockQuantity:
    """A non-negative whole number of units on hand."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise NegativeQuantityError("Stock cannot be negative")
        if self.value > MAX_STOCK:
            raise InvalidNumberError(f"Stock cannot exceed {MAX_STOCK}")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def parse(text: str) -> StockQuantity:
        """Build a quantity from operator input.

        Raises InvalidNumberError when *text* is not a whole number in
        range, and NegativeQuantityError when it is a negative one.
        """
        return StockQuantity(parse_whole_number(text))
