"""Unit tests for domain value objects."""

import pytest

from stockkeeper.domain.exceptions import (
    InvalidNumberError,
    NegativeQuantityError,
    ValidationError,
)
from stockkeeper.domain.model.value_objects import MAX_STOCK, ProductCode, StockQuantity


# ── ProductCode ──────────────────────────────────────────────────────────────


class TestProductCode:

    def test_creation(self):
        assert ProductCode("P101").value == "P101"
        assert str(ProductCode("P101")) == "P101"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            ProductCode("")

    def test_non_text_rejected(self):
        with pytest.raises(ValidationError, match="must be text"):
            ProductCode(101)

    def test_ordering(self):
        assert ProductCode("A1") < ProductCode("B1")


# ── StockQuantity ────────────────────────────────────────────────────────────


class TestStockQuantity:

    def test_zero_allowed(self):
        assert StockQuantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(NegativeQuantityError):
            StockQuantity(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity(True)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity(1.5)

    def test_upper_bound(self):
        assert StockQuantity(MAX_STOCK).value == MAX_STOCK
        with pytest.raises(InvalidNumberError):
            StockQuantity(MAX_STOCK + 1)


class TestStockQuantityParse:

    @pytest.mark.parametrize("text, expected", [("25", 25), (" 7 ", 7), ("+3", 3), ("0", 0)])
    def test_valid(self, text, expected):
        assert StockQuantity.parse(text).value == expected

    @pytest.mark.parametrize("text", ["abc", "", "1.5", "1_000", "12abc", "0x10"])
    def test_not_a_number(self, text):
        with pytest.raises(InvalidNumberError):
            StockQuantity.parse(text)

    def test_negative_is_distinct_from_not_a_number(self):
        with pytest.raises(NegativeQuantityError):
            StockQuantity.parse("-5")

    def test_out_of_range_is_not_a_number(self):
        with pytest.raises(InvalidNumberError, match="out of range"):
            StockQuantity.parse("99999999999")
