"""Tests for the JSON file repository."""

import json
import logging

import pytest

from stockkeeper.domain.exceptions import CorruptInventoryFileError, PersistenceError
from stockkeeper.domain.model.inventory import Inventory
from stockkeeper.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


class TestLoad:

    def test_missing_file_is_empty(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "nonExistent.dat")
        assert repo.load() == Inventory()

    def test_zero_length_file_is_empty(self, tmp_path):
        path = tmp_path / "emptyInventory.dat"
        path.touch()
        assert JsonInventoryRepository(path).load().is_empty

    def test_unusable_path_rejected(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / ("a" * 300))
        with pytest.raises(CorruptInventoryFileError, match="Cannot read"):
            repo.load()

    def test_load_does_not_create_file(self, tmp_path):
        path = tmp_path / "existencias.dat"
        JsonInventoryRepository(path).load()
        assert not path.exists()

    @pytest.mark.parametrize(
        "content",
        [
            "not json at all",
            "[1, 2, 3]",
            '{"P1": "ten"}',
            '{"P1": -4}',
            '{"P1": 2.5}',
            '{"P1": true}',
            '{"": 3}',
            '{"P1": ' + "9" * 5000 + "}",
            "[" * 200000 + "]" * 200000,
        ],
        ids=[
            "not-json",
            "array",
            "text-value",
            "negative",
            "float",
            "bool",
            "blank-code",
            "huge-integer",
            "deep-nesting",
        ],
    )
    def test_corrupt_content_rejected(self, tmp_path, content):
        path = tmp_path / "existencias.dat"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(CorruptInventoryFileError):
            JsonInventoryRepository(path).load()

    def test_binary_garbage_rejected(self, tmp_path, caplog):
        path = tmp_path / "existencias.dat"
        path.write_bytes(b"\xac\xed\x00\x05sr\x00\x11java.util.TreeMap")
        with caplog.at_level(logging.WARNING):
            with pytest.raises(CorruptInventoryFileError):
                JsonInventoryRepository(path).load()
        assert "Unreadable inventory file" in caplog.text


class TestSave:

    def test_round_trip_multi_entry(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "testInventory.dat")
        inventory = Inventory({"P502": 200, "P501": 100})

        repo.save(inventory)

        loaded = repo.load()
        assert loaded == inventory
        assert loaded.items() == [("P501", 100), ("P502", 200)]

    def test_round_trip_empty(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "testInventory.dat")
        repo.save(Inventory())
        assert repo.load() == Inventory()

    def test_save_overwrites(self, tmp_path):
        path = tmp_path / "existencias.dat"
        path.write_text("corrupt", encoding="utf-8")
        repo = JsonInventoryRepository(path)

        repo.save(Inventory({"P1": 1}))

        assert json.loads(path.read_text(encoding="utf-8")) == {"P1": 1}

    def test_save_creates_parent_directories(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "nested" / "dir" / "stock.dat")
        repo.save(Inventory({"P1": 1}))
        assert repo.load().get("P1") == 1

    def test_write_failure_raises_persistence_error(self, tmp_path):
        # A directory in place of the file makes the write fail.
        target = tmp_path / "existencias.dat"
        target.mkdir()
        with pytest.raises(PersistenceError):
            JsonInventoryRepository(target).save(Inventory({"P1": 1}))
