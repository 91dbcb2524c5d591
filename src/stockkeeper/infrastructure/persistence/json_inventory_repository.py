"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from stockkeeper.domain.exceptions import (
    CorruptInventoryFileError,
    DomainException,
    PersistenceError,
)
from stockkeeper.domain.model.inventory import Inventory
from stockkeeper.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class JsonInventoryRepository(InventoryRepository):
    """Stores the inventory as a JSON object of ``{code: quantity}``.

    The file is only touched by ``load`` and ``save``; it is never held
    open between them.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- InventoryRepository interface ----------------------------------------

    def load(self) -> Inventory:
        """Read the inventory file.

        A missing or zero-length file is an empty inventory. Anything else
        that is not a valid mapping raises CorruptInventoryFileError.
        """
        if self._stored_size() == 0:
            logger.debug("No stored inventory at %s", self._file_path)
            return Inventory()

        raw = self._load_raw()
        inventory = self._to_domain(raw)
        logger.debug("Loaded %d products from %s", len(inventory), self._file_path)
        return inventory

    def save(self, inventory: Inventory) -> None:
        self._persist_raw(self._to_raw(inventory))
        logger.debug("Saved %d products to %s", len(inventory), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(inventory: Inventory) -> dict:
        return inventory.as_dict()

    def _to_domain(self, raw: object) -> Inventory:
        if not isinstance(raw, dict):
            raise CorruptInventoryFileError(
                f"{self._file_path}: expected an object, got {type(raw).__name__}"
            )
        try:
            return Inventory(raw)
        except DomainException as exc:
            raise CorruptInventoryFileError(f"{self._file_path}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _stored_size(self) -> int:
        """Size of the file in bytes; a missing file counts as empty."""
        try:
            return self._file_path.stat().st_size
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning("Cannot inspect inventory file %s: %s", self._file_path, exc)
            raise CorruptInventoryFileError(
                f"Cannot read {self._file_path}: {exc}"
            ) from exc

    def _load_raw(self) -> object:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("Unreadable inventory file %s: %s", self._file_path, exc)
            raise CorruptInventoryFileError(
                f"Cannot read {self._file_path}: {exc}"
            ) from exc

    def _persist_raw(self, records: dict) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(records, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise PersistenceError(str(exc)) from exc
