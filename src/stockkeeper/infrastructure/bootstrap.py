"""Composition root: builds the repository and logging setup used by the CLI.

The storage path comes from the --file option, the STOCKKEEPER_FILE
environment variable, or the default name, in that order.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from stockkeeper.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)

DEFAULT_FILE_NAME = "existencias.dat"
FILE_ENV_VAR = "STOCKKEEPER_FILE"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def inventory_path(override: str | os.PathLike | None = None) -> Path:
    """Resolve the storage file: explicit override, env var, then default.

    Relative paths are taken from the current working directory.
    """
    if override:
        return Path(override)
    return Path(os.environ.get(FILE_ENV_VAR) or DEFAULT_FILE_NAME)


def inventory_repository(
    path: str | os.PathLike | None = None,
) -> JsonInventoryRepository:
    return JsonInventoryRepository(inventory_path(path))


def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; stdout is reserved for the menu."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
