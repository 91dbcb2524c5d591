"""Interactive menu session over a single Inventory.

The session owns the Inventory for the whole run. Every prompt reads one
logical line from the injected Console; quantity errors re-ask at the
same prompt, while domain errors abandon only the current operation.
"""

from __future__ import annotations

import logging
from enum import Enum

from stockkeeper.application.add_product import AddProductHandler
from stockkeeper.application.list_inventory import ListInventoryHandler
from stockkeeper.application.remove_product import RemoveProductHandler
from stockkeeper.application.update_stock import UpdateStockHandler
from stockkeeper.domain.exceptions import (
    CorruptInventoryFileError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidNumberError,
    NegativeQuantityError,
    PersistenceError,
)
from stockkeeper.domain.model.inventory import Inventory
from stockkeeper.domain.model.value_objects import StockQuantity, parse_whole_number
from stockkeeper.domain.repository.inventory_repository import InventoryRepository
from stockkeeper.infrastructure.cli.console import Console

logger = logging.getLogger(__name__)


class SessionState(Enum):
    MENU_PROMPT = "MENU_PROMPT"
    AWAITING_PRODUCT_CODE = "AWAITING_PRODUCT_CODE"
    AWAITING_QUANTITY = "AWAITING_QUANTITY"
    DONE = "DONE"


MENU = (
    "1. Add product",
    "2. Remove product",
    "3. Update stock",
    "4. List inventory",
    "5. Exit",
)

ADD, REMOVE, UPDATE, LIST, EXIT = range(1, 6)

# ---------------------------------------------------------------------------
# Operator messages
# ---------------------------------------------------------------------------
PRODUCT_CODE_PROMPT = "Product code:"
INITIAL_STOCK_PROMPT = "Enter initial stock quantity:"
NEW_STOCK_PROMPT = "New stock:"
INVALID_MENU_INPUT = "Error: Invalid input. Please enter a number."
INVALID_OPTION = "Invalid option."
INVALID_STOCK_INPUT = "Error: Invalid input. Please enter a number for the stock:"
NEGATIVE_STOCK = (
    "Error: Stock cannot be negative. Please enter a valid stock quantity:"
)
DUPLICATE_CODE = "Error: Product code already exists."
CODE_NOT_FOUND = "Error: Product code not found."
PRODUCT_ADDED = "Product added successfully."
PRODUCT_REMOVED = "Product removed."
STOCK_UPDATED = "Stock updated."
NO_PRODUCTS = "No products in stock."
LISTING_HEADER = "Current Stock:"
FAREWELL = "Exiting."
LOAD_FAILED = "Error reading the inventory file, starting a new record."
SAVE_FAILED = "Error saving data: {reason}"


class Session:
    """Menu loop driving the use-case handlers.

    ``run()`` returns once the operator picks Exit or input runs out; the
    state is then ``SessionState.DONE``.
    """

    def __init__(self, inventory: Inventory, console: Console) -> None:
        self.inventory = inventory
        self.state = SessionState.MENU_PROMPT
        self._console = console
        self._dispatch = {
            ADD: self.add_product,
            REMOVE: self.remove_product,
            UPDATE: self.update_stock,
            LIST: self.list_inventory,
        }

    def run(self) -> Inventory:
        try:
            while self.state is not SessionState.DONE:
                self.state = SessionState.MENU_PROMPT
                self._menu_step()
        except EOFError:
            logger.debug("Input exhausted while %s", self.state.value)
            self.state = SessionState.DONE
        return self.inventory

    # --- Menu -----------------------------------------------------------------

    def _menu_step(self) -> None:
        for line in MENU:
            self._console.write(line)

        token = self._console.read_token()
        try:
            option = parse_whole_number(token)
        except InvalidNumberError:
            self._console.write(INVALID_MENU_INPUT)
            option = 0

        if option == EXIT:
            self._console.write(FAREWELL)
            self.state = SessionState.DONE
            return

        operation = self._dispatch.get(option)
        if operation is None:
            self._console.write(INVALID_OPTION)
            return
        operation()

    # --- Operations -----------------------------------------------------------

    def add_product(self) -> None:
        handler = AddProductHandler(self.inventory)
        code = self._ask_product_code()
        try:
            handler.ensure_new(code)
        except DuplicateEntityError:
            self._console.write(DUPLICATE_CODE)
            return

        quantity = self._ask_quantity(INITIAL_STOCK_PROMPT)
        handler.handle(code, quantity)
        self._console.write(PRODUCT_ADDED)

    def remove_product(self) -> None:
        code = self._ask_product_code()
        if RemoveProductHandler(self.inventory).handle(code):
            self._console.write(PRODUCT_REMOVED)

    def update_stock(self) -> None:
        handler = UpdateStockHandler(self.inventory)
        code = self._ask_product_code()
        try:
            handler.ensure_exists(code)
        except EntityNotFoundError:
            self._console.write(CODE_NOT_FOUND)
            return

        quantity = self._ask_quantity(NEW_STOCK_PROMPT)
        handler.handle(code, quantity)
        self._console.write(STOCK_UPDATED)

    def list_inventory(self) -> None:
        lines = ListInventoryHandler(self.inventory).handle()
        if not lines:
            self._console.write(NO_PRODUCTS)
            return

        self._console.write(LISTING_HEADER)
        for line in lines:
            self._console.write(str(line))

    # --- Prompts --------------------------------------------------------------

    def _ask_product_code(self) -> str:
        self.state = SessionState.AWAITING_PRODUCT_CODE
        self._console.write(PRODUCT_CODE_PROMPT)
        return self._console.read_token()

    def _ask_quantity(self, prompt: str) -> int:
        """Keep asking until the operator gives a whole number >= 0."""
        self.state = SessionState.AWAITING_QUANTITY
        self._console.write(prompt)
        while True:
            try:
                return StockQuantity.parse(self._console.read_token()).value
            except NegativeQuantityError:
                self._console.write(NEGATIVE_STOCK)
            except InvalidNumberError:
                self._console.write(INVALID_STOCK_INPUT)


def load_inventory(repo: InventoryRepository, console: Console) -> Inventory:
    """Load stored stock, falling back to an empty inventory if unreadable."""
    try:
        return repo.load()
    except CorruptInventoryFileError:
        console.error(LOAD_FAILED)
        return Inventory()


def save_inventory(
    repo: InventoryRepository, inventory: Inventory, console: Console
) -> bool:
    """Write the inventory back. Returns False (after reporting) on failure."""
    try:
        repo.save(inventory)
    except PersistenceError as exc:
        console.error(SAVE_FAILED.format(reason=exc))
        return False
    return True
