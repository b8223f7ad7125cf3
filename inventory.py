#!/usr/bin/env python3
# inventory.py

"""
An in-memory inventory catalog with an interactive console menu.

Features
--------
* Add products (4-character ID, name, price, description, supplier, stock)
* Remove items by ID
* View a single item by ID
* Update the stock quantity of an item
* Full inventory report in insertion order
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from prompts import prompt_alpha, prompt_float, prompt_int, prompt_item_id


logger = logging.getLogger(__name__)

REPORT_SEPARATOR = "-" * 21
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ItemKind(Enum):
    ITEM = "item"
    PRODUCT = "product"


@dataclass
class Item:
    """
    Represents a single catalog entry.

    A plain item carries ID, name, price and stock. A product is the same
    record tagged with ``ItemKind.PRODUCT`` and two extra text fields.
    """
    item_id: str           # Exactly 4 characters, fixed once created
    name: str
    price: float
    stock: int
    kind: ItemKind = ItemKind.ITEM
    description: str = ""  # Products only
    supplier: str = ""     # Products only

    def __setattr__(self, attr: str, value) -> None:
        if attr == "item_id" and "item_id" in self.__dict__:
            raise AttributeError("item_id cannot be changed once the item exists")
        super().__setattr__(attr, value)

    @classmethod
    def product(cls, item_id: str, name: str, price: float,
                description: str, supplier: str, stock: int) -> "Item":
        return cls(item_id=item_id, name=name, price=price, stock=stock,
                   kind=ItemKind.PRODUCT, description=description, supplier=supplier)

    def describe(self) -> str:
        """Return the multi-line block used by the report and the ID lookup."""
        lines = [
            f"Item ID: {self.item_id}",
            f"Name: {self.name}",
            f"Price: ${self.price:.2f}",
            f"Stock: {self.stock}",
        ]
        if self.kind is ItemKind.PRODUCT:
            lines.append(f"Description: {self.description}")
            lines.append(f"Supplier: {self.supplier}")
        return "\n".join(lines) + "\n"


class Inventory:
    """
    Core inventory container – holds Items in the order they were added.

    Lookups are plain linear scans; the catalog is typed in by hand and stays
    small.
    """

    def __init__(self) -> None:
        self._items: List[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    # --------------------------------------------------------------------- #
    #  Public API
    # --------------------------------------------------------------------- #
    def add_item(self, item: Item) -> None:
        """Append `item`. The caller has already checked is_id_unique()."""
        self._items.append(item)
        logger.info("Added %s %s", item.kind.value, item.item_id)

    def is_id_unique(self, item_id: str) -> bool:
        return self.find_item(item_id) is None

    def find_item(self, item_id: str) -> Optional[Item]:
        """Return the Item for `item_id` or None if not present."""
        for item in self._items:
            if item.item_id == item_id:
                return item
        logger.debug("No item with ID %r", item_id)
        return None

    def remove_item(self, item_id: str) -> bool:
        """Delete the item with `item_id`. Returns False if it was not there."""
        for index, item in enumerate(self._items):
            if item.item_id == item_id:
                del self._items[index]
                logger.info("Removed item %s", item_id)
                return True
        logger.debug("Remove skipped, no item with ID %r", item_id)
        return False

    def update_item_stock(self, item_id: str, new_stock: int) -> bool:
        item = self.find_item(item_id)
        if item is None:
            return False
        logger.info("Stock for %s: %d -> %d", item_id, item.stock, new_stock)
        item.stock = new_stock
        return True

    # --------------------------------------------------------------------- #
    #  Reporting
    # --------------------------------------------------------------------- #
    def generate_report(self) -> str:
        """
        Produce the full report: every item's block followed by a dashed
        separator, or a one-line notice when the inventory is empty.
        """
        if not self._items:
            return "No items in inventory.\n"

        lines = ["", "=== Inventory Report ==="]
        for item in self._items:
            lines.append(item.describe().rstrip("\n"))
            lines.append(REPORT_SEPARATOR)
        return "\n".join(lines) + "\n"


# ------------------------------------------------------------------------- #
#  Workflows
# ------------------------------------------------------------------------- #
def add_product(inventory: Inventory) -> Optional[Item]:
    """
    Ask for a new product and add it.

    A duplicate ID aborts straight away, before any other field is asked for,
    and nothing is added.
    """
    item_id = prompt_item_id()
    if not inventory.is_id_unique(item_id):
        print(f"Error: Item ID {item_id} already exists. Please use a unique ID.")
        return None

    name = prompt_alpha("Enter product name (alphabetic characters only): ")
    price = prompt_float("Enter product price (non-negative number): ")
    description = prompt_alpha("Enter product description (alphabetic characters only): ")
    supplier = prompt_alpha("Enter supplier name (alphabetic characters only): ")
    stock = prompt_int("Enter initial stock quantity (non-negative integer): ")

    product = Item.product(item_id, name, price, description, supplier, stock)
    inventory.add_item(product)
    print("Product added successfully!")
    return product


# IDs typed at the remove/view/update prompts are not length-checked.
def remove_by_id(inventory: Inventory) -> None:
    item_id = input("Enter item ID to remove: ").strip()
    if inventory.remove_item(item_id):
        print(f"Item with ID {item_id} has been successfully removed from the inventory.")
    else:
        print(f"Error: Item with ID {item_id} not found in the inventory.")


def view_by_id(inventory: Inventory) -> None:
    item_id = input("Enter item ID to view: ").strip()
    item = inventory.find_item(item_id)
    if item is None:
        print(f"Error: Item with ID {item_id} not found.")
    else:
        print(item.describe(), end="")


def update_stock(inventory: Inventory) -> None:
    item_id = input("Enter item ID to update stock: ").strip()
    new_stock = prompt_int("Enter new stock quantity: ")
    if inventory.update_item_stock(item_id, new_stock):
        print(f"Stock for item ID {item_id} has been updated to {new_stock}.")
    else:
        print(f"Error: Item with ID {item_id} not found in the inventory.")


# ------------------------------------------------------------------------- #
#  CLI – Simple interactive text menu
# ------------------------------------------------------------------------- #
MENU = """=== Inventory Management System Menu ===
1. Add Product
2. Remove Item
3. Generate Inventory Report
4. View Item by ID
5. Update Item Stock
6. Exit"""


def _print_menu() -> None:
    print(MENU)


def _read_choice() -> Optional[int]:
    try:
        return int(input("Select an option: ").strip())
    except ValueError:
        return None


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    inv = Inventory()

    while True:
        _print_menu()
        try:
            choice = _read_choice()

            if choice == 1:
                add_product(inv)
            elif choice == 2:
                remove_by_id(inv)
            elif choice == 3:
                print(inv.generate_report(), end="")
            elif choice == 4:
                view_by_id(inv)
            elif choice == 5:
                update_stock(inv)
            elif choice == 6:
                print("Exiting the program.")
                break
            else:
                print("Invalid option. Please try again.")
        except (EOFError, KeyboardInterrupt):
            # Closed stdin or Ctrl-C ends the session like option 6.
            print()
            print("Exiting the program.")
            break


if __name__ == "__main__":
    # Entry point when running `python inventory.py`
    main()
