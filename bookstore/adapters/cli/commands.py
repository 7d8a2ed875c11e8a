"""CLI command implementations for bookstore management.

Provides human-initiated actions through a command-line interface.

This adapter maps CLI commands (add, buy, prune, list) to StorePort
operations. It handles CLI-specific formatting and error reporting:
domain errors come back as ``{"status": "error", ...}`` dictionaries
instead of exceptions.
"""

import logging
from decimal import Decimal
from typing import Any

from bookstore.core.errors import PurchaseError
from bookstore.core.models import DigitalItem, DisplayItem, Item, PhysicalItem
from bookstore.core.ports import StorePort

logger = logging.getLogger(__name__)

ITEM_KINDS: dict[str, type[Item]] = {
    cls.kind: cls for cls in (PhysicalItem, DigitalItem, DisplayItem)
}


def item_to_dict(item: Item) -> dict[str, Any]:
    """Serialize an item to a JSON-ready dictionary."""
    data: dict[str, Any] = {
        "kind": item.kind,
        "item_id": item.item_id,
        "title": item.title,
        "author": item.author,
        "year_published": item.year_published,
        "price": str(item.price),
        "for_sale": item.is_saleable(),
    }
    # Variant-specific fields, whichever the item has.
    for name in ("stock", "file_format"):
        if hasattr(item, name):
            data[name] = getattr(item, name)
    return data


def format_inventory(items: list[Item]) -> str:
    """Render the inventory the way the store prints it to customers."""
    lines = ["", "--- Current Inventory ---"]
    if not items:
        lines.append("Inventory is empty.")
    else:
        lines.extend(f"  - {item.describe()}" for item in items)
    lines.append("-------------------------")
    lines.append("")
    return "\n".join(lines)


class CLICommandHandler:
    """Handles CLI commands by delegating to StorePort.

    Provides a command-line interface for adding items, buying them,
    pruning outdated stock and listing the inventory.
    """

    def __init__(self, store: StorePort, current_year: int):
        """Initialize the CLI command handler.

        Args:
            store: StorePort implementation to execute commands.
            current_year: Year used when pruning outdated items.
        """
        self.store = store
        self.current_year = current_year

    def add_item(
        self,
        kind: str,
        item_id: str,
        title: str,
        author: str,
        year_published: int,
        price: Any,
        stock: int | None = None,
        file_format: str | None = None,
    ) -> dict[str, Any]:
        """Create an item of the given kind and add it to the catalog.

        Args:
            kind: One of 'paper', 'ebook', 'showcase'.
            stock: Required for paper items.
            file_format: Required for ebook items.

        Returns:
            Dictionary with status and the stored item.
        """
        try:
            item_cls = ITEM_KINDS.get(kind)
            if item_cls is None:
                raise ValueError(
                    f"Unknown item kind: {kind}. "
                    f"Expected one of: {', '.join(sorted(ITEM_KINDS))}"
                )

            extra: dict[str, Any] = {}
            if item_cls is PhysicalItem:
                if stock is None:
                    raise ValueError("Missing required parameter: stock")
                extra["stock"] = stock
            elif item_cls is DigitalItem:
                if not file_format:
                    raise ValueError("Missing required parameter: file_format")
                extra["file_format"] = file_format

            item = item_cls(item_id, title, author, year_published, price, **extra)
            self.store.add_item(item)

            return {
                "status": "success",
                "operation": "add",
                "item": item_to_dict(item),
                "message": f"Added '{item.title}' to inventory.",
            }

        except ValueError as e:
            logger.error(f"Failed to add item: {e}")
            return {
                "status": "error",
                "operation": "add",
                "item_id": item_id,
                "message": str(e),
            }

    def buy_item(
        self,
        item_id: str,
        quantity: int,
        email: str | None = None,
        address: str | None = None,
    ) -> dict[str, Any]:
        """Buy copies of an item via CLI.

        Returns:
            Dictionary with status, amount paid or error message.
        """
        try:
            amount: Decimal = self.store.purchase(item_id, quantity, email, address)

            return {
                "status": "success",
                "operation": "buy",
                "item_id": item_id,
                "quantity": quantity,
                "amount_paid": f"{amount:.2f}",
                "message": f"Purchase successful! Amount paid: ${amount:.2f}",
            }

        except PurchaseError as e:
            logger.error(f"Failed to buy item: {e}")
            return {
                "status": "error",
                "operation": "buy",
                "item_id": item_id,
                "error_type": type(e).__name__,
                "message": str(e),
            }

    def prune_outdated(self, years: int) -> dict[str, Any]:
        """Remove every item older than the given number of years."""
        try:
            removed = self.store.remove_outdated(years, self.current_year)
        except ValueError as e:
            logger.error(f"Failed to prune inventory: {e}")
            return {
                "status": "error",
                "operation": "prune",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "prune",
            "cutoff_year": self.current_year - years,
            "removed": [item_to_dict(item) for item in removed],
            "message": f"Books removed: {len(removed)}",
        }

    def list_inventory(self, output_format: str = "json") -> dict[str, Any]:
        """List the catalog as JSON records or as the printed inventory text."""
        items = self.store.list_all()

        if output_format == "json":
            return {
                "status": "success",
                "operation": "list",
                "data": [item_to_dict(item) for item in items],
            }

        elif output_format == "text":
            return {
                "status": "success",
                "operation": "list",
                "data": format_inventory(items),
            }

        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {output_format}",
            }


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler bound to a store.
        command: Command name ('add', 'buy', 'prune', 'list').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            argument is missing.
    """
    if command == "add":
        for required in ("kind", "item_id", "title", "author", "year_published", "price"):
            if required not in args:
                raise ValueError(f"Missing required parameter: {required}")
        return handler.add_item(
            args["kind"],
            args["item_id"],
            args["title"],
            args["author"],
            args["year_published"],
            args["price"],
            stock=args.get("stock"),
            file_format=args.get("file_format"),
        )

    elif command == "buy":
        if "item_id" not in args:
            raise ValueError("Missing required parameter: item_id")
        return handler.buy_item(
            args["item_id"],
            args.get("quantity", 1),
            args.get("email"),
            args.get("address"),
        )

    elif command == "prune":
        if "years" not in args:
            raise ValueError("Missing required parameter: years")
        return handler.prune_outdated(args["years"])

    elif command == "list":
        return handler.list_inventory(args.get("format", "json"))

    else:
        raise ValueError(f"Unknown command: {command}")
