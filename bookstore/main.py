"""Composition root for the bookstore inventory.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (demo walkthrough or interactive CLI)
"""

import json
import logging
import sys
from datetime import date

from bookstore.adapters.cli.commands import (
    CLICommandHandler,
    format_inventory,
    run_command,
)
from bookstore.adapters.fulfillment import (
    LogMailAdapter,
    LogShippingAdapter,
    StdoutMailAdapter,
    StdoutShippingAdapter,
)
from bookstore.adapters.fulfillment.stdout import PREFIX
from bookstore.config import Settings, load_settings
from bookstore.core.errors import PurchaseError
from bookstore.core.models import DigitalItem, DisplayItem, Item, PhysicalItem
from bookstore.core.ports import MailPort, ShippingPort, StorePort
from bookstore.core.store_service import StoreService

def _say(prefix: str, message: str) -> None:
    print(f"{prefix} {message}")


def _say_header(prefix: str, header: str) -> None:
    for line in ("", "-" * 53, header, "-" * 53):
        _say(prefix, line)


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for store commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("bookstore> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = run_command(cli_handler, command, args)
            except ValueError as e:
                result = {"status": "error", "message": str(e)}
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                result = {"status": "error", "message": str(e)}

            if command == "list" and result.get("status") == "success" and isinstance(result["data"], str):
                print(result["data"])
            else:
                print(json.dumps(result, indent=2, default=str))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add an item to the inventory (replaces an item with the same ISBN).
    Required: kind (paper, ebook, showcase), item_id, title, author,
              year_published, price
    Paper items also require stock; ebooks require file_format.

    Example: add {"kind": "paper", "item_id": "978-0132350884", "title": "Clean Code",
                  "author": "Robert C. Martin", "year_published": 2008,
                  "price": "45.50", "stock": 5}

  buy
    Buy copies of an item.
    Required: item_id
    Optional: quantity (default 1), email, address

    Example: buy {"item_id": "978-0132350884", "quantity": 2, "address": "123 Gleem, Alexandria"}

  prune
    Remove items published more than the given number of years ago.
    Required: years

    Example: prune {"years": 20}

  list
    Show the inventory.
    Optional: format (json, text)

    Example: list {"format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


class JsonLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    logging.basicConfig(level=level, handlers=[handler])


def resolve_current_year(settings: Settings) -> int:
    """The configured year override, or this year from the system clock."""
    if settings.current_year is not None:
        return settings.current_year
    return date.today().year


def build_fulfillment(settings: Settings) -> tuple[ShippingPort, MailPort]:
    """Instantiate the shipping and mail adapters selected by configuration.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    if settings.fulfillment_backend == "stdout":
        return (
            StdoutShippingAdapter(prefix=settings.notice_prefix),
            StdoutMailAdapter(prefix=settings.notice_prefix),
        )
    elif settings.fulfillment_backend == "log":
        return LogShippingAdapter(), LogMailAdapter()
    raise ValueError(f"Unknown fulfillment backend: {settings.fulfillment_backend}")


def build_store(settings: Settings) -> StoreService:
    """Wire fulfillment adapters into a fresh, empty store."""
    shipping, mail = build_fulfillment(settings)
    return StoreService(shipping=shipping, mail=mail)


def _attempt_purchase(
    store: StorePort,
    item_id: str,
    quantity: int,
    email: str | None,
    address: str | None,
    expect_failure: bool = False,
    prefix: str = PREFIX,
) -> None:
    try:
        amount = store.purchase(item_id, quantity, email, address)
        _say(prefix, f"Purchase successful! Amount paid: ${amount:.2f}")
    except PurchaseError as e:
        label = "CAUGHT EXPECTED ERROR" if expect_failure else "ERROR"
        _say(prefix, f"{label}: {e}")


def run_demo(
    store: StorePort,
    current_year: int,
    threshold_years: int = 20,
    prefix: str = PREFIX,
) -> list[Item]:
    """Walk through adding, buying and pruning, printing each step.

    Args:
        store: An empty store to populate.
        current_year: Year used to compute the pruning cutoff.
        threshold_years: Age above which items are pruned.
        prefix: Printed before every narration line.

    Returns:
        The items removed by the pruning step.
    """

    def say(message: str) -> None:
        _say(prefix, message)

    def show_inventory() -> None:
        print(format_inventory(store.list_all()))

    say("=" * 53)
    say("Initializing Quantum Bookstore Demo")
    say("=" * 53)

    _say_header(prefix, "STEP 1: ADDING BOOKS TO INVENTORY")
    store.add_item(PhysicalItem("978-0321765723", "The C++ Programming Language", "Bjarne Stroustrup", 2013, "69.99", 10))
    store.add_item(PhysicalItem("978-0132350884", "Clean Code", "Robert C. Martin", 2008, "45.50", 5))
    store.add_item(DigitalItem("978-0134494166", "Effective Java", "Joshua Bloch", 2018, "35.00", "PDF"))
    store.add_item(DigitalItem("978-1492032649", "Designing Data-Intensive Applications", "Martin Kleppmann", 2017, "55.99", "EPUB"))
    store.add_item(DisplayItem("DEMO-001", "Quantum Physics for Dummies", "Steven Holzner", 2013, "22.99"))
    show_inventory()

    _say_header(prefix, "STEP 2: BUYING BOOKS")
    say("--> Attempting to buy 2 copies of 'Clean Code'...")
    _attempt_purchase(store, "978-0132350884", 2, "Abuzaid@gmail.com", "123 Gleem, Alexandria", prefix=prefix)
    show_inventory()

    say("--> Attempting to buy 1 copy of 'Effective Java'...")
    _attempt_purchase(store, "978-0134494166", 1, "Marwan@yahoo.dev", None, prefix=prefix)
    show_inventory()

    say("--> Attempting to buy 10 copies of 'Clean Code' (only 3 left)...")
    _attempt_purchase(store, "978-0132350884", 10, "Abuzaid@example.com", "123 Gleem, Alexandria", expect_failure=True, prefix=prefix)

    say("--> Attempting to buy 'Quantum Physics for Dummies' (a showcase book)...")
    _attempt_purchase(store, "DEMO-001", 1, "curious.shopper@email.com", "456 Sheikh Zayed, Giza", expect_failure=True, prefix=prefix)

    say("--> Attempting to buy a book with a non-existent ISBN...")
    _attempt_purchase(store, "000-0000000000", 1, "ghost@shopper.com", "789 Nowhere St, Alexandria", expect_failure=True, prefix=prefix)

    _say_header(prefix, "STEP 3: REMOVING OUTDATED BOOKS")
    say("--> Adding a very old book from 1995 for removal test...")
    store.add_item(PhysicalItem("978-0201633610", "Design Patterns", "Erich Gamma", 1995, "54.99", 3))
    show_inventory()

    say(f"--> Removing all books older than {threshold_years} years...")
    removed = store.remove_outdated(threshold_years, current_year)
    say(f"Books removed: {len(removed)}")
    for item in removed:
        say(f"  - Removed: '{item.title}' published in {item.year_published}")
    show_inventory()

    say("=" * 53)
    say("Quantum Bookstore Demo Completed")
    say("=" * 53)
    return removed


def bootstrap(settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and the store
    4. Select and start run mode
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading bookstore inventory...")

    store = build_store(settings)
    current_year = resolve_current_year(settings)
    logger.info(
        f"Fulfillment adapter: {settings.fulfillment_backend}",
        extra={"current_year": current_year},
    )

    logger.info(f"Starting in {settings.run_mode} mode...")
    if settings.run_mode == "demo":
        run_demo(
            store,
            current_year,
            settings.outdated_threshold_years,
            prefix=settings.notice_prefix,
        )
    elif settings.run_mode == "cli":
        _run_cli_interactive(CLICommandHandler(store, current_year))
    else:
        raise ValueError(f"Unknown run mode: {settings.run_mode}")


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
