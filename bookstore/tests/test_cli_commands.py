"""Unit tests for CLI commands.

Tests verify that the CLI handler correctly:
- Builds items of each kind and adds them to the store
- Reports purchases and purchase failures as result dictionaries
- Prunes using the configured current year
- Renders the inventory as JSON records or printable text
"""

from decimal import Decimal

import pytest

from bookstore.adapters.cli.commands import (
    CLICommandHandler,
    format_inventory,
    item_to_dict,
    run_command,
)
from bookstore.core.models import DigitalItem, DisplayItem, PhysicalItem
from bookstore.core.store_service import StoreService
from bookstore.tests.fakes import FakeMailPort, FakeShippingPort

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def store() -> StoreService:
    return StoreService(shipping=FakeShippingPort(), mail=FakeMailPort())


@pytest.fixture
def handler(store: StoreService) -> CLICommandHandler:
    return CLICommandHandler(store, current_year=2024)


@pytest.fixture
def paper_args() -> dict:
    return {
        "kind": "paper",
        "item_id": "978-0132350884",
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "year_published": 2008,
        "price": "45.50",
        "stock": 5,
    }


# ============================================================================
# add
# ============================================================================


class TestAddCommand:
    """Test the add command for each item kind."""

    def test_add_paper(self, handler: CLICommandHandler, store: StoreService, paper_args: dict) -> None:
        result = run_command(handler, "add", paper_args)

        assert result["status"] == "success"
        assert result["item"]["kind"] == "paper"
        assert result["item"]["stock"] == 5
        assert isinstance(store.get_item("978-0132350884"), PhysicalItem)

    def test_add_ebook(self, handler: CLICommandHandler, store: StoreService) -> None:
        result = handler.add_item(
            "ebook", "E-1", "Effective Java", "Joshua Bloch", 2018, "35.00", file_format="PDF"
        )

        assert result["status"] == "success"
        assert result["item"]["file_format"] == "PDF"
        assert "stock" not in result["item"]
        assert isinstance(store.get_item("E-1"), DigitalItem)

    def test_add_showcase(self, handler: CLICommandHandler, store: StoreService) -> None:
        result = handler.add_item("showcase", "DEMO-001", "Quantum Physics", "Holzner", 2013, "22.99")

        assert result["status"] == "success"
        assert result["item"]["for_sale"] is False
        assert isinstance(store.get_item("DEMO-001"), DisplayItem)

    def test_unknown_kind(self, handler: CLICommandHandler, store: StoreService) -> None:
        result = handler.add_item("vinyl", "V-1", "t", "a", 2000, "1.00")

        assert result["status"] == "error"
        assert "Unknown item kind: vinyl" in result["message"]
        assert len(store) == 0

    def test_paper_requires_stock(self, handler: CLICommandHandler, paper_args: dict) -> None:
        del paper_args["stock"]
        result = run_command(handler, "add", paper_args)

        assert result["status"] == "error"
        assert "stock" in result["message"]

    def test_ebook_requires_format(self, handler: CLICommandHandler) -> None:
        result = handler.add_item("ebook", "E-1", "t", "a", 2000, "1.00")

        assert result["status"] == "error"
        assert "file_format" in result["message"]

    def test_invalid_price_reported(self, handler: CLICommandHandler, paper_args: dict) -> None:
        paper_args["price"] = "-1"
        result = run_command(handler, "add", paper_args)

        assert result["status"] == "error"
        assert "price" in result["message"]

    def test_missing_required_argument(self, handler: CLICommandHandler) -> None:
        with pytest.raises(ValueError, match="Missing required parameter: kind"):
            run_command(handler, "add", {})


# ============================================================================
# buy
# ============================================================================


class TestBuyCommand:
    """Test the buy command."""

    def test_buy_success(self, handler: CLICommandHandler, store: StoreService, paper_args: dict) -> None:
        run_command(handler, "add", paper_args)
        result = run_command(
            handler, "buy", {"item_id": "978-0132350884", "quantity": 2, "address": "Alexandria"}
        )

        assert result["status"] == "success"
        assert result["amount_paid"] == "91.00"
        assert result["message"] == "Purchase successful! Amount paid: $91.00"
        assert store.get_item("978-0132350884").stock == 3

    def test_buy_defaults_to_one_copy(self, handler: CLICommandHandler, paper_args: dict) -> None:
        run_command(handler, "add", paper_args)
        result = run_command(handler, "buy", {"item_id": "978-0132350884", "address": "X"})

        assert result["quantity"] == 1
        assert result["amount_paid"] == "45.50"

    def test_buy_logs_the_sale_once(
        self, handler: CLICommandHandler, paper_args: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        run_command(handler, "add", paper_args)

        with caplog.at_level("INFO"):
            run_command(handler, "buy", {"item_id": "978-0132350884", "address": "X"})

        sales = [r for r in caplog.records if r.getMessage().startswith("Sold 1 x")]
        assert len(sales) == 1

    def test_buy_out_of_stock(self, handler: CLICommandHandler, paper_args: dict) -> None:
        run_command(handler, "add", paper_args)
        result = handler.buy_item("978-0132350884", 10, address="X")

        assert result["status"] == "error"
        assert result["error_type"] == "InsufficientStockError"
        assert "Available: 5, Requested: 10" in result["message"]

    def test_buy_missing_item(self, handler: CLICommandHandler) -> None:
        result = handler.buy_item("000-0000000000", 1, "ghost@shopper.com", "Nowhere")

        assert result["status"] == "error"
        assert result["error_type"] == "ItemNotFoundError"

    def test_buy_showcase(self, handler: CLICommandHandler) -> None:
        handler.add_item("showcase", "DEMO-001", "Quantum Physics", "Holzner", 2013, "22.99")
        result = handler.buy_item("DEMO-001", 1, "a@b.c", "X")

        assert result["error_type"] == "NotForSaleError"

    def test_buy_requires_item_id(self, handler: CLICommandHandler) -> None:
        with pytest.raises(ValueError, match="item_id"):
            run_command(handler, "buy", {"quantity": 1})


# ============================================================================
# prune and list
# ============================================================================


def test_prune_uses_handler_year(handler: CLICommandHandler, store: StoreService) -> None:
    store.add_item(PhysicalItem("OLD", "Design Patterns", "Erich Gamma", 1995, "54.99", 3))
    store.add_item(PhysicalItem("NEW", "Clean Code", "Robert C. Martin", 2008, "45.50", 5))

    result = run_command(handler, "prune", {"years": 20})

    assert result["status"] == "success"
    assert result["cutoff_year"] == 2004
    assert [item["item_id"] for item in result["removed"]] == ["OLD"]
    assert result["message"] == "Books removed: 1"
    assert "OLD" not in store


def test_prune_negative_years(handler: CLICommandHandler) -> None:
    result = handler.prune_outdated(-5)

    assert result["status"] == "error"


def test_list_json(handler: CLICommandHandler, paper_args: dict) -> None:
    run_command(handler, "add", paper_args)
    result = run_command(handler, "list", {})

    assert result["status"] == "success"
    assert result["data"][0]["title"] == "Clean Code"
    assert result["data"][0]["price"] == "45.50"


def test_list_text(handler: CLICommandHandler, paper_args: dict) -> None:
    run_command(handler, "add", paper_args)
    result = run_command(handler, "list", {"format": "text"})

    assert "--- Current Inventory ---" in result["data"]
    assert "  - ISBN: 978-0132350884, Title: Clean Code" in result["data"]


def test_list_unsupported_format(handler: CLICommandHandler) -> None:
    result = handler.list_inventory("yaml")

    assert result["status"] == "error"
    assert "Unsupported format: yaml" in result["message"]


def test_unknown_command(handler: CLICommandHandler) -> None:
    with pytest.raises(ValueError, match="Unknown command: sell"):
        run_command(handler, "sell", {})


def test_format_empty_inventory() -> None:
    text = format_inventory([])

    assert "Inventory is empty." in text
    assert text.strip().endswith("-------------------------")


def test_item_to_dict_price_is_string() -> None:
    data = item_to_dict(DisplayItem("D", "t", "a", 2000, Decimal("9.99")))

    assert data == {
        "kind": "showcase",
        "item_id": "D",
        "title": "t",
        "author": "a",
        "year_published": 2000,
        "price": "9.99",
        "for_sale": False,
    }


@pytest.mark.parametrize("years", ["20", 2.5, True, None])
def test_prune_non_int_years_reported(handler: CLICommandHandler, years) -> None:
    result = run_command(handler, "prune", {"years": years})

    assert result["status"] == "error"
    assert "age_threshold_years must be an int" in result["message"]


def test_add_non_string_identifier_reported(handler: CLICommandHandler, store: StoreService) -> None:
    result = run_command(
        handler,
        "add",
        {
            "kind": "showcase",
            "item_id": 123,
            "title": "t",
            "author": "a",
            "year_published": 2000,
            "price": "1.00",
        },
    )

    assert result["status"] == "error"
    assert "item_id must be a string" in result["message"]
    assert len(store) == 0
