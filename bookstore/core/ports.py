"""Port interfaces for the bookstore inventory.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ShippingPort: Ship physical items to a postal address
   - MailPort: Deliver digital items to an email recipient

2. **Driving Ports** (adapters/external systems call into core)
   - StorePort: Catalog management and purchasing
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .models import Item


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ShippingPort(ABC):
    """Port for shipping physical items.

    Implementations are assumed to always succeed; the core does not
    model retries or shipping failures.
    """

    @abstractmethod
    def ship(self, item: Item, address: str) -> None:
        """Ship an item to a postal address.

        Args:
            item: The purchased item.
            address: Non-blank shipping address.
        """


class MailPort(ABC):
    """Port for delivering digital items by email."""

    @abstractmethod
    def send(self, item: Item, recipient: str) -> None:
        """Send a download link for an item.

        Args:
            item: The purchased item.
            recipient: Non-blank email address.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class StorePort(ABC):
    """Port for catalog management and purchasing.

    Called by the CLI and the demo driver. Implementations own the
    catalog exclusively.
    """

    @abstractmethod
    def add_item(self, item: Item) -> None:
        """Insert an item, replacing any item with the same identifier."""

    @abstractmethod
    def purchase(
        self,
        item_id: str,
        quantity: int,
        email: str | None = None,
        address: str | None = None,
    ) -> Decimal:
        """Buy copies of an item.

        Args:
            item_id: Identifier of the item to buy.
            quantity: Positive number of copies.
            email: Recipient email (required for digital items).
            address: Shipping address (required for physical items).

        Returns:
            Amount paid: unit price times quantity.

        Raises:
            PurchaseError: If the purchase cannot be completed. No state
                is changed when this is raised.
        """

    @abstractmethod
    def remove_outdated(
        self, age_threshold_years: int, current_year: int
    ) -> list[Item]:
        """Remove every item published before current_year - age_threshold_years.

        Returns:
            Exactly the items that were removed from the catalog.
        """

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return a snapshot of the catalog. No ordering guarantee."""

    @abstractmethod
    def get_item(self, item_id: str) -> Item | None:
        """Look up a single item, or None if absent."""
