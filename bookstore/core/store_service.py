"""Store service: implements StorePort over an in-memory catalog.

The store looks items up, refuses non-saleable ones, and hands the rest
of the purchase to the item itself. It never inspects the concrete item
type. Every operation runs under a single lock so a purchase's
check-then-decrement on stock is atomic when the store is shared.
"""

import logging
import threading
from decimal import Decimal

from .errors import ItemNotFoundError, NotForSaleError
from .models import Item, PurchaseContext, validate_quantity
from .ports import MailPort, ShippingPort, StorePort

logger = logging.getLogger(__name__)


class StoreService(StorePort):
    """Core implementation of StorePort.

    Owns the identifier -> Item mapping and the two fulfillment
    collaborators passed to items during a purchase.
    """

    def __init__(self, shipping: ShippingPort, mail: MailPort):
        """Initialize the store with an empty catalog.

        Args:
            shipping: ShippingPort implementation for physical items.
            mail: MailPort implementation for digital items.
        """
        self.shipping = shipping
        self.mail = mail
        self._inventory: dict[str, Item] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._inventory)

    def __contains__(self, item_id: object) -> bool:
        with self._lock:
            return item_id in self._inventory

    def add_item(self, item: Item) -> None:
        """Add an item; an existing item with the same identifier is replaced."""
        with self._lock:
            replaced = item.item_id in self._inventory
            self._inventory[item.item_id] = item

        logger.info(
            f"Added '{item.title}' to inventory.",
            extra={"item_id": item.item_id, "replaced": replaced},
        )

    def get_item(self, item_id: str) -> Item | None:
        with self._lock:
            return self._inventory.get(item_id)

    def purchase(
        self,
        item_id: str,
        quantity: int,
        email: str | None = None,
        address: str | None = None,
    ) -> Decimal:
        """Buy copies of an item and return the amount paid.

        Raises:
            InvalidQuantityError: If quantity is not a positive int.
            ItemNotFoundError: If item_id is not in the catalog.
            NotForSaleError: If the item is not saleable.
            PurchaseError: Any failure raised by the item's own handler.
        """
        validate_quantity(quantity)

        with self._lock:
            item = self._inventory.get(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)

            if not item.is_saleable():
                raise NotForSaleError(item.title)

            context = PurchaseContext(
                email=email,
                address=address,
                shipping=self.shipping,
                mail=self.mail,
            )
            item.handle_purchase(quantity, context)

        amount = item.price * quantity
        logger.info(
            f"Sold {quantity} x '{item.title}' for {amount:.2f}",
            extra={"item_id": item_id, "quantity": quantity, "amount": str(amount)},
        )
        return amount

    def remove_outdated(
        self, age_threshold_years: int, current_year: int
    ) -> list[Item]:
        """Remove items published strictly before current_year - age_threshold_years.

        Args:
            age_threshold_years: Maximum age in years; must be non-negative.
            current_year: The year to measure age from.

        Returns:
            The removed items.

        Raises:
            ValueError: If age_threshold_years is not a non-negative int.
        """
        if isinstance(age_threshold_years, bool) or not isinstance(
            age_threshold_years, int
        ):
            raise ValueError(
                f"age_threshold_years must be an int, got {age_threshold_years!r}"
            )
        if age_threshold_years < 0:
            raise ValueError(
                f"age_threshold_years must be non-negative, got {age_threshold_years}"
            )
        cutoff_year = current_year - age_threshold_years

        with self._lock:
            removed = [
                item
                for item in self._inventory.values()
                if item.year_published < cutoff_year
            ]
            for item in removed:
                del self._inventory[item.item_id]

        logger.info(
            f"Removed {len(removed)} items published before {cutoff_year}",
            extra={"cutoff_year": cutoff_year, "removed": [i.item_id for i in removed]},
        )
        return removed

    def list_all(self) -> list[Item]:
        with self._lock:
            return list(self._inventory.values())
