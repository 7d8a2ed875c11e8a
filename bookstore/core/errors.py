"""Purchase error taxonomy for the bookstore core.

Every failure is a local validation or state failure: none of them is
transient, so callers should not retry. All errors derive from
PurchaseError, which is itself a ValueError so existing ``except ValueError``
handlers keep working.
"""


class PurchaseError(ValueError):
    """Base class for every purchase failure raised by the core."""


class ItemNotFoundError(PurchaseError):
    """The requested identifier is not in the catalog."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Book with ISBN {item_id} not found in inventory.")


class NotForSaleError(PurchaseError):
    """The item variant refuses to be sold (showcase items)."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Book '{title}' is a showcase item and not for sale.")


class InsufficientStockError(PurchaseError):
    """Requested quantity exceeds the remaining stock."""

    def __init__(self, title: str, available: int, requested: int):
        self.title = title
        self.available = available
        self.requested = requested
        super().__init__(
            f"Not enough stock for '{title}'. "
            f"Available: {available}, Requested: {requested}"
        )


class MissingAddressError(PurchaseError):
    """A physical purchase was attempted without a shipping address."""

    def __init__(self) -> None:
        super().__init__("A shipping address is required for paper books.")


class MissingEmailError(PurchaseError):
    """A digital purchase was attempted without a recipient email."""

    def __init__(self) -> None:
        super().__init__("An email address is required for eBooks.")


class InvalidQuantityError(PurchaseError):
    """Quantity is not a positive integer."""

    def __init__(self, quantity: object):
        self.quantity = quantity
        super().__init__(f"quantity must be a positive integer, got {quantity!r}")


__all__ = [
    "InsufficientStockError",
    "InvalidQuantityError",
    "ItemNotFoundError",
    "MissingAddressError",
    "MissingEmailError",
    "NotForSaleError",
    "PurchaseError",
]
