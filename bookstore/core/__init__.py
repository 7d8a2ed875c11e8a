"""Core domain logic for the bookstore inventory.

This package contains zero external dependencies and represents
the pure business logic of the application. Fulfillment stubs and the
command-line interface live in the adapters package.
"""

from .errors import (
    InsufficientStockError,
    InvalidQuantityError,
    ItemNotFoundError,
    MissingAddressError,
    MissingEmailError,
    NotForSaleError,
    PurchaseError,
)
from .models import (
    DigitalItem,
    DisplayItem,
    Item,
    PhysicalItem,
    PurchaseContext,
)

__all__ = [
    "DigitalItem",
    "DisplayItem",
    "InsufficientStockError",
    "InvalidQuantityError",
    "Item",
    "ItemNotFoundError",
    "MissingAddressError",
    "MissingEmailError",
    "NotForSaleError",
    "PhysicalItem",
    "PurchaseContext",
    "PurchaseError",
]
