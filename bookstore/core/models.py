"""Domain models for the bookstore inventory.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.

The catalog is one flat polymorphic layer: every concrete item decides
for itself whether it can be sold and how a sale is fulfilled, so the
store never has to branch on the item type.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, ClassVar

from .errors import (
    InsufficientStockError,
    InvalidQuantityError,
    MissingAddressError,
    MissingEmailError,
    NotForSaleError,
)

if TYPE_CHECKING:
    from .ports import MailPort, ShippingPort


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")


def validate_quantity(quantity: int) -> None:
    """Reject anything that is not a strictly positive int.

    Raises:
        InvalidQuantityError: For zero, negative, bool or non-int values.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError(quantity)


@dataclass(frozen=True)
class PurchaseContext:
    """Per-transaction inputs handed to an item's purchase handler.

    Built by the store for a single purchase call and never stored. The
    two collaborators are borrowed for the duration of the call.
    """

    email: str | None
    address: str | None
    shipping: "ShippingPort"
    mail: "MailPort"


@dataclass(eq=False)
class Item(ABC):
    """A catalog entry representing one book-like product.

    The identifier cannot be reassigned once set because the catalog is
    keyed on it. The only state that changes during a purchase is the
    stock of a PhysicalItem, through remove_stock. Equality is identity
    so an item keeps its hash while its stock changes.
    """

    kind: ClassVar[str]

    item_id: str  # ISBN or showcase code
    title: str
    author: str
    year_published: int
    price: Decimal  # normalised from int/float/str in __post_init__

    def __setattr__(self, name: str, value: object) -> None:
        if name == "item_id" and "item_id" in self.__dict__:
            raise AttributeError("item_id cannot be changed once set")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        """Validate item invariants on creation."""
        for name in ("item_id", "title", "author"):
            _require_str(name, getattr(self, name))
        if not self.item_id.strip():
            raise ValueError("item_id must be a non-empty string")
        if isinstance(self.year_published, bool) or not isinstance(
            self.year_published, int
        ):
            raise ValueError(
                f"year_published must be an int, got {self.year_published!r}"
            )

        try:
            price = Decimal(str(self.price))
        except InvalidOperation as e:
            raise ValueError(f"price must be a number, got {self.price!r}") from e
        if not price.is_finite() or price < 0:
            raise ValueError(f"price must be non-negative, got {self.price!r}")
        self.price = price

    def is_saleable(self) -> bool:
        """Whether the store may sell this item at all."""
        return True

    @abstractmethod
    def handle_purchase(self, quantity: int, context: PurchaseContext) -> None:
        """Validate and fulfil a purchase of this item.

        Implementations must finish every validation step before changing
        any state or calling a collaborator.

        Raises:
            PurchaseError: If the purchase cannot be completed.
        """

    def describe(self) -> str:
        """One-line human readable description used in inventory listings."""
        return (
            f"ISBN: {self.item_id}, Title: {self.title}, "
            f"Author: {self.author}, Year: {self.year_published}"
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(eq=False)
class PhysicalItem(Item):
    """A paper book with a limited stock that must be shipped."""

    kind = "paper"

    stock: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValueError(f"stock must be an int, got {self.stock!r}")
        if self.stock < 0:
            raise ValueError(f"stock must be non-negative, got {self.stock}")

    def remove_stock(self, quantity: int) -> None:
        """Take copies out of stock. Stock never goes up or below zero."""
        validate_quantity(quantity)
        if quantity > self.stock:
            raise InsufficientStockError(self.title, self.stock, quantity)
        self.stock -= quantity

    def handle_purchase(self, quantity: int, context: PurchaseContext) -> None:
        validate_quantity(quantity)
        if quantity > self.stock:
            raise InsufficientStockError(self.title, self.stock, quantity)
        if _is_blank(context.address):
            raise MissingAddressError()

        self.remove_stock(quantity)
        context.shipping.ship(self, context.address)

    def describe(self) -> str:
        return f"{super().describe()} (Paper, Stock: {self.stock})"


@dataclass(eq=False)
class DigitalItem(Item):
    """An eBook delivered by email; availability is unlimited."""

    kind = "ebook"

    file_format: str  # e.g. "PDF", "EPUB"

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_str("file_format", self.file_format)

    def handle_purchase(self, quantity: int, context: PurchaseContext) -> None:
        validate_quantity(quantity)
        if _is_blank(context.email):
            raise MissingEmailError()

        # No stock to reduce for digital copies.
        context.mail.send(self, context.email)

    def describe(self) -> str:
        return f"{super().describe()} (eBook, Format: {self.file_format})"


@dataclass(eq=False)
class DisplayItem(Item):
    """A showcase item that is never for sale."""

    kind = "showcase"

    def is_saleable(self) -> bool:
        return False

    def handle_purchase(self, quantity: int, context: PurchaseContext) -> None:
        # The store refuses these before getting here; the item refuses too.
        raise NotForSaleError(self.title)

    def describe(self) -> str:
        return f"{super().describe()} (Showcase Only - Not for Sale)"
