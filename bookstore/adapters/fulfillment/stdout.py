"""Stdout fulfillment adapters.

Implement ShippingPort and MailPort by printing what would be shipped or
mailed. No real carrier or mail server is contacted.
"""

import logging

from bookstore.core.models import Item
from bookstore.core.ports import MailPort, ShippingPort

logger = logging.getLogger(__name__)

PREFIX = "Quantum book store:"


class StdoutShippingAdapter(ShippingPort):
    """Prints a shipping notice to stdout."""

    def __init__(self, prefix: str = PREFIX):
        self.prefix = prefix

    def ship(self, item: Item, address: str) -> None:
        print(self._format_notice(item, address))
        logger.debug(f"Shipped {item.item_id}", extra={"address": address})

    def _format_notice(self, item: Item, address: str) -> str:
        return (
            f"{self.prefix} [ShippingService] Preparing to ship "
            f"'{item.title}' to {address}"
        )


class StdoutMailAdapter(MailPort):
    """Prints a download-link email notice to stdout."""

    def __init__(self, prefix: str = PREFIX):
        self.prefix = prefix

    def send(self, item: Item, recipient: str) -> None:
        print(self._format_notice(item, recipient))
        logger.debug(f"Mailed {item.item_id}", extra={"recipient": recipient})

    def _format_notice(self, item: Item, recipient: str) -> str:
        return (
            f"{self.prefix} [MailService] Sending link for "
            f"'{item.title}' to {recipient}"
        )
