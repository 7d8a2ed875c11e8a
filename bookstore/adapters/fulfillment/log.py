"""Logging fulfillment adapters.

Same contract as the stdout adapters, but each shipment or email becomes
an INFO log record so it lands wherever logging is configured to go.
"""

import logging

from bookstore.core.models import Item
from bookstore.core.ports import MailPort, ShippingPort

logger = logging.getLogger(__name__)


class LogShippingAdapter(ShippingPort):
    """Records shipments as log records."""

    def ship(self, item: Item, address: str) -> None:
        logger.info(
            f"[ShippingService] Preparing to ship '{item.title}' to {address}",
            extra={"item_id": item.item_id, "address": address},
        )


class LogMailAdapter(MailPort):
    """Records download-link emails as log records."""

    def send(self, item: Item, recipient: str) -> None:
        logger.info(
            f"[MailService] Sending link for '{item.title}' to {recipient}",
            extra={"item_id": item.item_id, "recipient": recipient},
        )
