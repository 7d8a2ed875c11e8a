"""Fulfillment adapters for delivering purchased items.

Implementations support two output channels:
- Stdout (one line per shipment or email, like a receipt printer)
- Logging (one INFO record per shipment or email)
"""

from .log import LogMailAdapter, LogShippingAdapter
from .stdout import StdoutMailAdapter, StdoutShippingAdapter

__all__ = [
    "LogMailAdapter",
    "LogShippingAdapter",
    "StdoutMailAdapter",
    "StdoutShippingAdapter",
]
