"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without printing or logging anything:

- FakeShippingPort: Captured shipments for assertion
- FakeMailPort: Captured emails for assertion
"""

from .fulfillment import FakeMailPort, FakeShippingPort

__all__ = [
    "FakeMailPort",
    "FakeShippingPort",
]
