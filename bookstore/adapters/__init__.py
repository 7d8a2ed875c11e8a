"""External adapters for the bookstore inventory.

This package holds implementations of the core port interfaces and the
ways people drive the store.

Adapter Organization:

- fulfillment/: Shipping and mail stubs (stdout, logging)
- cli/: Command-line interface for catalog and purchase commands
"""
