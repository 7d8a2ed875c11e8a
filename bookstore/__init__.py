"""Bookstore inventory: catalog management with type-specific fulfillment."""
