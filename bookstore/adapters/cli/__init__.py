"""Command-line interface for catalog and purchase commands."""
