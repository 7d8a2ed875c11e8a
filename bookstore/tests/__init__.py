"""Test suite for the bookstore inventory.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for the fulfillment ports

2. adapters/: Tests for adapter implementations
   - Stdout and logging fulfillment stubs

3. fakes/: Port implementations for testing
   - In-memory ShippingPort and MailPort that record every call
"""
