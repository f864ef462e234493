"""User management infrastructure adapters."""
