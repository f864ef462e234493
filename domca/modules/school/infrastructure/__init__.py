"""School infrastructure adapters."""
