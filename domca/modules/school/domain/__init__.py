"""School domain layer."""
