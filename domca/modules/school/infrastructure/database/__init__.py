"""School database layer: ORM models and domain mappers."""
