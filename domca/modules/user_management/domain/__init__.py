"""User management domain layer: entities, identifiers and repository contracts."""
