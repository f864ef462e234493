"""Shared helpers for validation, dates and logging."""
