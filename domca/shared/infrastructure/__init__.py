"""Shared infrastructure adapters."""
