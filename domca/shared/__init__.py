"""Shared building blocks: configuration, core abstractions, utilities and infrastructure."""
