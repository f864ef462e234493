"""
Core package for the Domca data-access layer.
Provides exceptions, typed identifiers, the entity base, the unit of work
and dependency providers.

Submodules are imported directly (e.g. domca.shared.core.exceptions) so that
configuration and infrastructure code can depend on them without cycles.
"""
