"""
Shared database infrastructure: typed identifier column type and the
SQLAlchemy unit of work.
"""

from .types import EntityIdType
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "EntityIdType",
    "SqlAlchemyUnitOfWork",
]
