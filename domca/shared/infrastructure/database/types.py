# 📄 File: domca/shared/infrastructure/database/types.py
#
# 🧭 Purpose (Layman Explanation):
# Teaches the database how to store the typed record labels (like "USR3f9a...") as
# plain text and how to turn that text back into the right label type when reading.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy TypeDecorator converting EntityId subclasses to their underlying string
# on bind and back to the configured EntityId kind on result.
#
# 🔗 Dependencies:
# - SQLAlchemy type system
# - domca.shared.core.identifiers
#
# 🔄 Connected Modules / Calls From:
# - ORM models of every module (primary and foreign key columns)
# - Repository queries filtering by typed identifiers

from typing import Any, Optional, Type

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from domca.shared.core.exceptions import InvalidArgumentError
from domca.shared.core.identifiers import EntityId

ENTITY_ID_LENGTH = 64


class EntityIdType(TypeDecorator):
    """Store a typed entity identifier as VARCHAR."""

    impl = String
    cache_ok = True

    def __init__(self, id_type: Type[EntityId], length: int = ENTITY_ID_LENGTH):
        super().__init__(length)
        self.id_type = id_type

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, self.id_type):
            return value.value
        if isinstance(value, EntityId):
            raise InvalidArgumentError(
                f"Expected {self.id_type.__name__}, got {type(value).__name__}.",
                argument="value",
                value=value,
            )
        return str(value)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[EntityId]:
        if value is None:
            return None
        return self.id_type(value)

    @property
    def python_type(self) -> Type[EntityId]:
        return self.id_type
