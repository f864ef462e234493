# 📄 File: domca/shared/core/entity.py
# 🧭 Purpose (Layman Explanation):
# The common starting point for every record type: one way to create a brand-new,
# fully checked record, and one way to reload a record that was already checked
# when it was saved.
# 🧪 Purpose (Technical Summary):
# Pydantic base model for domain entities with two construction paths: a validating
# build that translates pydantic errors into the domain ValidationError, and a
# non-validating rehydration path (model_construct) that still normalizes timestamps.
# 🔗 Dependencies:
# pydantic, datetime, domca.shared.core.exceptions, domca.shared.utils.dates
# 🔄 Connected Modules / Calls From:
# All domain models, repository implementations (rehydration)

import logging
from datetime import datetime
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from domca.shared.core.exceptions import ValidationError
from domca.shared.utils.dates import ensure_utc

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity", bound="DomainEntity")


class DomainEntity(BaseModel):
    """
    Base class for self-validating domain entities.

    New instances go through `_build` (full validation); instances loaded
    from trusted storage go through `rehydrate` (no validation).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    @classmethod
    def _build(cls: Type[TEntity], **fields: Any) -> TEntity:
        """
        Construct and validate a new entity.

        Raises:
            ValidationError: Naming the first field that failed validation
        """
        try:
            entity = cls(**fields)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            message = str(error["msg"]).removeprefix("Value error, ")
            raise ValidationError(
                message,
                field=field,
                entity=cls.__name__,
                constraint=error["type"],
            ) from exc

        logger.debug(f"Created {cls.__name__} {getattr(entity, 'id', '')}")
        return entity

    @classmethod
    def rehydrate(cls: Type[TEntity], **fields: Any) -> TEntity:
        """
        Rebuild an entity from previously persisted values.

        Field validation is skipped; datetime values are still normalized to UTC.
        """
        normalized = {
            name: ensure_utc(value) if isinstance(value, datetime) else value
            for name, value in fields.items()
        }
        return cls.model_construct(**normalized)
