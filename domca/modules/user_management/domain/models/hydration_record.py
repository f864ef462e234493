# 📄 File: domca/modules/user_management/domain/models/hydration_record.py
# 🧭 Purpose (Layman Explanation):
# One entry in a user's drinking log: how much water, and when.
# 🧪 Purpose (Technical Summary):
# Append-only HydrationRecord domain model. Amounts are bounded to
# 0 < amount_ml < 10 000; timestamps are normalized to UTC.
# 🔗 Dependencies:
# pydantic, datetime, domca.shared.core.entity, domca.shared.utils
# 🔄 Connected Modules / Calls From:
# User aggregate (log_hydration), hydration_repository.py, ORM mapping

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from domca.shared.core.entity import DomainEntity
from domca.shared.utils.dates import ensure_utc, utc_now
from domca.shared.utils.validators import ensure_in_range, ensure_not_none

from .ids import HydrationRecordId, UserId

MIN_AMOUNT_ML = 1
MAX_AMOUNT_ML = 10_000  # exclusive


class HydrationRecord(DomainEntity):
    """Amount of water a user drank at a given moment. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: HydrationRecordId = Field(default_factory=HydrationRecordId.new)
    user_id: UserId
    date: datetime
    amount_ml: int = Field(ge=MIN_AMOUNT_ML, lt=MAX_AMOUNT_ML)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        amount_ml: int,
        date: Optional[datetime] = None,
    ) -> "HydrationRecord":
        """
        Record an amount of water drunk by a user.

        Args:
            user_id: Owning user
            amount_ml: Millilitres, 1 to 9 999
            date: When it was drunk, defaults to now

        Raises:
            InvalidArgumentError: If user_id is missing or amount_ml is out of range
        """
        ensure_not_none(user_id, "user_id")
        ensure_in_range(
            amount_ml,
            "amount_ml",
            minimum=MIN_AMOUNT_ML,
            maximum=MAX_AMOUNT_ML,
            maximum_exclusive=True,
        )
        return cls._build(
            user_id=user_id,
            date=date if date is not None else utc_now(),
            amount_ml=amount_ml,
        )
