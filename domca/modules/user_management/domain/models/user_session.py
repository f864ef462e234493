# 📄 File: domca/modules/user_management/domain/models/user_session.py
# 🧭 Purpose (Layman Explanation):
# Describes one login of a user: the secret token handed out, when it was issued,
# and until when it can be used.
# 🧪 Purpose (Technical Summary):
# UserSession domain model with a validating factory applying the default validity
# window, a computed active/expired state and a guarded validity extension.
# 🔗 Dependencies:
# pydantic, datetime, domca.shared.core (entity base, exceptions), domca.shared.utils.dates
# 🔄 Connected Modules / Calls From:
# User aggregate (add_session), user_session_repository.py, ORM mapping

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field, field_validator

from domca.shared.config.settings import get_settings
from domca.shared.core.entity import DomainEntity
from domca.shared.core.exceptions import InvalidOperationError
from domca.shared.utils.dates import ensure_utc, utc_now
from domca.shared.utils.validators import ensure_in_range, ensure_not_none

from .ids import UserId, UserSessionId


class UserSession(DomainEntity):
    """
    Authentication session owned by a user.

    The session is active while the current time is before `expires_at`;
    expiry is computed on read and never stored as a state.
    """

    id: UserSessionId = Field(default_factory=UserSessionId.new)
    user_id: UserId
    token: str
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Token cannot be empty.")
        return v

    @field_validator("created_at", "expires_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        token: str,
        validity_days: Optional[int] = None,
    ) -> "UserSession":
        """
        Open a new session for a user.

        Args:
            user_id: Owning user
            token: Opaque authentication token
            validity_days: Lifetime in days, defaults to SESSION_VALIDITY_DAYS (30)

        Returns:
            New UserSession expiring `validity_days` after creation

        Raises:
            InvalidArgumentError: If user_id is missing or validity_days < 1
            ValidationError: If the token is blank
        """
        ensure_not_none(user_id, "user_id")
        if validity_days is None:
            validity_days = get_settings().SESSION_VALIDITY_DAYS
        ensure_in_range(validity_days, "validity_days", minimum=1)

        created_at = utc_now()
        return cls._build(
            user_id=user_id,
            token=token,
            created_at=created_at,
            expires_at=created_at + timedelta(days=validity_days),
        )

    @property
    def is_active(self) -> bool:
        return utc_now() < self.expires_at

    @property
    def is_expired(self) -> bool:
        return not self.is_active

    def extend_validity(self, new_expires_at: datetime) -> None:
        """
        Move the expiry to a later point in time.

        Raises:
            InvalidArgumentError: If new_expires_at is None
            InvalidOperationError: If the new expiry is at or before creation,
                or at or before the current time
        """
        ensure_not_none(new_expires_at, "new_expires_at")
        new_expires_at = ensure_utc(new_expires_at)

        if new_expires_at <= self.created_at:
            raise InvalidOperationError(
                "Session cannot expire before it was created.",
                operation="extend_validity",
            )
        if new_expires_at <= utc_now():
            raise InvalidOperationError(
                "Session validity must be extended into the future.",
                operation="extend_validity",
            )

        self.expires_at = new_expires_at
