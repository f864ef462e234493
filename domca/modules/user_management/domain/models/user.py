# 📄 File: domca/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in the tracking app - their name, login name, email and
# password material - and keeps their login sessions and drinking log together.
# 🧪 Purpose (Technical Summary):
# User aggregate root implementing construction-time invariants, profile/email/password
# behaviour methods and ownership checks over its sessions and hydration records.
# 🔗 Dependencies:
# pydantic, datetime, typing, domca.shared.core, domca.shared.utils
# 🔄 Connected Modules / Calls From:
# user_repository.py, user_repository_impl.py, ORM mapping, application services

from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import Field, PrivateAttr, ValidationInfo, field_validator, model_validator

from domca.shared.core.entity import DomainEntity
from domca.shared.core.exceptions import OwnershipMismatchError
from domca.shared.utils.dates import ensure_utc, utc_now
from domca.shared.utils.validators import ensure_not_blank, ensure_not_none

from .hydration_record import HydrationRecord
from .ids import UserId
from .user_session import UserSession

_REQUIRED_FIELD_MESSAGES = {
    "first_name": "First name cannot be empty.",
    "last_name": "Last name cannot be empty.",
    "user_name": "Username cannot be empty.",
    "email_address": "Email cannot be empty.",
    "password_hash": "Password hash is required.",
    "password_salt": "Password salt is required.",
}


def normalize_email(email: str) -> str:
    """Upper-case mirror used for case-insensitive lookup and uniqueness."""
    return email.upper()


class User(DomainEntity):
    """
    User aggregate root.

    Owns its sessions and hydration records: a child can only be attached when
    it references this user's identifier. Every change to persisted profile,
    email or password data refreshes `updated_at`.
    """

    id: UserId = Field(default_factory=UserId.new)
    first_name: str
    last_name: str
    user_name: str
    email_address: str
    email_address_normalized: str = ""
    password_hash: str
    password_salt: str
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    _sessions: List[UserSession] = PrivateAttr(default_factory=list)
    _hydration_records: List[HydrationRecord] = PrivateAttr(default_factory=list)

    @field_validator(*_REQUIRED_FIELD_MESSAGES)
    @classmethod
    def validate_required(cls, v: str, info: ValidationInfo) -> str:
        """Reject empty or whitespace-only required text fields."""
        if not v.strip():
            raise ValueError(_REQUIRED_FIELD_MESSAGES[info.field_name])
        return v

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @model_validator(mode="after")
    def sync_normalized_email(self) -> "User":
        """Keep the upper-case lookup mirror in step with `email_address`."""
        # Written through __dict__ so assignment validation is not re-entered
        self.__dict__["email_address_normalized"] = normalize_email(self.email_address)
        return self

    # Construction

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        user_name: str,
        email: str,
        password_hash: str,
        password_salt: str,
        avatar_url: Optional[str] = None,
    ) -> "User":
        """
        Register a new user.

        Args:
            first_name: Given name
            last_name: Family name
            user_name: Login name
            email: Email address as entered
            password_hash: Hash of the user's password
            password_salt: Salt used to produce the hash
            avatar_url: Optional avatar location

        Returns:
            New User with a fresh identifier and equal UTC creation/update times

        Raises:
            ValidationError: If a required field is blank
        """
        now = utc_now()
        return cls._build(
            first_name=first_name,
            last_name=last_name,
            user_name=user_name,
            email_address=email,
            password_hash=password_hash,
            password_salt=password_salt,
            avatar_url=avatar_url,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def rehydrate(
        cls,
        sessions: Optional[Iterable[UserSession]] = None,
        hydration_records: Optional[Iterable[HydrationRecord]] = None,
        **fields: Any,
    ) -> "User":
        """Rebuild a stored user together with its already-loaded children."""
        user = super().rehydrate(**fields)
        user._sessions.extend(sessions or ())
        user._hydration_records.extend(hydration_records or ())
        return user

    # Owned collections

    @property
    def sessions(self) -> Tuple[UserSession, ...]:
        return tuple(self._sessions)

    @property
    def hydration_records(self) -> Tuple[HydrationRecord, ...]:
        return tuple(self._hydration_records)

    # Domain behaviours

    def update_profile(
        self,
        new_first_name: str,
        new_last_name: str,
        new_avatar_url: Optional[str] = None,
    ) -> None:
        """
        Replace the user's names and avatar.

        Raises:
            InvalidArgumentError: If a name is blank
        """
        ensure_not_blank(new_first_name, "new_first_name")
        ensure_not_blank(new_last_name, "new_last_name")

        self.first_name = new_first_name
        self.last_name = new_last_name
        self.avatar_url = new_avatar_url

        self._update_timestamp()

    def change_email(self, new_email: str) -> None:
        """
        Change the email address.

        A value equal to the current one ignoring case is a no-op.

        Raises:
            InvalidArgumentError: If new_email is blank
        """
        ensure_not_blank(new_email, "new_email")

        if normalize_email(self.email_address) == normalize_email(new_email):
            return

        self.email_address = new_email

        self._update_timestamp()

    def change_password(self, new_password_hash: str, new_password_salt: str) -> None:
        """
        Replace the stored password material.

        Raises:
            InvalidArgumentError: If the hash or salt is blank
        """
        ensure_not_blank(new_password_hash, "new_password_hash")
        ensure_not_blank(new_password_salt, "new_password_salt")

        self.password_hash = new_password_hash
        self.password_salt = new_password_salt

        self._update_timestamp()

    def add_session(self, session: UserSession) -> None:
        """
        Attach a session owned by this user. Does not touch `updated_at`.

        Raises:
            InvalidArgumentError: If session is None
            OwnershipMismatchError: If the session belongs to another user
        """
        ensure_not_none(session, "session")

        if session.user_id != self.id:
            raise OwnershipMismatchError(
                "Session does not belong to this user.",
                expected_owner=str(self.id),
                actual_owner=str(session.user_id),
            )

        self._sessions.append(session)

    def log_hydration(self, record: HydrationRecord) -> None:
        """
        Append a hydration record owned by this user and refresh `updated_at`.

        Raises:
            InvalidArgumentError: If record is None
            OwnershipMismatchError: If the record belongs to another user
        """
        ensure_not_none(record, "record")

        if record.user_id != self.id:
            raise OwnershipMismatchError(
                "Hydration record does not belong to this user.",
                expected_owner=str(self.id),
                actual_owner=str(record.user_id),
            )

        self._hydration_records.append(record)
        self._update_timestamp()

    def _update_timestamp(self) -> None:
        self.updated_at = utc_now()
