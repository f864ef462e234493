from datetime import datetime, timedelta, timezone

import pytest

from domca.shared.core.exceptions import (
    InvalidArgumentError,
    OwnershipMismatchError,
    ValidationError,
)
from domca.modules.user_management.domain.models import (
    HydrationRecord,
    User,
    UserId,
    UserSession,
)
from tests.factories import make_user

USER_MODULE = "domca.modules.user_management.domain.models.user"


@pytest.fixture
def frozen_clock(monkeypatch):
    """Clock for the user module that advances one minute per call."""
    start = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    calls = []

    def fake_now():
        calls.append(None)
        return start + timedelta(minutes=len(calls))

    monkeypatch.setattr(f"{USER_MODULE}.utc_now", fake_now)
    return start


class TestUserCreation:
    def test_valid_user(self):
        user = make_user(avatar_url="https://cdn/ada.png")
        assert user.id.value.startswith("USR")
        assert user.email_address == "Ada@Example.com"
        assert user.email_address_normalized == "ADA@EXAMPLE.COM"
        assert user.avatar_url == "https://cdn/ada.png"
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is timezone.utc
        assert user.sessions == ()
        assert user.hydration_records == ()

    @pytest.mark.parametrize(
        "field, argument, message",
        [
            ("first_name", "first_name", "First name cannot be empty."),
            ("last_name", "last_name", "Last name cannot be empty."),
            ("user_name", "user_name", "Username cannot be empty."),
            ("email_address", "email", "Email cannot be empty."),
            ("password_hash", "password_hash", "Password hash is required."),
            ("password_salt", "password_salt", "Password salt is required."),
        ],
    )
    def test_blank_required_field(self, field, argument, message):
        with pytest.raises(ValidationError) as exc_info:
            make_user(**{argument: "   "})
        assert exc_info.value.field == field
        assert exc_info.value.message == message

    def test_distinct_ids(self):
        assert make_user().id != make_user().id


class TestUserBehaviour:
    def test_update_profile(self, frozen_clock):
        user = make_user()
        before = user.updated_at

        user.update_profile("Augusta", "King", "https://cdn/new.png")

        assert user.first_name == "Augusta"
        assert user.last_name == "King"
        assert user.avatar_url == "https://cdn/new.png"
        assert user.updated_at > before

    def test_update_profile_rejects_blank(self):
        user = make_user()
        with pytest.raises(InvalidArgumentError) as exc_info:
            user.update_profile("", "King")
        assert exc_info.value.argument == "new_first_name"
        assert user.first_name == "Ada"

    def test_change_email(self, frozen_clock):
        user = make_user()
        before = user.updated_at

        user.change_email("new@example.com")

        assert user.email_address == "new@example.com"
        assert user.email_address_normalized == "NEW@EXAMPLE.COM"
        assert user.updated_at > before

    def test_direct_email_assignment_refreshes_mirror(self):
        user = make_user()

        user.email_address = "grace@example.org"

        assert user.email_address_normalized == "GRACE@EXAMPLE.ORG"

    def test_mirror_cannot_drift_from_email(self):
        user = make_user()

        user.email_address_normalized = "SOMEONE@ELSE.COM"

        assert user.email_address_normalized == "ADA@EXAMPLE.COM"

    def test_change_email_same_ignoring_case_is_noop(self, frozen_clock):
        user = make_user()
        before = user.updated_at

        user.change_email("ADA@example.COM")

        assert user.email_address == "Ada@Example.com"
        assert user.updated_at == before

    def test_change_password(self, frozen_clock):
        user = make_user()
        before = user.updated_at

        user.change_password("hash2", "salt2")

        assert (user.password_hash, user.password_salt) == ("hash2", "salt2")
        assert user.updated_at > before

    def test_change_password_rejects_blank_salt(self):
        user = make_user()
        with pytest.raises(InvalidArgumentError):
            user.change_password("hash2", " ")
        assert user.password_salt == "salt"


class TestUserOwnership:
    def test_add_own_session_keeps_timestamp(self, frozen_clock):
        user = make_user()
        before = user.updated_at
        session = UserSession.create(user.id, "token")

        user.add_session(session)

        assert user.sessions == (session,)
        assert user.updated_at == before

    def test_add_foreign_session_rejected(self):
        user = make_user()
        foreign = UserSession.create(UserId.new(), "token")

        with pytest.raises(OwnershipMismatchError):
            user.add_session(foreign)
        assert user.sessions == ()

    def test_add_session_none(self):
        with pytest.raises(InvalidArgumentError):
            make_user().add_session(None)

    def test_log_hydration_refreshes_timestamp(self, frozen_clock):
        user = make_user()
        before = user.updated_at
        record = HydrationRecord.create(user.id, 250)

        user.log_hydration(record)

        assert user.hydration_records == (record,)
        assert user.updated_at > before

    def test_log_foreign_hydration_rejected(self):
        user = make_user()
        with pytest.raises(OwnershipMismatchError):
            user.log_hydration(HydrationRecord.create(UserId.new(), 250))
        assert user.hydration_records == ()


class TestUserRehydration:
    def test_rehydrate_skips_validation(self):
        user = User.rehydrate(
            id=UserId("USRstored"),
            first_name="",
            last_name="",
            user_name="legacy",
            email_address="legacy@example.com",
            email_address_normalized="LEGACY@EXAMPLE.COM",
            password_hash="h",
            password_salt="s",
            avatar_url=None,
            created_at=datetime(2024, 5, 1, 8, 30),
            updated_at=datetime(2024, 5, 2, 8, 30),
        )
        assert user.first_name == ""
        assert user.created_at == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
        assert user.sessions == ()

    def test_rehydrate_with_children(self):
        user_id = UserId("USRstored")
        session = UserSession.create(user_id, "token")
        user = User.rehydrate(
            sessions=[session],
            id=user_id,
            first_name="Ada",
            last_name="Lovelace",
            user_name="ada",
            email_address="a@b.c",
            email_address_normalized="A@B.C",
            password_hash="h",
            password_salt="s",
            created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
            updated_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        )
        assert user.sessions == (session,)
