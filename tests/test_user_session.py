from datetime import datetime, timedelta, timezone

import pytest

from domca.shared.core.exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
    ValidationError,
)
from domca.modules.user_management.domain.models import UserId, UserSession, UserSessionId


class TestUserSessionCreation:
    def test_default_validity_is_thirty_days(self):
        session = UserSession.create(UserId.new(), "token")

        assert session.id.value.startswith("USESS")
        assert session.expires_at - session.created_at == timedelta(days=30)
        assert session.created_at.tzinfo is timezone.utc
        assert session.is_active
        assert not session.is_expired

    def test_custom_validity(self):
        session = UserSession.create(UserId.new(), "token", validity_days=1)
        assert session.expires_at - session.created_at == timedelta(days=1)

    def test_validity_from_settings(self, monkeypatch):
        monkeypatch.setenv("SESSION_VALIDITY_DAYS", "7")
        session = UserSession.create(UserId.new(), "token")
        assert session.expires_at - session.created_at == timedelta(days=7)

    def test_blank_token_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UserSession.create(UserId.new(), "  ")
        assert exc_info.value.field == "token"

    def test_zero_validity_rejected(self):
        with pytest.raises(InvalidArgumentError):
            UserSession.create(UserId.new(), "token", validity_days=0)

    def test_missing_user_rejected(self):
        with pytest.raises(InvalidArgumentError):
            UserSession.create(None, "token")


class TestUserSessionValidity:
    def test_expired_session(self):
        past = datetime.now(timezone.utc) - timedelta(days=40)
        session = UserSession.rehydrate(
            id=UserSessionId.new(),
            user_id=UserId.new(),
            token="token",
            created_at=past,
            expires_at=past + timedelta(days=30),
        )
        assert session.is_expired
        assert not session.is_active

    def test_extend_validity(self):
        session = UserSession.create(UserId.new(), "token")
        new_expiry = session.expires_at + timedelta(days=10)

        session.extend_validity(new_expiry)

        assert session.expires_at == new_expiry

    def test_extend_validity_normalizes_to_utc(self):
        session = UserSession.create(UserId.new(), "token")
        plus_two = timezone(timedelta(hours=2))
        new_expiry = (session.expires_at + timedelta(days=1)).astimezone(plus_two)

        session.extend_validity(new_expiry)

        assert session.expires_at.tzinfo is timezone.utc
        assert session.expires_at == new_expiry

    def test_extend_before_creation_rejected(self):
        session = UserSession.create(UserId.new(), "token")
        with pytest.raises(InvalidOperationError):
            session.extend_validity(session.created_at - timedelta(seconds=1))

    def test_extend_into_past_rejected(self):
        created = datetime.now(timezone.utc) - timedelta(days=5)
        session = UserSession.rehydrate(
            id=UserSessionId.new(),
            user_id=UserId.new(),
            token="token",
            created_at=created,
            expires_at=created + timedelta(days=1),
        )
        with pytest.raises(InvalidOperationError):
            session.extend_validity(created + timedelta(days=2))
