# 📄 File: domca/modules/user_management/infrastructure/database/mappers.py
# 🧭 Purpose (Layman Explanation):
# Translates between the in-memory user, session and drinking-log records and the rows
# stored in the database.
#
# 🧪 Purpose (Technical Summary):
# Domain <-> ORM mapping for the user management aggregate. Stored rows are always
# rebuilt through the rehydration path, never through the validating factories.
#
# 🔗 Dependencies:
# - domca.modules.user_management.domain.models
# - domca.modules.user_management.infrastructure.database.models
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py, user_session_repository_impl.py, hydration_repository_impl.py

from domca.modules.user_management.domain.models import HydrationRecord, User, UserSession
from domca.modules.user_management.infrastructure.database.models import (
    HydrationRecordModel,
    UserModel,
    UserSessionModel,
)


def session_to_domain(model: UserSessionModel) -> UserSession:
    return UserSession.rehydrate(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        created_at=model.created_at,
        expires_at=model.expires_at,
    )


def session_to_model(session: UserSession) -> UserSessionModel:
    return UserSessionModel(
        id=session.id,
        user_id=session.user_id,
        token=session.token,
        created_at=session.created_at,
        expires_at=session.expires_at,
    )


def hydration_record_to_domain(model: HydrationRecordModel) -> HydrationRecord:
    return HydrationRecord.rehydrate(
        id=model.id,
        user_id=model.user_id,
        date=model.date,
        amount_ml=model.amount_ml,
    )


def hydration_record_to_model(record: HydrationRecord) -> HydrationRecordModel:
    return HydrationRecordModel(
        id=record.id,
        user_id=record.user_id,
        date=record.date,
        amount_ml=record.amount_ml,
    )


def user_to_domain(model: UserModel) -> User:
    """Rebuild a user together with its loaded sessions and hydration records."""
    return User.rehydrate(
        sessions=[session_to_domain(s) for s in model.sessions],
        hydration_records=[hydration_record_to_domain(r) for r in model.hydration_records],
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        user_name=model.user_name,
        email_address=model.email_address,
        email_address_normalized=model.email_address_normalized,
        password_hash=model.password_hash,
        password_salt=model.password_salt,
        avatar_url=model.avatar_url,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def user_to_model(user: User) -> UserModel:
    """Build a row graph for a user including its owned children."""
    return UserModel(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        user_name=user.user_name,
        email_address=user.email_address,
        email_address_normalized=user.email_address_normalized,
        password_hash=user.password_hash,
        password_salt=user.password_salt,
        avatar_url=user.avatar_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
        sessions=[session_to_model(s) for s in user.sessions],
        hydration_records=[hydration_record_to_model(r) for r in user.hydration_records],
    )
