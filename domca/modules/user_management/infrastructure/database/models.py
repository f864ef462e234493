# 📄 File: domca/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how users, their login sessions and their drinking logs are laid out
# as tables in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models mapping the user management aggregate to relational tables,
# with typed identifier columns, unique indexes and owned-child relationships.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - domca.shared.config.database (declarative base)
# - domca.shared.infrastructure.database.types (typed identifier columns)
#
# 🔄 Connected Modules / Calls From:
# - mappers.py and the repository implementations (CRUD operations)
# - migrations (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: account and profile data, unique user name and normalized email
- UserSessionModel: authentication sessions owned by a user
- HydrationRecordModel: water intake entries owned by a user

Identifiers are stored as strings through EntityIdType. Computed values
(session activity) are never stored.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from domca.shared.config.database import DatabaseBase
from domca.shared.infrastructure.database.types import EntityIdType

from domca.modules.user_management.domain.models.hydration_record import MAX_AMOUNT_ML
from domca.modules.user_management.domain.models.ids import HydrationRecordId, UserId, UserSessionId


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """SQLAlchemy model for user accounts."""
    __tablename__ = "users"

    id = Column(EntityIdType(UserId), primary_key=True, nullable=False)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    user_name = Column(String(50), nullable=False, unique=True, index=True)

    email_address = Column(String(255), nullable=False)
    email_address_normalized = Column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Upper-case email used for case-insensitive lookup",
    )

    password_hash = Column(String(512), nullable=False)
    password_salt = Column(String(255), nullable=False)
    avatar_url = Column(String(2048), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    sessions = relationship(
        "UserSessionModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    hydration_records = relationship(
        "HydrationRecordModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="HydrationRecordModel.date",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, user_name={self.user_name})>"


# =============================================================================
# USER SESSION MODEL
# =============================================================================

class UserSessionModel(DatabaseBase):
    """SQLAlchemy model for authentication sessions."""
    __tablename__ = "user_sessions"

    id = Column(EntityIdType(UserSessionId), primary_key=True, nullable=False)
    user_id = Column(
        EntityIdType(UserId),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token = Column(String(512), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("UserModel", back_populates="sessions")

    def __repr__(self) -> str:
        return f"<UserSessionModel(id={self.id}, user_id={self.user_id})>"


# =============================================================================
# HYDRATION RECORD MODEL
# =============================================================================

class HydrationRecordModel(DatabaseBase):
    """SQLAlchemy model for water intake entries."""
    __tablename__ = "hydration_records"
    __table_args__ = (
        CheckConstraint(
            f"amount_ml > 0 AND amount_ml < {MAX_AMOUNT_ML}",
            name="amount_ml_range",
        ),
    )

    id = Column(EntityIdType(HydrationRecordId), primary_key=True, nullable=False)
    user_id = Column(
        EntityIdType(UserId),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    amount_ml = Column(Integer, nullable=False)

    user = relationship("UserModel", back_populates="hydration_records")

    def __repr__(self) -> str:
        return f"<HydrationRecordModel(id={self.id}, amount_ml={self.amount_ml})>"
