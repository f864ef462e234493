# 📄 File: domca/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the database parts for user accounts, sessions and drinking logs.
#
# 🧪 Purpose (Technical Summary):
# Database layer for user management: SQLAlchemy models, domain mappers and
# repository implementations.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
# - domca.modules.user_management.domain.repositories (interface definitions)
#
# 🔄 Connected Modules / Calls From:
# - domca.shared.core.dependencies (repository providers)
# - Database migration scripts (imports models for schema generation)

"""
User Management Database Layer

Database Components:
- Models: UserModel, UserSessionModel, HydrationRecordModel
- Mappers: domain <-> row translation through the rehydration path
- Repositories: concrete implementations of the domain repository interfaces
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domca.modules.user_management.infrastructure.database.models import (
        HydrationRecordModel,
        UserModel,
        UserSessionModel,
    )
    from domca.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
