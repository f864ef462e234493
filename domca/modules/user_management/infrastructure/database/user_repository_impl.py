# 📄 File: domca/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for user accounts: finding a user by id or email,
# checking whether an email is still free, and preparing new, changed or deleted users
# to be saved.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy async ORM.
# Users are loaded with their sessions and hydration records and rebuilt through the
# rehydration path. Writes only stage changes in the session.
#
# 🔗 Dependencies:
# - domca.modules.user_management.domain.repositories.user_repository (interface)
# - domca.modules.user_management.infrastructure.database.models / mappers
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - domca.shared.core.dependencies (repository provider)
# - Application services working with user accounts

"""
User Repository Implementation

Handles the mapping between domain User entities and UserModel rows.

Features:
- Async lookups with proper error handling
- Case-insensitive email lookup through the normalized column
- Owned sessions and hydration records persisted with their user
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domca.shared.core.exceptions import RepositoryError
from domca.shared.utils.validators import ensure_not_blank, ensure_not_none

from domca.modules.user_management.domain.models import User, UserId, normalize_email
from domca.modules.user_management.domain.repositories.user_repository import UserRepository
from domca.modules.user_management.infrastructure.database.mappers import (
    user_to_domain,
    user_to_model,
)
from domca.modules.user_management.infrastructure.database.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    Nothing is committed here; call UnitOfWork.save_changes to persist.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session shared with the unit of work
        """
        self._session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """
        Retrieve a user by their ID.

        Args:
            user_id: ID of the user to retrieve

        Returns:
            Optional[User]: User entity if found, None otherwise
        """
        try:
            stmt = select(UserModel).where(UserModel.id == user_id)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

            if user_model:
                logger.debug(f"Retrieved user: {user_id}")
                return user_to_domain(user_model)

            logger.debug(f"User not found: {user_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user: {str(e)}",
                operation="get_by_id",
                entity="User",
            ) from e

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email address, ignoring case.

        Args:
            email: Email address to search for

        Returns:
            Optional[User]: User entity if found, None otherwise
        """
        ensure_not_blank(email, "email")
        try:
            stmt = select(UserModel).where(
                UserModel.email_address_normalized == normalize_email(email)
            )
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()

            if user_model:
                logger.debug(f"Retrieved user by email: {email}")
                return user_to_domain(user_model)

            logger.debug(f"User not found by email: {email}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email {email}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user by email: {str(e)}",
                operation="get_by_email",
                entity="User",
            ) from e

    async def is_email_unique(self, email: str) -> bool:
        ensure_not_blank(email, "email")
        try:
            stmt = select(func.count()).select_from(UserModel).where(
                UserModel.email_address_normalized == normalize_email(email)
            )
            result = await self._session.execute(stmt)
            return result.scalar_one() == 0

        except SQLAlchemyError as e:
            logger.error(f"Database error checking email uniqueness for {email}: {str(e)}")
            raise RepositoryError(
                f"Failed to check email uniqueness: {str(e)}",
                operation="is_email_unique",
                entity="User",
            ) from e

    async def add(self, user: User) -> None:
        """
        Stage a new user and its owned children for insertion.

        Args:
            user: Domain User entity to add
        """
        ensure_not_none(user, "user")
        self._session.add(user_to_model(user))
        logger.info(f"Staged new user: {user.id}")

    async def update(self, user: User) -> None:
        """
        Stage the current state of a user.

        Children missing from the entity are removed from storage on save.

        Args:
            user: Domain User entity with updated data
        """
        ensure_not_none(user, "user")
        try:
            await self._session.merge(user_to_model(user))
            logger.info(f"Staged update for user: {user.id}")

        except SQLAlchemyError as e:
            logger.error(f"Database error staging update for user {user.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update user: {str(e)}",
                operation="update",
                entity="User",
            ) from e

    async def remove(self, user: User) -> None:
        """
        Stage a user, its sessions and its hydration records for deletion.

        Args:
            user: Domain User entity to remove
        """
        ensure_not_none(user, "user")
        try:
            # Typed ids are iterable models, so the identity is passed as a tuple
            user_model = await self._session.get(UserModel, (user.id,))
            if user_model is None:
                logger.warning(f"User not found for removal: {user.id}")
                return

            await self._session.delete(user_model)
            logger.info(f"Staged removal of user: {user.id}")

        except SQLAlchemyError as e:
            logger.error(f"Database error staging removal of user {user.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to remove user: {str(e)}",
                operation="remove",
                entity="User",
            ) from e
