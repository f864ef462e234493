# 📄 File: domca/modules/user_management/infrastructure/database/user_session_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Finds login sessions by id or token, lists the sessions of a user that still work,
# and prepares sessions to be stored or thrown away.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of UserSessionRepository. Activity is evaluated in the query
# (expires_at strictly after the reference time); writes only stage changes.
#
# 🔗 Dependencies:
# - domca.modules.user_management.domain.repositories.user_session_repository
# - domca.modules.user_management.infrastructure.database.models / mappers
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - domca.shared.core.dependencies (repository provider)

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domca.shared.core.exceptions import RepositoryError
from domca.shared.utils.dates import ensure_utc
from domca.shared.utils.dates import utc_now as current_utc_time
from domca.shared.utils.validators import ensure_not_blank, ensure_not_none

from domca.modules.user_management.domain.models import UserId, UserSession, UserSessionId
from domca.modules.user_management.domain.repositories.user_session_repository import (
    UserSessionRepository,
)
from domca.modules.user_management.infrastructure.database.mappers import (
    session_to_domain,
    session_to_model,
)
from domca.modules.user_management.infrastructure.database.models import UserSessionModel

logger = logging.getLogger(__name__)


class UserSessionRepositoryImpl(UserSessionRepository):
    """SQLAlchemy implementation of the UserSessionRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, session_id: UserSessionId) -> Optional[UserSession]:
        try:
            model = await self._session.get(UserSessionModel, (session_id,))
            if model is None:
                logger.debug(f"User session not found: {session_id}")
                return None
            return session_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user session {session_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user session: {str(e)}",
                operation="get_by_id",
                entity="UserSession",
            ) from e

    async def get_by_token(self, token: str) -> Optional[UserSession]:
        ensure_not_blank(token, "token")
        try:
            stmt = select(UserSessionModel).where(UserSessionModel.token == token)
            result = await self._session.execute(stmt)
            model = result.scalars().first()
            if model is None:
                logger.debug("User session not found for token")
                return None
            return session_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user session by token: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user session: {str(e)}",
                operation="get_by_token",
                entity="UserSession",
            ) from e

    async def get_active_by_user_id(
        self,
        user_id: UserId,
        utc_now: Optional[datetime] = None,
    ) -> List[UserSession]:
        ensure_not_none(user_id, "user_id")
        reference = ensure_utc(utc_now) if utc_now is not None else current_utc_time()
        try:
            stmt = (
                select(UserSessionModel)
                .where(
                    and_(
                        UserSessionModel.user_id == user_id,
                        UserSessionModel.expires_at > reference,
                    )
                )
                .order_by(UserSessionModel.created_at)
            )
            result = await self._session.execute(stmt)
            sessions = [session_to_domain(model) for model in result.scalars().all()]
            logger.debug(f"Found {len(sessions)} active sessions for user {user_id}")
            return sessions

        except SQLAlchemyError as e:
            logger.error(f"Database error listing active sessions for {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve active sessions: {str(e)}",
                operation="get_active_by_user_id",
                entity="UserSession",
            ) from e

    async def add(self, user_session: UserSession) -> None:
        ensure_not_none(user_session, "user_session")
        self._session.add(session_to_model(user_session))
        logger.info(f"Staged new session {user_session.id} for user {user_session.user_id}")

    async def remove(self, user_session: UserSession) -> None:
        ensure_not_none(user_session, "user_session")
        try:
            model = await self._session.get(UserSessionModel, (user_session.id,))
            if model is None:
                logger.warning(f"User session not found for removal: {user_session.id}")
                return
            await self._session.delete(model)
            logger.info(f"Staged removal of session: {user_session.id}")

        except SQLAlchemyError as e:
            logger.error(f"Database error staging removal of session {user_session.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to remove user session: {str(e)}",
                operation="remove",
                entity="UserSession",
            ) from e

    async def remove_range(self, user_sessions: List[UserSession]) -> None:
        ensure_not_none(user_sessions, "user_sessions")
        for user_session in user_sessions:
            await self.remove(user_session)
