# 📄 File: domca/modules/user_management/domain/repositories/user_session_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how login sessions are looked up (by id, by token, still-valid ones of a user)
# and how they are added or thrown away.
# 🧪 Purpose (Technical Summary):
# Repository interface for UserSession entities. Writes only stage changes; the unit
# of work commits them.
# 🔗 Dependencies:
# Domain models (UserSession, UserSessionId, UserId), datetime, typing, abc
# 🔄 Connected Modules / Calls From:
# Authentication services, infrastructure implementations, dependency providers

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.ids import UserId, UserSessionId
from ..models.user_session import UserSession


class UserSessionRepository(ABC):
    """Repository interface for UserSession data access operations."""

    @abstractmethod
    async def get_by_id(self, session_id: UserSessionId) -> Optional[UserSession]:
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[UserSession]:
        """
        Get the session holding an authentication token.

        Args:
            token: Opaque token value

        Returns:
            UserSession if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_active_by_user_id(
        self,
        user_id: UserId,
        utc_now: Optional[datetime] = None,
    ) -> List[UserSession]:
        """
        Get a user's sessions that expire strictly after the reference time.

        Args:
            user_id: Owning user
            utc_now: Reference time, defaults to the current UTC time

        Returns:
            Active sessions, possibly empty
        """
        pass

    @abstractmethod
    async def add(self, user_session: UserSession) -> None:
        pass

    @abstractmethod
    async def remove(self, user_session: UserSession) -> None:
        pass

    @abstractmethod
    async def remove_range(self, user_sessions: List[UserSession]) -> None:
        pass
