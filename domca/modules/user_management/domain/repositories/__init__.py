"""Repository contracts for the user management aggregate."""

from .hydration_repository import HydrationRepository
from .user_repository import UserRepository
from .user_session_repository import UserSessionRepository

__all__ = [
    "HydrationRepository",
    "UserRepository",
    "UserSessionRepository",
]
