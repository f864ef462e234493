"""
User management domain models.

User is the aggregate root; UserSession and HydrationRecord are owned by it
and reference their user through a typed UserId.
"""

from .hydration_record import HydrationRecord, MAX_AMOUNT_ML, MIN_AMOUNT_ML
from .ids import HydrationRecordId, UserId, UserSessionId
from .user import User, normalize_email
from .user_session import UserSession

__all__ = [
    "HydrationRecord",
    "HydrationRecordId",
    "MAX_AMOUNT_ML",
    "MIN_AMOUNT_ML",
    "User",
    "UserId",
    "UserSession",
    "UserSessionId",
    "normalize_email",
]
