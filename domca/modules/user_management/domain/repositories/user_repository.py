# 📄 File: domca/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to find, add, change and delete user accounts without
# saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for the User aggregate following the Repository pattern and
# dependency inversion. Writes only stage changes; the unit of work commits them.
# 🔗 Dependencies:
# Domain models (User, UserId), typing, abc
# 🔄 Connected Modules / Calls From:
# Application services, infrastructure implementations, dependency providers

from abc import ABC, abstractmethod
from typing import Optional

from ..models.ids import UserId
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User aggregate data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities rebuilt through User.rehydrate
    - Loaded users carry their sessions and hydration records
    - add/update/remove stage changes; UnitOfWork.save_changes commits them
    """

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, ignoring case.

        Args:
            email: Email address to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def is_email_unique(self, email: str) -> bool:
        """
        Check that no stored user has this email, ignoring case.

        Args:
            email: Email address to check

        Returns:
            True if the email is not yet taken
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> None:
        """Stage a new user (and its owned children) for insertion."""
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Stage the current state of an existing user for saving."""
        pass

    @abstractmethod
    async def remove(self, user: User) -> None:
        """Stage a user and its owned children for deletion."""
        pass
