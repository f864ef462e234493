# 📄 File: domca/modules/user_management/domain/repositories/hydration_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how a user's drinking log is read back - everything, today, this week, a month
# or a year - and how entries are added, corrected or removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for HydrationRecord entities with calendar-window queries.
# All windows are half-open UTC ranges. Writes only stage changes.
# 🔗 Dependencies:
# Domain models (HydrationRecord, HydrationRecordId, UserId), datetime, typing, abc
# 🔄 Connected Modules / Calls From:
# Hydration statistics services, infrastructure implementations, dependency providers

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.hydration_record import HydrationRecord
from ..models.ids import HydrationRecordId, UserId


class HydrationRepository(ABC):
    """
    Repository interface for HydrationRecord data access operations.

    Read methods return records ordered by date.
    """

    # Read methods

    @abstractmethod
    async def get_by_id(self, record_id: HydrationRecordId) -> Optional[HydrationRecord]:
        pass

    @abstractmethod
    async def get_by_user(self, user_id: UserId) -> List[HydrationRecord]:
        pass

    @abstractmethod
    async def get_by_user_for_today(self, user_id: UserId) -> List[HydrationRecord]:
        """Records of the current UTC calendar day."""
        pass

    @abstractmethod
    async def get_by_user_for_week(
        self,
        user_id: UserId,
        reference_date: datetime,
    ) -> List[HydrationRecord]:
        """
        Records of the Monday-start week containing reference_date.

        Args:
            user_id: Owning user
            reference_date: Any moment inside the wanted week
        """
        pass

    @abstractmethod
    async def get_by_user_for_month(
        self,
        user_id: UserId,
        month: int,
        year: int,
    ) -> List[HydrationRecord]:
        """
        Records of one calendar month.

        Raises:
            InvalidArgumentError: If month is not within 1..12
        """
        pass

    @abstractmethod
    async def get_by_user_for_year(self, user_id: UserId, year: int) -> List[HydrationRecord]:
        pass

    # Write methods

    @abstractmethod
    async def add(self, hydration_record: HydrationRecord) -> None:
        pass

    @abstractmethod
    async def add_range(self, hydration_records: List[HydrationRecord]) -> None:
        pass

    @abstractmethod
    async def update(self, hydration_record: HydrationRecord) -> None:
        pass

    @abstractmethod
    async def remove(self, hydration_record: HydrationRecord) -> None:
        pass
