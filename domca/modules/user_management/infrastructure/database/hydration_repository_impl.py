# 📄 File: domca/modules/user_management/infrastructure/database/hydration_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads a user's drinking log for a chosen period - all of it, today, one week, one month
# or one year - and prepares new, corrected or deleted entries to be saved.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of HydrationRepository. Calendar windows come from
# domca.shared.utils.dates as half-open UTC ranges; results are ordered by date.
#
# 🔗 Dependencies:
# - domca.modules.user_management.domain.repositories.hydration_repository
# - domca.modules.user_management.infrastructure.database.models / mappers
# - domca.shared.utils.dates, SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - domca.shared.core.dependencies (repository provider)
# - Hydration statistics services

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domca.shared.core.exceptions import RepositoryError
from domca.shared.utils.dates import day_range, month_range, utc_now, week_range, year_range
from domca.shared.utils.validators import ensure_in_range, ensure_not_none

from domca.modules.user_management.domain.models import (
    HydrationRecord,
    HydrationRecordId,
    UserId,
)
from domca.modules.user_management.domain.repositories.hydration_repository import (
    HydrationRepository,
)
from domca.modules.user_management.infrastructure.database.mappers import (
    hydration_record_to_domain,
    hydration_record_to_model,
)
from domca.modules.user_management.infrastructure.database.models import HydrationRecordModel

logger = logging.getLogger(__name__)


class HydrationRepositoryImpl(HydrationRepository):
    """SQLAlchemy implementation of the HydrationRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    async def get_by_id(self, record_id: HydrationRecordId) -> Optional[HydrationRecord]:
        try:
            model = await self._session.get(HydrationRecordModel, (record_id,))
            if model is None:
                logger.debug(f"Hydration record not found: {record_id}")
                return None
            return hydration_record_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving hydration record {record_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve hydration record: {str(e)}",
                operation="get_by_id",
                entity="HydrationRecord",
            ) from e

    async def get_by_user(self, user_id: UserId) -> List[HydrationRecord]:
        return await self._list(user_id, None, "get_by_user")

    async def get_by_user_for_today(self, user_id: UserId) -> List[HydrationRecord]:
        return await self._list(user_id, day_range(utc_now()), "get_by_user_for_today")

    async def get_by_user_for_week(
        self,
        user_id: UserId,
        reference_date: datetime,
    ) -> List[HydrationRecord]:
        ensure_not_none(reference_date, "reference_date")
        return await self._list(user_id, week_range(reference_date), "get_by_user_for_week")

    async def get_by_user_for_month(
        self,
        user_id: UserId,
        month: int,
        year: int,
    ) -> List[HydrationRecord]:
        ensure_in_range(month, "month", minimum=1, maximum=12)
        return await self._list(user_id, month_range(month, year), "get_by_user_for_month")

    async def get_by_user_for_year(self, user_id: UserId, year: int) -> List[HydrationRecord]:
        return await self._list(user_id, year_range(year), "get_by_user_for_year")

    async def _list(
        self,
        user_id: UserId,
        window: Optional[Tuple[datetime, datetime]],
        operation: str,
    ) -> List[HydrationRecord]:
        """Records of a user, optionally limited to a half-open [start, end) window."""
        ensure_not_none(user_id, "user_id")
        conditions = [HydrationRecordModel.user_id == user_id]
        if window is not None:
            start, end = window
            conditions.append(HydrationRecordModel.date >= start)
            conditions.append(HydrationRecordModel.date < end)

        try:
            stmt = (
                select(HydrationRecordModel)
                .where(and_(*conditions))
                .order_by(HydrationRecordModel.date)
            )
            result = await self._session.execute(stmt)
            records = [hydration_record_to_domain(model) for model in result.scalars().all()]
            logger.debug(f"{operation}: {len(records)} hydration records for user {user_id}")
            return records

        except SQLAlchemyError as e:
            logger.error(f"Database error in {operation} for user {user_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve hydration records: {str(e)}",
                operation=operation,
                entity="HydrationRecord",
            ) from e

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    async def add(self, hydration_record: HydrationRecord) -> None:
        ensure_not_none(hydration_record, "hydration_record")
        self._session.add(hydration_record_to_model(hydration_record))
        logger.info(
            f"Staged hydration record {hydration_record.id} "
            f"({hydration_record.amount_ml} ml) for user {hydration_record.user_id}"
        )

    async def add_range(self, hydration_records: List[HydrationRecord]) -> None:
        ensure_not_none(hydration_records, "hydration_records")
        self._session.add_all([hydration_record_to_model(r) for r in hydration_records])
        logger.info(f"Staged {len(hydration_records)} hydration records")

    async def update(self, hydration_record: HydrationRecord) -> None:
        ensure_not_none(hydration_record, "hydration_record")
        try:
            await self._session.merge(hydration_record_to_model(hydration_record))
            logger.info(f"Staged update for hydration record: {hydration_record.id}")

        except SQLAlchemyError as e:
            logger.error(f"Database error staging update for {hydration_record.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update hydration record: {str(e)}",
                operation="update",
                entity="HydrationRecord",
            ) from e

    async def remove(self, hydration_record: HydrationRecord) -> None:
        ensure_not_none(hydration_record, "hydration_record")
        try:
            model = await self._session.get(HydrationRecordModel, (hydration_record.id,))
            if model is None:
                logger.warning(f"Hydration record not found for removal: {hydration_record.id}")
                return
            await self._session.delete(model)
            logger.info(f"Staged removal of hydration record: {hydration_record.id}")

        except SQLAlchemyError as e:
            logger.error(f"Database error staging removal of {hydration_record.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to remove hydration record: {str(e)}",
                operation="remove",
                entity="HydrationRecord",
            ) from e
