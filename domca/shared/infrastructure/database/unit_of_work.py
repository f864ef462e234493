# 📄 File: domca/shared/infrastructure/database/unit_of_work.py
# 🧭 Purpose (Layman Explanation):
# Writes everything the repositories prepared to the database at once, or nothing
# at all if the database refuses part of it.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of UnitOfWork over the request-scoped AsyncSession shared
# with the repositories. Counts pending inserts, real updates and deletes, commits,
# and rolls back on SQLAlchemy errors.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - domca.shared.core.unit_of_work, domca.shared.core.exceptions
# - domca.shared.utils.logging (business event logging)
#
# 🔄 Connected Modules / Calls From:
# - domca.shared.core.dependencies (get_unit_of_work)

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domca.shared.core.exceptions import RepositoryError
from domca.shared.core.unit_of_work import UnitOfWork
from domca.shared.utils.logging import get_logger

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work committing one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _pending_count(self) -> int:
        inserted = len(self._session.new)
        deleted = len(self._session.deleted)
        updated = sum(
            1 for obj in self._session.dirty if self._session.is_modified(obj)
        )
        return inserted + updated + deleted

    async def save_changes(self) -> int:
        count = self._pending_count()
        try:
            await self._session.commit()

        except IntegrityError as e:
            await self._session.rollback()
            logger.error(f"Save rejected by a constraint, transaction rolled back: {e.orig}")
            raise RepositoryError(
                f"Failed to save changes: {str(e.orig)}",
                operation="save_changes",
                constraint=type(e.orig).__name__,
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise RepositoryError(
                f"Failed to save changes: {str(e)}",
                operation="save_changes",
            ) from e

        logger.log_business_event(
            "changes_saved",
            f"Saved {count} entity changes",
            extra={"change_count": count},
        )
        return count
