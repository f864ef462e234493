"""
Common FastAPI dependencies for the Domca data-access layer.
Provides persistence registration, the request-scoped database session,
repositories and the unit of work.
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from domca.shared.config.database import (
    DatabaseConfig,
    configure_database,
    get_async_session_factory,
)
from domca.shared.infrastructure.database.unit_of_work import SqlAlchemyUnitOfWork
from domca.shared.utils.validators import ensure_not_blank

from domca.modules.user_management.domain.repositories import (
    HydrationRepository,
    UserRepository,
    UserSessionRepository,
)
from domca.modules.user_management.infrastructure.database.hydration_repository_impl import (
    HydrationRepositoryImpl,
)
from domca.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from domca.modules.user_management.infrastructure.database.user_session_repository_impl import (
    UserSessionRepositoryImpl,
)

from .unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def add_persistence(database_url: str) -> DatabaseConfig:
    """
    Register the relational store used by every repository.

    Args:
        database_url: Async SQLAlchemy URL, e.g. postgresql+asyncpg://...

    Returns:
        DatabaseConfig: The installed configuration

    Raises:
        InvalidArgumentError: If the URL is blank
    """
    ensure_not_blank(database_url, "database_url")
    config = configure_database(database_url)
    logger.info("Persistence registered")
    return config


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for the request-scoped database session.

    Nothing is committed here; commits belong to the unit of work.
    Uncommitted changes are rolled back when an exception escapes.

    Yields:
        AsyncSession: Database session
    """
    async_session_factory = get_async_session_factory()
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepositoryImpl(session)


def get_user_session_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserSessionRepository:
    return UserSessionRepositoryImpl(session)


def get_hydration_repository(
    session: AsyncSession = Depends(get_db_session),
) -> HydrationRepository:
    return HydrationRepositoryImpl(session)


def get_unit_of_work(session: AsyncSession = Depends(get_db_session)) -> UnitOfWork:
    """Unit of work sharing the request session with the repositories."""
    return SqlAlchemyUnitOfWork(session)
