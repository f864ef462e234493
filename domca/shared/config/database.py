# 📄 File: domca/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the relational database where users, sessions,
# drinking logs and school records are kept, and for handing out database sessions.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async database configuration with environment-aware pooling, session
# factory, declarative base with naming conventions, health check and schema helpers.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine and session
# - domca.shared.config.settings
# - asyncpg (PostgreSQL) / aiosqlite (SQLite) async drivers
#
# 🔄 Connected Modules / Calls From:
# - ORM models of every module (DatabaseBase)
# - domca.shared.core.dependencies (persistence registration, session provider)
# - migrations/env.py (target metadata)

import logging
from typing import Any, Dict, Optional

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool, StaticPool

from domca.shared.core.exceptions import DatabaseError

from .settings import get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, database_url: Optional[str] = None):
        self.settings = get_settings()
        self._database_url = database_url
        self._async_engine: Optional[AsyncEngine] = None
        self._async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        """Get the database URL for async connections."""
        return self._database_url or self.settings.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on URL and environment."""

        base_config: Dict[str, Any] = {
            "echo": self.settings.DB_ECHO,
        }

        if self.is_sqlite:
            # One shared connection keeps in-memory databases alive across sessions
            base_config.update({
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            })
        elif self.settings.is_testing:
            base_config["poolclass"] = NullPool
        else:
            base_config.update({
                "pool_size": self.settings.DB_POOL_SIZE,
                "max_overflow": self.settings.DB_MAX_OVERFLOW,
                "pool_timeout": self.settings.DB_POOL_TIMEOUT,
                "pool_recycle": self.settings.DB_POOL_RECYCLE,
                "pool_pre_ping": True,
                "connect_args": {
                    "server_settings": {
                        "application_name": f"{self.settings.APP_NAME}_{self.settings.ENVIRONMENT}",
                        "timezone": "UTC",
                    }
                },
            })

        return base_config

    def create_async_engine(self) -> AsyncEngine:
        """Create and configure async database engine."""
        if self._async_engine is None:
            self._async_engine = create_async_engine(
                self.database_url,
                **self.engine_kwargs
            )
            logger.info(f"Database engine created for {self._async_engine.url.render_as_string(hide_password=True)}")
        return self._async_engine

    def create_async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Create async session factory."""
        if self._async_session_factory is None:
            engine = self.create_async_engine()
            self._async_session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,  # Pending changes stay staged until the unit of work saves
            )
        return self._async_session_factory

    async def close_async_engine(self):
        """Close the async database engine."""
        if self._async_engine:
            await self._async_engine.dispose()
            self._async_engine = None
            self._async_session_factory = None
            logger.info("Database engine disposed")


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata (and constraint naming convention)
    for every table in the application.
    """
    metadata = metadata


# =============================================================================
# GLOBAL DATABASE CONFIGURATION INSTANCE
# =============================================================================

_db_config: Optional[DatabaseConfig] = None


def configure_database(database_url: Optional[str] = None) -> DatabaseConfig:
    """
    Install the process-wide database configuration.

    Args:
        database_url: Async connection URL, defaults to the settings value

    Returns:
        The new DatabaseConfig
    """
    global _db_config
    _db_config = DatabaseConfig(database_url)
    return _db_config


def get_db_config() -> DatabaseConfig:
    """
    Get the configured database configuration.

    Raises:
        DatabaseError: If configure_database was never called
    """
    if _db_config is None:
        raise DatabaseError("Database is not configured", operation="get_db_config")
    return _db_config


async def reset_database() -> None:
    """Dispose the engine and forget the current configuration."""
    global _db_config
    if _db_config is not None:
        await _db_config.close_async_engine()
    _db_config = None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_async_engine() -> AsyncEngine:
    """Get the async database engine."""
    return get_db_config().create_async_engine()


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the async session factory."""
    return get_db_config().create_async_session_factory()


# =============================================================================
# DATABASE HEALTH CHECK
# =============================================================================

async def check_database_health() -> Dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict containing database health status
    """
    try:
        engine = get_async_engine()

        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            value = result.scalar()

        return {
            "status": "healthy",
            "test_query": value,
            "database_url": engine.url.render_as_string(hide_password=True),
        }

    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "type": type(e).__name__,
        }


# =============================================================================
# SCHEMA UTILITIES
# =============================================================================

def register_models() -> None:
    """Import every module's ORM models so their tables join the shared metadata."""
    from domca.modules.school.infrastructure.database import models as school_models  # noqa: F401
    from domca.modules.user_management.infrastructure.database import models as user_models  # noqa: F401


async def create_all_tables() -> None:
    """Create every mapped table (tests and local development)."""
    register_models()
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)


async def drop_all_tables() -> None:
    """Drop every mapped table (tests and local development)."""
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.drop_all)
