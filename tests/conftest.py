import os

# Settings are read once; pin the test environment before anything imports them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest

from domca.shared.config.database import (
    configure_database,
    create_all_tables,
    get_async_session_factory,
    reset_database,
)
from domca.shared.config.settings import get_settings

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def session_factory():
    """In-memory database with every table created, torn down after the test."""
    configure_database(SQLITE_URL)
    await create_all_tables()
    yield get_async_session_factory()
    await reset_database()


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
