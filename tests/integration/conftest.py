"""Integration fixtures.

Repository tests run against a real PostgreSQL database named by
``TEST_DATABASE_URL`` (postgresql+asyncpg://...). They are skipped when the
variable is unset. Tables are created fresh for each test and dropped
afterwards.
"""

import os

import pytest
import pytest_asyncio

from passage.infrastructure.persistence.database import Database

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")

requires_database = pytest.mark.skipif(
    not TEST_DATABASE_URL,
    reason="TEST_DATABASE_URL not set",
)


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database with an empty schema.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = UserRepository(session=session)
    """
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    db = Database(database_url=TEST_DATABASE_URL, pool_size=2, max_overflow=0)
    await db.drop_tables()
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()
