from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from dotenv import load_dotenv

# Point the application at an in-memory database before any querylab module
# builds its global engine.
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("QUERYLAB_ENABLE_FILE_LOGGING", "false")

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from querylab.core.database.utils import create_all, create_engine, create_sessionmaker  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory SQLite engine with every table created."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session whose uncommitted work is rolled back when the test ends."""
    session_factory = create_sessionmaker(engine)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def sample_member_data() -> dict:
    """Sample member data for testing."""
    return {"username": "member1", "age": 10}


@pytest.fixture
def sample_product_data() -> dict:
    """Sample product data for testing."""
    return {"name": "keyboard", "price": 30000}
