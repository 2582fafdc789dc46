"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance with migrations
applied (alembic upgrade head).
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
import os

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine
from infrastructure.settings import DatabaseSettings


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        BILLING_DB_HOST, BILLING_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("BILLING_DB_HOST", "localhost"),
        port=int(os.getenv("BILLING_DB_PORT", "5432")),
        database=os.getenv("BILLING_DB_DATABASE", "billing"),
        username=os.getenv("BILLING_DB_USERNAME", "billing"),
        password=SecretStr(os.getenv("BILLING_DB_PASSWORD", "billing_dev_password")),
    )


@pytest_asyncio.fixture
async def session_factory(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Provide a session factory on a fresh engine with empty billing tables."""
    engine = create_engine(integration_db_settings)
    factory = async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE billing_workspaces, billing_events"))

    yield factory

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE billing_workspaces, billing_events"))
    await engine.dispose()
