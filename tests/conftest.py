"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from asset_ledger.core.config import Settings
from asset_ledger.infrastructure.database import models  # noqa: F401
from asset_ledger.infrastructure.database.base import Base
from asset_ledger.infrastructure.ledger import InMemoryLedgerStore, SqlLedgerStore, get_memory_store
from asset_ledger.main import create_app
from asset_ledger.modules.assets import AssetService, TransactionContext


@pytest.fixture
def store() -> InMemoryLedgerStore:
    """Empty in-memory world state."""
    return InMemoryLedgerStore()


@pytest.fixture
def service(store: InMemoryLedgerStore) -> AssetService:
    """Asset service bound to the in-memory store."""
    return AssetService.with_context(TransactionContext(store))


@pytest.fixture
async def sql_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh in-memory SQLite database with the world state table."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def sql_store(sql_session: AsyncSession) -> SqlLedgerStore:
    return SqlLedgerStore(sql_session)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """HTTP client against an app using the process-wide memory backend."""
    get_memory_store.cache_clear()
    settings = Settings(environment="test", ledger={"backend": "memory"})
    with TestClient(create_app(settings)) as test_client:
        yield test_client
    get_memory_store.cache_clear()


@pytest.fixture
def sql_settings(tmp_path: Path) -> Settings:
    """Settings pointing the SQL backend at a file database under ``tmp_path``."""
    return Settings(
        environment="test",
        database={"url": f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"},
        ledger={"backend": "sql"},
    )


@pytest.fixture
def sql_client(sql_settings: Settings) -> Iterator[TestClient]:
    """HTTP client against an app using the SQL backend."""
    with TestClient(create_app(sql_settings)) as test_client:
        yield test_client
