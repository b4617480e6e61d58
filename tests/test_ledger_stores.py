"""Tests for the in-memory and SQLAlchemy world state adapters."""

from __future__ import annotations

import json

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from asset_ledger.infrastructure.ledger import InMemoryLedgerStore, SqlLedgerStore
from asset_ledger.modules.assets import AssetService, DecodedRecord, RawRecord, TransactionContext
from asset_ledger.modules.assets.exceptions import StoreError


async def _drain(cursor) -> list[tuple[str, bytes]]:
    async with cursor:
        return [item async for item in cursor]


# ---------------------------------------------------------------------------
# in-memory store
# ---------------------------------------------------------------------------


async def test_memory_store_get_put_delete(store: InMemoryLedgerStore):
    assert await store.get("k") is None

    await store.put("k", b"v")
    assert await store.get("k") == b"v"

    await store.delete("k")
    assert await store.get("k") is None


async def test_memory_range_scan_bounds(store: InMemoryLedgerStore):
    for key in ["b", "a", "d", "c"]:
        await store.put(key, key.encode())

    assert [k for k, _ in await _drain(store.range_scan("", ""))] == ["a", "b", "c", "d"]
    assert [k for k, _ in await _drain(store.range_scan("b", ""))] == ["b", "c", "d"]
    assert [k for k, _ in await _drain(store.range_scan("", "c"))] == ["a", "b"]
    assert [k for k, _ in await _drain(store.range_scan("b", "d"))] == ["b", "c"]


async def test_memory_cursor_has_next_and_next(store: InMemoryLedgerStore):
    await store.put("x", b"1")
    cursor = store.range_scan("", "")

    assert store.open_cursors == 1
    assert await cursor.has_next() is True
    assert await cursor.has_next() is True
    assert await cursor.next() == ("x", b"1")
    assert await cursor.has_next() is False
    with pytest.raises(StopAsyncIteration):
        await cursor.next()

    await cursor.close()
    await cursor.close()
    assert cursor.closed
    assert store.open_cursors == 0


async def test_memory_cursor_released_when_body_raises(store: InMemoryLedgerStore):
    await store.put("x", b"1")

    with pytest.raises(RuntimeError):
        async with store.range_scan("", "") as cursor:
            async for _ in cursor:
                raise RuntimeError("boom")

    assert store.open_cursors == 0


# ---------------------------------------------------------------------------
# SQL store
# ---------------------------------------------------------------------------


async def test_sql_store_get_missing_returns_none(sql_store: SqlLedgerStore):
    assert await sql_store.get("missing") is None


async def test_sql_store_put_is_upsert(sql_store: SqlLedgerStore):
    await sql_store.put("k", b"one")
    await sql_store.put("k", b"two")

    assert await sql_store.get("k") == b"two"


async def test_sql_store_delete(sql_store: SqlLedgerStore):
    await sql_store.put("k", b"v")

    await sql_store.delete("k")

    assert await sql_store.get("k") is None


async def test_sql_range_scan_orders_keys_and_respects_bounds(sql_store: SqlLedgerStore):
    for key in ["2", "10", "1", "3"]:
        await sql_store.put(key, key.encode())

    assert [k for k, _ in await _drain(sql_store.range_scan("", ""))] == ["1", "10", "2", "3"]
    assert [k for k, _ in await _drain(sql_store.range_scan("10", "3"))] == ["10", "2"]


async def test_sql_cursor_close_before_iteration(sql_store: SqlLedgerStore):
    cursor = sql_store.range_scan("", "")

    await cursor.close()

    assert cursor.closed
    assert await cursor.has_next() is False


async def test_sql_store_wraps_database_errors():
    # no tables created: every statement fails at the database
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    try:
        async with AsyncSession(engine) as session:
            with pytest.raises(StoreError):
                await SqlLedgerStore(session).get("k")
        async with AsyncSession(engine) as session:
            with pytest.raises(StoreError):
                await _drain(SqlLedgerStore(session).range_scan("", ""))
    finally:
        await engine.dispose()


async def test_service_over_sql_store(sql_store: SqlLedgerStore):
    service = AssetService.with_context(TransactionContext(sql_store))

    await service.seed_ledger()
    await service.create_asset(b'{"ID":"42","name":"X"}')
    await sql_store.put("zz", b"\x00raw")
    await service.transfer_asset("42", "Bob")
    await service.delete_asset("5")

    assert json.loads(await service.read_asset("42")) == {"ID": "42", "name": "X", "owner": "Bob"}
    results = await service.get_all_assets()
    keys = [result.key for result in results]
    assert keys == ["1", "10", "2", "3", "4", "42", "6", "7", "8", "9", "zz"]
    assert all(isinstance(result.record, DecodedRecord) for result in results[:-1])
    assert results[-1].record == RawRecord("\x00raw")
