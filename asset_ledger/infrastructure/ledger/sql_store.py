"""SQLAlchemy implementation of the ledger world state."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncResult, AsyncSession

from asset_ledger.infrastructure.database.models import WorldStateEntry
from asset_ledger.modules.assets.exceptions import StoreError

from .cursor import BaseRangeCursor

logger = logging.getLogger(__name__)


class SqlRangeCursor(BaseRangeCursor):
    """Streams rows of a key-ordered select; the result is opened lazily."""

    def __init__(self, session: AsyncSession, stmt: Select) -> None:
        super().__init__()
        self._session = session
        self._stmt = stmt
        self._result: AsyncResult | None = None

    async def _fetch(self) -> Optional[tuple[str, bytes]]:
        try:
            if self._result is None:
                self._result = await self._session.stream(self._stmt)
            row = await self._result.fetchone()
        except SQLAlchemyError as exc:
            logger.error("World state range scan failed: %s", exc)
            raise StoreError(f"range scan failed: {exc}") from exc
        if row is None:
            return None
        key, value = row
        return key, bytes(value)

    async def _release(self) -> None:
        if self._result is not None:
            await self._result.close()
            self._result = None


class SqlLedgerStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> Optional[bytes]:
        stmt = select(WorldStateEntry.value).where(WorldStateEntry.key == key)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("World state get %s failed: %s", key, exc)
            raise StoreError(f"get {key} failed: {exc}") from exc
        value = result.scalar_one_or_none()
        return bytes(value) if value is not None else None

    async def put(self, key: str, value: bytes) -> None:
        try:
            await self._session.merge(WorldStateEntry(key=key, value=bytes(value)))
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("World state put %s failed: %s", key, exc)
            raise StoreError(f"put {key} failed: {exc}") from exc

    async def delete(self, key: str) -> None:
        stmt = delete(WorldStateEntry).where(WorldStateEntry.key == key)
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("World state delete %s failed: %s", key, exc)
            raise StoreError(f"delete {key} failed: {exc}") from exc

    def range_scan(self, start_key: str, end_key: str) -> SqlRangeCursor:
        stmt = select(WorldStateEntry.key, WorldStateEntry.value).order_by(WorldStateEntry.key)
        if start_key:
            stmt = stmt.where(WorldStateEntry.key >= start_key)
        if end_key:
            stmt = stmt.where(WorldStateEntry.key < end_key)
        return SqlRangeCursor(self._session, stmt)
