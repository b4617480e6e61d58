"""Shared range cursor behaviour for ledger store adapters."""

from __future__ import annotations

from typing import Optional


class BaseRangeCursor:
    """Pull-based cursor over ``(key, value)`` pairs.

    Subclasses implement ``_fetch`` (return the next pair or ``None`` once
    exhausted) and ``_release``. ``_release`` runs at most once.
    """

    def __init__(self) -> None:
        self._pending: Optional[tuple[str, bytes]] = None
        self._exhausted = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def _fetch(self) -> Optional[tuple[str, bytes]]:
        raise NotImplementedError

    async def _release(self) -> None:
        raise NotImplementedError

    async def has_next(self) -> bool:
        if self._closed:
            return False
        if self._pending is not None:
            return True
        if self._exhausted:
            return False
        item = await self._fetch()
        if item is None:
            self._exhausted = True
            return False
        self._pending = item
        return True

    async def next(self) -> tuple[str, bytes]:
        if not await self.has_next():
            raise StopAsyncIteration
        assert self._pending is not None
        item, self._pending = self._pending, None
        return item

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = None
        await self._release()

    def __aiter__(self) -> "BaseRangeCursor":
        return self

    async def __anext__(self) -> tuple[str, bytes]:
        return await self.next()

    async def __aenter__(self) -> "BaseRangeCursor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
