"""In-process ordered world state."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Optional

from .cursor import BaseRangeCursor


class InMemoryRangeCursor(BaseRangeCursor):
    def __init__(self, store: "InMemoryLedgerStore", items: list[tuple[str, bytes]]) -> None:
        super().__init__()
        self._store = store
        self._items = iter(items)
        store.open_cursors += 1

    async def _fetch(self) -> Optional[tuple[str, bytes]]:
        return next(self._items, None)

    async def _release(self) -> None:
        self._store.open_cursors -= 1


class InMemoryLedgerStore:
    """Dictionary-backed store; range scans iterate a sorted snapshot of the keys."""

    def __init__(self, initial: Mapping[str, bytes] | None = None) -> None:
        self._state: dict[str, bytes] = dict(initial or {})
        self.open_cursors = 0

    async def get(self, key: str) -> Optional[bytes]:
        return self._state.get(key)

    async def put(self, key: str, value: bytes) -> None:
        self._state[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self._state.pop(key, None)

    def range_scan(self, start_key: str, end_key: str) -> InMemoryRangeCursor:
        keys = sorted(
            key
            for key in self._state
            if (not start_key or key >= start_key) and (not end_key or key < end_key)
        )
        return InMemoryRangeCursor(self, [(key, self._state[key]) for key in keys])

    def snapshot(self) -> dict[str, bytes]:
        return dict(self._state)


@lru_cache()
def get_memory_store() -> InMemoryLedgerStore:
    """Process-wide store backing the ``memory`` ledger backend."""
    return InMemoryLedgerStore()
