"""Store protocol for the ledger world state."""

from __future__ import annotations

from typing import Optional, Protocol


class RangeCursor(Protocol):
    """Ordered cursor over ``(key, value)`` pairs of a key range.

    Cursors are async iterators and async context managers. ``close`` is
    idempotent and releases the underlying resource exactly once.
    """

    async def has_next(self) -> bool:
        ...

    async def next(self) -> tuple[str, bytes]:
        ...

    async def close(self) -> None:
        ...

    def __aiter__(self) -> "RangeCursor":
        ...

    async def __anext__(self) -> tuple[str, bytes]:
        ...

    async def __aenter__(self) -> "RangeCursor":
        ...

    async def __aexit__(self, exc_type, exc, tb) -> None:
        ...


class LedgerStore(Protocol):
    """Abstract key-value world state consumed by the asset service.

    ``get`` returns ``None`` (or empty bytes) when nothing is stored. An empty
    ``start_key`` or ``end_key`` in ``range_scan`` leaves that side of the
    half-open range unbounded.
    """

    async def get(self, key: str) -> Optional[bytes]:
        ...

    async def put(self, key: str, value: bytes) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...

    def range_scan(self, start_key: str, end_key: str) -> RangeCursor:
        ...
