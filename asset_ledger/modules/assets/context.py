"""Per-invocation transactional context handed to the asset service."""

from __future__ import annotations

from dataclasses import dataclass

from .repository import LedgerStore


@dataclass(slots=True)
class TransactionContext:
    store: LedgerStore
