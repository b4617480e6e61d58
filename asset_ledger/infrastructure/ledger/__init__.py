"""Ledger store adapters."""

from .memory_store import InMemoryLedgerStore, get_memory_store
from .sql_store import SqlLedgerStore

__all__ = ["InMemoryLedgerStore", "SqlLedgerStore", "get_memory_store"]
