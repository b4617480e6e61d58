"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from asset_ledger.core.config import Settings
from asset_ledger.infrastructure.database import session_scope
from asset_ledger.infrastructure.ledger import SqlLedgerStore, get_memory_store
from asset_ledger.modules.assets import AssetService, TransactionContext


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_ledger_context(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[TransactionContext, None]:
    """Provide the transactional context for one request.

    The SQL backend uses the session factory built at startup; it commits
    after the endpoint returns and rolls back when it raises. The memory
    backend has no transaction to commit.
    """
    if settings.ledger_backend == "memory":
        yield TransactionContext(get_memory_store())
        return

    async with session_scope(request.app.state.session_factory) as session:
        yield TransactionContext(SqlLedgerStore(session))


def get_asset_service(ctx: TransactionContext = Depends(get_ledger_context)) -> AssetService:
    return AssetService.with_context(ctx)


__all__ = [
    "get_app_settings",
    "get_asset_service",
    "get_ledger_context",
]
