"""
Seed the ledger world state with the initial asset records.
Intended for first-time initialisation; re-running overwrites the seeded ids.
"""
import asyncio
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from asset_ledger.core.config import Settings, get_settings
from asset_ledger.core.logging import configure_logging
from asset_ledger.infrastructure.database import build_engine, build_session_factory, init_db, session_scope
from asset_ledger.infrastructure.ledger import SqlLedgerStore, get_memory_store
from asset_ledger.modules.assets import AssetService, TransactionContext


async def seed_configured_ledger(
    settings: Settings,
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> int:
    if settings.ledger_backend == "memory":
        return await AssetService.with_context(TransactionContext(get_memory_store())).seed_ledger()

    if session_factory is None:
        raise RuntimeError("sql ledger backend requires a session factory")
    async with session_scope(session_factory) as session:
        service = AssetService.with_context(TransactionContext(SqlLedgerStore(session)))
        return await service.seed_ledger()


async def init_ledger(settings: Optional[Settings] = None) -> int:
    settings = settings or get_settings()
    configure_logging(settings)
    if settings.ledger_backend == "memory":
        count = await seed_configured_ledger(settings)
    else:
        engine = build_engine(settings)
        try:
            await init_db(engine)
            count = await seed_configured_ledger(settings, build_session_factory(engine))
        finally:
            await engine.dispose()

    print("=" * 50)
    print(f"账本初始化完成, 共写入 {count} 条资产")
    print("=" * 50)
    return count


def main() -> None:
    asyncio.run(init_ledger())


if __name__ == "__main__":
    main()
