import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from asset_ledger import __version__
from asset_ledger.core.config import Settings, get_settings
from asset_ledger.core.logging import configure_logging
from asset_ledger.infrastructure.database import build_engine, build_session_factory, init_db
from asset_ledger.init_ledger import seed_configured_ledger
from asset_ledger.interfaces.http import create_api_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        engine = None
        app.state.session_factory = None
        if settings.ledger_backend == "sql":
            engine = build_engine(settings)
            app.state.session_factory = build_session_factory(engine)
            await init_db(engine)
        try:
            if settings.ledger.seed_on_startup:
                count = await seed_configured_ledger(settings, app.state.session_factory)
                logger.info("Seeded %s assets on startup", count)
            yield
        finally:
            if engine is not None:
                await engine.dispose()

    app = FastAPI(
        title=settings.project_name,
        description="Ledger asset record service",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health")
    async def health():
        return {"status": "ok", "backend": settings.ledger_backend}

    return app
