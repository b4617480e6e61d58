from fastapi import APIRouter

from asset_ledger.interfaces.http.routers import assets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(assets.router, prefix="/assets", tags=["资产"])
    return router


__all__ = [
    "create_api_router",
]
