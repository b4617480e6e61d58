"""Ledger asset endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from asset_ledger.interfaces.http.deps import get_asset_service
from asset_ledger.modules.assets import (
    AssetDecodeError,
    AssetError,
    AssetNotFoundError,
    AssetService,
    StoreError,
)
from asset_ledger.schemas import (
    AssetExistsResponse,
    AssetQueryResultResponse,
    AssetTransfer,
    AssetUpdate,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_http_error(exc: AssetError) -> HTTPException:
    if isinstance(exc, AssetNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, AssetDecodeError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, StoreError):
        logger.error("Ledger store failure: %s", exc)
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="账本存储不可用")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/seed", response_model=SuccessResponse, summary="初始化账本")
async def seed_ledger(service: AssetService = Depends(get_asset_service)):
    try:
        count = await service.seed_ledger()
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return SuccessResponse(message="账本初始化完成", data={"count": count})


@router.post("", status_code=status.HTTP_201_CREATED, summary="创建资产")
async def create_asset(request: Request, service: AssetService = Depends(get_asset_service)):
    payload = await request.body()
    try:
        stored = await service.create_asset(payload)
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return Response(content=stored, media_type="application/json", status_code=status.HTTP_201_CREATED)


@router.get("", response_model=list[AssetQueryResultResponse], summary="获取全部资产")
async def get_all_assets(service: AssetService = Depends(get_asset_service)):
    try:
        results = await service.get_all_assets()
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return [result.to_dict() for result in results]


@router.get("/{asset_id}", summary="读取资产")
async def read_asset(asset_id: str, service: AssetService = Depends(get_asset_service)):
    try:
        stored = await service.read_asset(asset_id)
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return Response(content=stored, media_type="application/json")


@router.get("/{asset_id}/exists", response_model=AssetExistsResponse, summary="资产是否存在")
async def asset_exists(asset_id: str, service: AssetService = Depends(get_asset_service)):
    try:
        exists = await service.asset_exists(asset_id)
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return AssetExistsResponse(id=asset_id, exists=exists)


@router.put("/{asset_id}", summary="更新资产")
async def update_asset(
    asset_id: str,
    payload: AssetUpdate,
    service: AssetService = Depends(get_asset_service),
):
    try:
        return await service.update_asset(
            asset_id,
            payload.color,
            payload.size,
            payload.owner,
            payload.appraised_value,
        )
    except AssetError as exc:
        raise _to_http_error(exc) from exc


@router.delete("/{asset_id}", response_model=SuccessResponse, summary="删除资产")
async def delete_asset(asset_id: str, service: AssetService = Depends(get_asset_service)):
    try:
        await service.delete_asset(asset_id)
    except AssetError as exc:
        raise _to_http_error(exc) from exc
    return SuccessResponse(message="资产已删除", data={"id": asset_id})


@router.post("/{asset_id}/transfer", summary="转移资产")
async def transfer_asset(
    asset_id: str,
    payload: AssetTransfer,
    service: AssetService = Depends(get_asset_service),
):
    try:
        return await service.transfer_asset(asset_id, payload.new_owner)
    except AssetError as exc:
        raise _to_http_error(exc) from exc
