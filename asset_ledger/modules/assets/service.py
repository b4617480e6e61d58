"""Asset service implementing the ledger asset lifecycle on top of a world state store."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Union

from .context import TransactionContext
from .exceptions import AssetDecodeError, AssetNotFoundError
from .models import (
    ASSET_DOC_TYPE,
    SEED_ASSETS,
    AssetQueryResult,
    AssetRecord,
    DecodedRecord,
    RawRecord,
)
from .repository import LedgerStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssetService:
    store: LedgerStore

    @classmethod
    def with_context(cls, ctx: TransactionContext) -> "AssetService":
        return cls(ctx.store)

    async def seed_ledger(self) -> int:
        count = 0
        for seed in SEED_ASSETS:
            asset = dict(seed)
            asset["docType"] = ASSET_DOC_TYPE
            await self.store.put(asset["ID"], _encode(asset))
            logger.info("Asset %s initialized", asset["ID"])
            count += 1
        return count

    async def create_asset(self, payload: Union[bytes, str]) -> bytes:
        """Store ``payload`` verbatim under its ``ID``.

        No existence check is made, so an existing asset with the same id is
        overwritten.
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        asset_id = _extract_id(payload)
        await self.store.put(asset_id, payload)
        logger.info("Asset %s created", asset_id)
        return payload

    async def read_asset(self, asset_id: str) -> bytes:
        value = await self.store.get(asset_id)
        if not value:
            raise AssetNotFoundError(asset_id)
        return value

    async def update_asset(
        self,
        asset_id: str,
        color: Any,
        size: Any,
        owner: Any,
        appraised_value: Any,
    ) -> AssetRecord:
        if not await self.asset_exists(asset_id):
            raise AssetNotFoundError(asset_id)

        # overwrite: fields of the previous record are dropped
        updated: AssetRecord = {
            "ID": asset_id,
            "color": color,
            "size": size,
            "owner": owner,
            "appraisedValue": appraised_value,
        }
        await self.store.put(asset_id, _encode(updated))
        logger.info("Asset %s updated", asset_id)
        return updated

    async def delete_asset(self, asset_id: str) -> None:
        if not await self.asset_exists(asset_id):
            raise AssetNotFoundError(asset_id)
        await self.store.delete(asset_id)
        logger.info("Asset %s deleted", asset_id)

    async def asset_exists(self, asset_id: str) -> bool:
        value = await self.store.get(asset_id)
        return bool(value)

    async def transfer_asset(self, asset_id: str, new_owner: Any) -> AssetRecord:
        raw = await self.read_asset(asset_id)
        asset = _decode(raw)
        if not isinstance(asset, dict):
            raise AssetDecodeError(f"Asset {asset_id} is not a JSON object")
        asset["owner"] = new_owner
        await self.store.put(asset_id, _encode(asset))
        logger.info("Asset %s transferred to %s", asset_id, new_owner)
        return asset

    async def get_all_assets(self) -> list[AssetQueryResult]:
        results: list[AssetQueryResult] = []
        # empty bounds scan the whole key space
        async with self.store.range_scan("", "") as cursor:
            async for key, value in cursor:
                text = value.decode("utf-8", errors="replace")
                try:
                    record: Union[DecodedRecord, RawRecord] = DecodedRecord(json.loads(text))
                except ValueError as exc:
                    logger.warning("Stored value for %s is not valid JSON: %s", key, exc)
                    record = RawRecord(text)
                results.append(AssetQueryResult(key=key, record=record))
        return results


def _encode(record: AssetRecord) -> bytes:
    return json.dumps(record, separators=(",", ":")).encode("utf-8")


def _decode(payload: bytes) -> Any:
    try:
        return json.loads(payload.decode("utf-8"))
    except ValueError as exc:
        raise AssetDecodeError(f"Invalid asset payload: {exc}") from exc


def _extract_id(payload: bytes) -> str:
    asset = _decode(payload)
    if not isinstance(asset, dict):
        raise AssetDecodeError("Asset payload must be a JSON object")
    asset_id = asset.get("ID")
    if not isinstance(asset_id, str) or not asset_id:
        raise AssetDecodeError("Asset payload is missing a non-empty string ID")
    return asset_id
