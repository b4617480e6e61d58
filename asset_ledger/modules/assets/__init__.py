"""Asset domain exports."""

from .context import TransactionContext
from .exceptions import AssetDecodeError, AssetError, AssetNotFoundError, StoreError
from .models import (
    ASSET_DOC_TYPE,
    SEED_ASSETS,
    AssetQueryResult,
    AssetRecord,
    DecodedRecord,
    RawRecord,
)
from .repository import LedgerStore, RangeCursor
from .service import AssetService

__all__ = [
    "ASSET_DOC_TYPE",
    "SEED_ASSETS",
    "AssetDecodeError",
    "AssetError",
    "AssetNotFoundError",
    "AssetQueryResult",
    "AssetRecord",
    "AssetService",
    "DecodedRecord",
    "LedgerStore",
    "RangeCursor",
    "RawRecord",
    "StoreError",
    "TransactionContext",
]
