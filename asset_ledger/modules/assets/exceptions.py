"""Asset domain specific exceptions."""


class AssetError(Exception):
    """Base class for asset domain errors."""


class AssetNotFoundError(AssetError):
    """Raised when no non-empty value is stored under the requested asset id."""

    def __init__(self, asset_id: str) -> None:
        super().__init__(f"The asset {asset_id} does not exist")
        self.asset_id = asset_id


class AssetDecodeError(AssetError):
    """Raised when a payload or stored value cannot be decoded into a record."""


class StoreError(AssetError):
    """Raised when the underlying ledger store fails."""
