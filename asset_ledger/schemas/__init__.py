"""Pydantic schemas used across the project."""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ScalarValue = Union[str, int, float, bool]


class AssetUpdate(BaseModel):
    color: ScalarValue
    size: ScalarValue
    owner: ScalarValue
    appraised_value: ScalarValue = Field(..., alias="appraisedValue")

    model_config = ConfigDict(populate_by_name=True)


class AssetTransfer(BaseModel):
    new_owner: str = Field(..., alias="newOwner", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class AssetExistsResponse(BaseModel):
    id: str
    exists: bool


class AssetQueryResultResponse(BaseModel):
    key: str = Field(..., alias="Key")
    record: Any = Field(None, alias="Record")

    model_config = ConfigDict(populate_by_name=True)


class SuccessResponse(BaseModel):
    success: bool = True
    message: str = "ok"
    data: Optional[Any] = None
