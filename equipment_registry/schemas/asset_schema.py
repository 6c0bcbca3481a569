"""Pydantic schemas for asset registry requests.

Timestamps are caller-supplied and otherwise unvalidated; they are only held
to the range their 64-bit columns can store.
"""

from pydantic import BaseModel, Field

from equipment_registry.domain.bounds import INT64_MAX, INT64_MIN


class AssetRegisterSchema(BaseModel):
    """Schema for registering a new asset."""

    name: str = Field(..., max_length=255)
    model: str = Field(..., max_length=255)
    serial_number: str = Field(..., max_length=255)
    manufacturer: str = Field(..., max_length=255)
    installation_date: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Unix timestamp")
    warranty_expiration: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Unix timestamp")


class AssetTransferSchema(BaseModel):
    """Schema for transferring an asset to a new owner."""

    new_owner: str = Field(..., min_length=1, max_length=255)
