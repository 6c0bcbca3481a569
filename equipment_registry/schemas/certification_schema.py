"""Pydantic schemas for certification registry requests.

The date window is deliberately not checked here: an inverted window is a
registry rule (``INVALID_DATE_RANGE``), not malformed input. Levels and
timestamps are opaque integers held only to their 64-bit column range.
"""

from pydantic import BaseModel, Field

from equipment_registry.domain.bounds import INT64_MAX, INT64_MIN


class IssuerCreateSchema(BaseModel):
    """Schema for adding an authorized issuer."""

    issuer: str = Field(..., min_length=1, max_length=255)


class IssuerQuerySchema(BaseModel):
    """Query parameters for an allow-list lookup."""

    identity: str = Field(..., min_length=1, max_length=255)


class CertificationKeySchema(BaseModel):
    """The composite (technician, equipment_type) key."""

    technician: str = Field(..., min_length=1, max_length=255)
    equipment_type: str = Field(..., min_length=1, max_length=255)


class CertificationIssueSchema(CertificationKeySchema):
    """Schema for issuing or re-issuing a certification."""

    certification_date: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Unix timestamp")
    expiration_date: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Unix timestamp")
    certification_level: int = Field(..., ge=INT64_MIN, le=INT64_MAX)


class CertificationStatusQuerySchema(CertificationKeySchema):
    """Query parameters for a validity check; ``current_time`` defaults to now."""

    current_time: int | None = Field(None, description="Unix timestamp")
