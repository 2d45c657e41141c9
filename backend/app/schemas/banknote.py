"""
Banknote Verifier Backend — Pydantic Request/Response Schemas
==============================================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       responses through them. Field names are snake_case in Python and
       camelCase on the wire (`serial_number` ↔ `serialNumber`).

Schemas are separate from SQLAlchemy models so the wire format can keep the
frontend's camelCase keys while the tables use snake_case columns.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: camelCase aliases on the wire, snake_case attributes in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Reference Data
# ══════════════════════════════════════════════════════════════════════════


class CountryResponse(CamelModel):
    """Returned by GET /api/countries."""
    id: int
    code: str = Field(description="Short country code, e.g. US, UK, EU")
    name: str
    currency: str = Field(description="ISO 4217 currency code")
    currency_symbol: str


class DenominationResponse(CamelModel):
    """Returned by GET /api/countries/{code}/denominations."""
    id: int
    country_id: int
    value: str = Field(description="Face value used as the lookup key in verify requests")
    display_name: str
    serial_format: str = Field(description="Anchored regular expression the serial must match")
    serial_length: int = Field(description="Exact number of characters expected")
    pattern_description: str
    is_active: bool


# ══════════════════════════════════════════════════════════════════════════
# Verification
# ══════════════════════════════════════════════════════════════════════════


class VerifyRequest(CamelModel):
    """
    Body of POST /api/verify.

    Length limits are enforced here, so an oversize serial is rejected with
    400 before the handler (and any database lookup) runs.
    """
    country_code: str = Field(min_length=2, max_length=3, description="Country code, e.g. US")
    denomination: str = Field(min_length=1, description="Face value, e.g. 20")
    serial_number: str = Field(min_length=1, max_length=20, description="Serial as printed on the note")


class VerifyResponse(CamelModel):
    """Combined result of lookup, structural check and log write."""
    country: str = Field(description="Country name")
    country_code: str
    currency: str
    denomination: str = Field(description="Denomination display name, e.g. $20")
    serial_number: str
    format_valid: bool
    length_valid: bool
    is_authentic: bool = Field(description="format_valid AND length_valid")
    pattern_description: str
    timestamp: datetime = Field(description="Response time (UTC ISO 8601)")


class StatsResponse(CamelModel):
    """Aggregates over the whole verification log."""
    total_verified: int
    authentic: int
    suspicious: int
    success_rate: float = Field(description="Percentage authentic, one decimal; 0 when empty")


# ══════════════════════════════════════════════════════════════════════════
# Error & Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Invalid request data",
            "details": {"errors": [{"field": "serialNumber", "message": "..."}]},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class FieldError(BaseModel):
    field: str
    message: str
    type: str


class HealthResponse(CamelModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float


CountryList = List[CountryResponse]
DenominationList = List[DenominationResponse]
