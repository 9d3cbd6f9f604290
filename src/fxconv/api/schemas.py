"""
FXCONV API Response Schemas
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class RateResponse(BaseModel):
    """Response schema for /api/v1/rates/{code}"""
    currency: str = Field(description="Currency code")
    rate: float = Field(description="Rate relative to the base currency")


class RateTableResponse(BaseModel):
    """Response schema for /api/v1/rates"""
    rates: dict[str, float] = Field(
        description="Currency code -> rate relative to the base currency"
    )
    using_defaults: bool = Field(
        description="True when the built-in default table is in use"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "rates": {"EUR": 0.85, "UGX": 3700.0, "USD": 1.0},
                "using_defaults": True
            }
        }
    }


class HealthResponse(BaseModel):
    """Health check response for /api/v1/health"""
    status: str = Field(description="Service health status")
    version: str = Field(description="API version")
    provider: str = Field(description="Name of the rate provider in use")
    currencies: int = Field(description="Number of currencies in the rate table")


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(description="Error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(description="Error timestamp")


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "INVALID_CURRENCY",
                    "message": "Invalid currency code.",
                    "details": {"currencies": ["XYZ"]},
                    "timestamp": "2026-01-15T15:30:00Z"
                }
            }
        }
    }
