"""
FXCONV API Module
"""

from fxconv.api.routes import get_converter, router
from fxconv.api.schemas import (
    ErrorResponse,
    HealthResponse,
    RateResponse,
    RateTableResponse,
)

__all__ = [
    "router",
    "get_converter",
    "ErrorResponse",
    "HealthResponse",
    "RateResponse",
    "RateTableResponse",
]
