"""
FXCONV API Routes

API base URL: /api/v1/
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from fxconv import __version__
from fxconv.api.schemas import (
    ErrorResponse,
    HealthResponse,
    RateResponse,
    RateTableResponse,
)
from fxconv.computation import ConversionError, CurrencyConverter
from fxconv.config import get_settings
from fxconv.models import ConversionRequest, ConversionResult
from fxconv.providers import TableRateProvider
from fxconv.transactions import TransactionLogger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["FXCONV"])


@lru_cache
def get_converter() -> CurrencyConverter:
    """Build the process-wide converter from settings."""
    settings = get_settings()
    provider = TableRateProvider(settings.exchange_rates)
    return CurrencyConverter(provider, TransactionLogger())


def _error(
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        }
    )


@router.post(
    "/convert",
    response_model=ConversionResult,
    summary="Convert an amount between currencies",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid amount or currency"},
    }
)
def convert(
    request: ConversionRequest,
    converter: CurrencyConverter = Depends(get_converter)
) -> ConversionResult:
    """
    POST /api/v1/convert endpoint.

    Every successful call produces exactly one transaction log line.
    """
    try:
        return converter.convert_detailed(
            request.from_currency,
            request.to_currency,
            request.amount
        )
    except ConversionError as e:
        logger.info(f"Conversion rejected: {e.error_type.value} ({e})")
        raise _error(
            status.HTTP_400_BAD_REQUEST,
            e.error_type.value,
            e.message,
            e.details
        ) from e


@router.get(
    "/rates",
    response_model=RateTableResponse,
    summary="List the configured rate table"
)
def get_rates(
    converter: CurrencyConverter = Depends(get_converter)
) -> RateTableResponse:
    provider = converter.rate_provider
    return RateTableResponse(
        rates={code: provider.rates[code] for code in provider.currencies()},
        using_defaults=provider.using_defaults
    )


@router.get(
    "/rates/{code}",
    response_model=RateResponse,
    summary="Get the rate for one currency",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown currency"},
    }
)
def get_rate(
    code: str,
    converter: CurrencyConverter = Depends(get_converter)
) -> RateResponse:
    """
    GET /api/v1/rates/{code} endpoint.

    Codes are matched exactly; a non-positive stored rate is reported the
    same way as an unknown code.
    """
    rate = converter.rate_provider.get_rate(code)
    if not rate > 0:
        raise _error(
            status.HTTP_404_NOT_FOUND,
            "CURRENCY_NOT_FOUND",
            f"No usable rate for currency {code}",
            {"requested_currency": code}
        )
    return RateResponse(currency=code, rate=rate)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Health check for load balancers and monitoring"
)
def health_check(
    converter: CurrencyConverter = Depends(get_converter)
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        provider=converter.rate_provider.PROVIDER_NAME,
        currencies=len(converter.rate_provider.currencies())
    )
