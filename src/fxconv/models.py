"""
FXCONV Data Models

Rates are plain floats expressed as units of a currency per one unit of the
shared base currency. Nothing here is persisted: requests, results and
transaction records live for the duration of one conversion.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field


# === Rate Table ===

RateTable = Mapping[str, float]

# Built-in fallback table, used when no rates are supplied
DEFAULT_RATES: RateTable = MappingProxyType({
    "USD": 1.0,
    "EUR": 0.85,
    "UGX": 3700.0,
})

# Returned by rate lookups for unknown currency codes
NOT_FOUND_RATE: float = -1.0


# === Enums ===

class ConversionErrorType(str, Enum):
    """Error kinds surfaced by the converter."""
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_CURRENCY = "INVALID_CURRENCY"


# === Conversion ===

class ConversionRequest(BaseModel):
    """
    A single conversion request.

    Amount is not constrained here; the converter rejects non-positive
    amounts.
    """
    from_currency: str = Field(description="Source currency code, e.g. USD")
    to_currency: str = Field(description="Destination currency code, e.g. EUR")
    amount: float = Field(description="Amount in the source currency")

    model_config = {
        "json_schema_extra": {
            "example": {
                "from_currency": "USD",
                "to_currency": "EUR",
                "amount": 100.0
            }
        }
    }


class ConversionResult(BaseModel):
    """Outcome of a successful conversion."""
    from_currency: str
    to_currency: str
    amount: float = Field(description="Amount in the source currency")
    converted_amount: float = Field(
        description="Amount in the destination currency, unrounded"
    )
    rate: float = Field(
        description="Cross rate (destination rate / source rate)"
    )

    model_config = {"frozen": True}


# === Transaction Log ===

class TransactionRecord(BaseModel):
    """One logged conversion."""
    from_currency: str
    to_currency: str
    amount: float
    rate: float
    timestamp: datetime

    model_config = {"frozen": True}

    def format_line(self) -> str:
        """Render the human-readable transaction log line."""
        return (
            f"Transaction Log - {self.from_currency} -> {self.to_currency} | "
            f"Amount: {self.amount:.2f} | Rate: {self.rate:.2f} | "
            f"Time: {self.timestamp.isoformat()}"
        )
