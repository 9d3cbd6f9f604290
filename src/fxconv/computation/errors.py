"""
Conversion Errors

Both error kinds are raised synchronously and never retried. They subclass
ValueError.
"""

from typing import Any

from fxconv.models import ConversionErrorType


class ConversionError(ValueError):
    """Base exception for conversion errors."""

    def __init__(
        self,
        message: str,
        error_type: ConversionErrorType,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}


class InvalidAmountError(ConversionError):
    """Amount was zero or negative."""

    MESSAGE = "Amount must be positive."

    def __init__(self, amount: float):
        super().__init__(
            message=self.MESSAGE,
            error_type=ConversionErrorType.INVALID_AMOUNT,
            details={"amount": amount}
        )


class InvalidCurrencyError(ConversionError):
    """
    A currency resolved to a non-positive rate.

    Covers both unknown codes (the -1.0 sentinel) and codes stored with a
    non-positive rate; callers cannot tell the two apart.
    """

    MESSAGE = "Invalid currency code."

    def __init__(self, currencies: list[str]):
        super().__init__(
            message=self.MESSAGE,
            error_type=ConversionErrorType.INVALID_CURRENCY,
            details={"currencies": currencies}
        )
