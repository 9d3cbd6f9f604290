"""
FXCONV Computation Module
"""

from fxconv.computation.calculator import ConversionCalculator
from fxconv.computation.converter import CurrencyConverter
from fxconv.computation.errors import (
    ConversionError,
    InvalidAmountError,
    InvalidCurrencyError,
)

__all__ = [
    "ConversionCalculator",
    "CurrencyConverter",
    "ConversionError",
    "InvalidAmountError",
    "InvalidCurrencyError",
]
