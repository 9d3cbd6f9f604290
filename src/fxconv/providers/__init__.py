"""
FXCONV Rate Providers Module
"""

from fxconv.providers.base import BaseRateProvider
from fxconv.providers.table import TableRateProvider

__all__ = [
    "BaseRateProvider",
    "TableRateProvider",
]
