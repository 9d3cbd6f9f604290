"""
Table Rate Provider

Serves rates from a fixed in-memory table supplied at construction, falling
back to the built-in DEFAULT_RATES when nothing is supplied. No external rate
source is ever contacted.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from fxconv.models import DEFAULT_RATES, NOT_FOUND_RATE, RateTable
from fxconv.providers.base import BaseRateProvider

logger = logging.getLogger(__name__)


class TableRateProvider(BaseRateProvider):
    """
    Rate provider backed by an immutable lookup table.

    A non-empty table is stored as given, values unvalidated, so a
    non-positive rate surfaces later as an invalid currency. The table is
    copied on the way in; mutating the caller's mapping afterwards has no
    effect on lookups.
    """

    PROVIDER_NAME = "table"

    def __init__(self, rates: Mapping[str, float] | None = None):
        """
        Initialize provider.

        Args:
            rates: Currency code -> rate. None or empty selects DEFAULT_RATES.
        """
        if not rates:
            self._rates: RateTable = DEFAULT_RATES
            self._using_defaults = True
            logger.warning("Warning: Using default exchange rates.")
        else:
            self._rates = MappingProxyType(dict(rates))
            self._using_defaults = False
            logger.debug(
                f"{self.PROVIDER_NAME} provider loaded {len(self._rates)} currencies"
            )

    @property
    def rates(self) -> RateTable:
        """Read-only view of the rate table."""
        return self._rates

    @property
    def using_defaults(self) -> bool:
        return self._using_defaults

    def get_rate(self, currency: str) -> float:
        return self._rates.get(currency, NOT_FOUND_RATE)
