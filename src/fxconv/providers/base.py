"""
Base Rate Provider Interface

Rates are floats relative to a shared base currency. Lookups for unknown
codes return NOT_FOUND_RATE instead of raising.
"""

from abc import ABC, abstractmethod

from fxconv.models import RateTable


class BaseRateProvider(ABC):
    """
    Abstract base class for exchange rate providers.

    Implementations MUST NOT raise for unknown currency codes; they return
    the ``NOT_FOUND_RATE`` sentinel instead.
    """

    PROVIDER_NAME: str = "base"

    @property
    @abstractmethod
    def rates(self) -> RateTable:
        """Read-only view of every rate the provider serves."""
        pass

    @property
    @abstractmethod
    def using_defaults(self) -> bool:
        """True when the built-in default table is in use."""
        pass

    @abstractmethod
    def get_rate(self, currency: str) -> float:
        """
        Look up the rate for a currency code.

        Args:
            currency: Currency code, matched exactly (e.g. "USD")

        Returns:
            Stored rate, or -1.0 when the code is unknown.
        """
        pass

    def currencies(self) -> tuple[str, ...]:
        """Known currency codes, sorted."""
        return tuple(sorted(self.rates))
