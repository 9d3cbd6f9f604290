"""
Currency Converter - validate, compute, log

Every call is one validate -> compute -> log sequence. Validation failures
raise before anything is logged; a successful conversion is logged exactly
once.
"""

import logging

from fxconv.computation.calculator import ConversionCalculator
from fxconv.computation.errors import InvalidAmountError, InvalidCurrencyError
from fxconv.models import ConversionResult
from fxconv.providers.base import BaseRateProvider
from fxconv.transactions import TransactionObserver

logger = logging.getLogger(__name__)


class CurrencyConverter:
    """
    Converts amounts between currencies using an injected rate provider.

    Collaborators are fixed at construction; the converter keeps no other
    state between calls.
    """

    def __init__(
        self,
        rate_provider: BaseRateProvider,
        transaction_logger: TransactionObserver
    ):
        self.rate_provider = rate_provider
        self.transaction_logger = transaction_logger
        self.calculator = ConversionCalculator()

    def convert(
        self,
        from_currency: str,
        to_currency: str,
        amount: float
    ) -> float:
        """
        Convert ``amount`` from one currency to another.

        Args:
            from_currency: Source currency code
            to_currency: Destination currency code
            amount: Amount in the source currency

        Returns:
            Converted amount, unrounded.

        Raises:
            InvalidAmountError: If amount is not positive
            InvalidCurrencyError: If either code resolves to a non-positive rate
        """
        return self.convert_detailed(from_currency, to_currency, amount).converted_amount

    def convert_detailed(
        self,
        from_currency: str,
        to_currency: str,
        amount: float
    ) -> ConversionResult:
        """Same as ``convert`` but returns the cross rate alongside the amount."""
        if not amount > 0:
            logger.debug(f"Rejected amount {amount} for {from_currency} -> {to_currency}")
            raise InvalidAmountError(amount)

        from_rate = self.rate_provider.get_rate(from_currency)
        to_rate = self.rate_provider.get_rate(to_currency)

        # Unknown codes come back as -1.0, so one check covers both cases
        invalid = [
            code for code, rate in ((from_currency, from_rate), (to_currency, to_rate))
            if not rate > 0
        ]
        if invalid:
            logger.debug(f"Rejected currency codes: {invalid}")
            raise InvalidCurrencyError(invalid)

        converted_amount = self.calculator.compute_converted_amount(
            amount, from_rate, to_rate
        )
        cross_rate = self.calculator.compute_cross_rate(from_rate, to_rate)

        self.transaction_logger.log(from_currency, to_currency, amount, cross_rate)

        return ConversionResult(
            from_currency=from_currency,
            to_currency=to_currency,
            amount=amount,
            converted_amount=converted_amount,
            rate=cross_rate
        )
