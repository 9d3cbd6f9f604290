"""
Conversion Calculator - cross-currency arithmetic

Rates are units of a currency per one unit of the base currency, so dividing
by the source rate normalizes to the base and multiplying by the destination
rate lands in the destination currency. No rounding is applied here.
"""


class ConversionCalculator:
    """
    Pure arithmetic for rate-table conversions.

    converted = (amount / from_rate) * to_rate
    cross     = to_rate / from_rate
    """

    def compute_converted_amount(
        self,
        amount: float,
        from_rate: float,
        to_rate: float
    ) -> float:
        """
        Convert an amount between two currencies via the base currency.

        Args:
            amount: Amount in the source currency
            from_rate: Source currency rate (must be > 0)
            to_rate: Destination currency rate (must be > 0)

        Returns:
            Unrounded amount in the destination currency.
        """
        return (amount / from_rate) * to_rate

    def compute_cross_rate(self, from_rate: float, to_rate: float) -> float:
        """
        Compute the direct multiplier between two currencies.

        Computed on its own rather than derived from a converted amount, so it
        may differ from ``converted / amount`` in the last bit.
        """
        return to_rate / from_rate
