#!/usr/bin/env python
"""
FXCONV demonstration run

Exercises the four reference scenarios against an in-memory rate table:
  1. valid conversion           USD -> EUR, 100
  2. invalid amount             USD -> EUR, -50
  3. invalid currency code      USD -> XYZ, 100
  4. default rate table         USD -> UGX, 1

Usage:
    python scripts/demo.py
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fxconv.computation import ConversionError, CurrencyConverter  # noqa: E402
from fxconv.providers import TableRateProvider  # noqa: E402
from fxconv.transactions import TransactionLogger  # noqa: E402

EXTERNAL_RATES = {
    "USD": 1.0,
    "EUR": 0.85,
    "UGX": 3800.0,
}


def run_scenario(
    title: str,
    build_converter: Callable[[], CurrencyConverter],
    from_currency: str,
    to_currency: str,
    amount: float
) -> None:
    """Print the title, then build the converter and run one conversion."""
    print(title)
    converter = build_converter()
    try:
        result = converter.convert(from_currency, to_currency, amount)
        print(f"Converted Amount: {result:.2f} {to_currency}")
    except ConversionError as e:
        print(f"Error: {e}")


def run_demo() -> None:
    transaction_logger = TransactionLogger()
    converter = CurrencyConverter(TableRateProvider(EXTERNAL_RATES), transaction_logger)

    run_scenario("Test 1: Valid Transaction", lambda: converter, "USD", "EUR", 100)
    run_scenario("\nTest 2: Invalid Amount", lambda: converter, "USD", "EUR", -50)
    run_scenario("\nTest 3: Invalid Currency Code", lambda: converter, "USD", "XYZ", 100)

    # Default table is built after the header so its warning lands under it
    run_scenario(
        "\nTest 4: Default Rates",
        lambda: CurrencyConverter(TableRateProvider(None), transaction_logger),
        "USD", "UGX", 1
    )


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    run_demo()


if __name__ == "__main__":
    main()
