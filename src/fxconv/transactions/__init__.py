"""
FXCONV Transaction Logging Module
"""

from fxconv.transactions.logger import (
    TRANSACTION_LOGGER_NAME,
    TransactionLogger,
    TransactionObserver,
)

__all__ = [
    "TRANSACTION_LOGGER_NAME",
    "TransactionLogger",
    "TransactionObserver",
]
