"""
Transaction Logger

Records every successful conversion as one human-readable line:

    Transaction Log - USD -> EUR | Amount: 100.00 | Rate: 0.85 | Time: 2026-01-15T10:30:00.123456
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from fxconv.models import TransactionRecord

TRANSACTION_LOGGER_NAME = "fxconv.transactions"

logger = logging.getLogger(TRANSACTION_LOGGER_NAME)


class TransactionObserver(Protocol):
    """Anything the converter can notify after a successful conversion."""

    def log(
        self,
        from_currency: str,
        to_currency: str,
        amount: float,
        rate: float
    ) -> None: ...


class TransactionLogger:
    """
    Writes transaction lines through the ``fxconv.transactions`` logger.

    The clock is injectable so tests can pin the timestamp.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def log(
        self,
        from_currency: str,
        to_currency: str,
        amount: float,
        rate: float
    ) -> TransactionRecord:
        record = TransactionRecord(
            from_currency=from_currency,
            to_currency=to_currency,
            amount=amount,
            rate=rate,
            timestamp=self.clock()
        )
        logger.info(record.format_line())
        return record
