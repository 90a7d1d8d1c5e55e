"""In-memory transaction store.

The store holds validated transaction lines in a pandas DataFrame and answers
monthly-totals queries by delegating to the aggregator. Every query works on a
snapshot; nothing returned by the store aliases its internal frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from sales_insights.exceptions import DataQualityError
from sales_insights.sales.aggregate import DateLike, aggregate_month, aggregate_monthly
from sales_insights.sales.ingest import load_transactions_csv, records_to_frame
from sales_insights.sales.types import (
    AGGREGATION_COLUMNS,
    TRANSACTION_COLUMNS,
    MonthlyTotals,
    TransactionRecord,
)

logger = logging.getLogger(__name__)


class TransactionStore:
    """Append-only store of transaction lines.

    Examples:
        >>> store = TransactionStore.from_csv("data/a_raw/sales/2024.csv")
        >>> totals = store.fetch_monthly_totals("2024-01-01", "2024-06-30")
    """

    def __init__(self, transactions: Optional[pd.DataFrame] = None) -> None:
        self._frame = pd.DataFrame(columns=TRANSACTION_COLUMNS)
        if transactions is not None:
            self.add(transactions)

    @classmethod
    def from_csv(cls, *sources: Union[str, Path]) -> TransactionStore:
        """Build a store from one or more transaction CSV exports."""
        store = cls()
        for source in sources:
            logger.info("Loading transactions from %s", source)
            store.add(load_transactions_csv(source))
        return store

    def __len__(self) -> int:
        return len(self._frame)

    def add(self, transactions: Union[pd.DataFrame, Iterable[TransactionRecord]]) -> int:
        """Append transactions to the store.

        Args:
            transactions: A transaction frame or an iterable of TransactionRecord.

        Returns:
            Number of rows inserted.

        Raises:
            DataQualityError: If the frame lacks the aggregation columns.
        """
        if not isinstance(transactions, pd.DataFrame):
            transactions = records_to_frame(transactions)

        missing_columns = [col for col in AGGREGATION_COLUMNS if col not in transactions.columns]
        if missing_columns:
            raise DataQualityError(f"Missing required columns in transactions: {missing_columns}")

        if transactions.empty:
            return 0

        incoming = transactions.reindex(columns=TRANSACTION_COLUMNS)
        if self._frame.empty:
            self._frame = incoming.reset_index(drop=True)
        else:
            self._frame = pd.concat([self._frame, incoming], ignore_index=True)

        logger.debug(f"Inserted {len(incoming)} transactions ({len(self._frame)} total)")
        return len(incoming)

    def snapshot(self) -> pd.DataFrame:
        """Return a copy of all stored transactions."""
        return self._frame.copy()

    def fetch_monthly_totals(
        self,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
    ) -> list[MonthlyTotals]:
        """Monthly totals for the optional (inclusive) date range, ascending."""
        return aggregate_monthly(self._frame, start_date, end_date)

    def fetch_month_totals(self, year: int, month: int) -> MonthlyTotals:
        """Totals for a single month; zeros when the month has no sales.

        Raises:
            InputError: If month is outside 1-12.
        """
        return aggregate_month(self._frame, year, month)
