"""Sales domain module.

This module turns transaction lines into monthly totals:

- **ingest**: CSV export -> validated transaction frame (one row per sale line)
- **store**: in-memory TransactionStore answering monthly-totals queries
- **aggregate**: transaction frame -> MonthlyTotals, one per calendar month

Example:
    >>> from sales_insights.sales import TransactionStore
    >>>
    >>> store = TransactionStore.from_csv("data/a_raw/sales/2024.csv")
    >>> totals = store.fetch_monthly_totals()
    >>> march = store.fetch_month_totals(2024, 3)
"""

from sales_insights.sales.aggregate import aggregate_month, aggregate_monthly, validate_month
from sales_insights.sales.ingest import frame_to_records, load_transactions_csv, records_to_frame
from sales_insights.sales.store import TransactionStore
from sales_insights.sales.types import MonthlyTotals, TransactionRecord

__all__ = [
    "MonthlyTotals",
    "TransactionRecord",
    "TransactionStore",
    "aggregate_month",
    "aggregate_monthly",
    "frame_to_records",
    "load_transactions_csv",
    "records_to_frame",
    "validate_month",
]
