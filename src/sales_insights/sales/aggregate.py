"""Monthly aggregation of transaction records.

This module reduces the transaction frame (one row per sale line) into one
MonthlyTotals record per calendar month. It is a pure read-and-reduce: the
input frame is never modified.
"""

from __future__ import annotations

import logging
from datetime import date
from numbers import Integral
from typing import Optional, Union

import pandas as pd

from sales_insights.exceptions import DataQualityError, InputError
from sales_insights.sales.types import AGGREGATION_COLUMNS, MonthlyTotals

logger = logging.getLogger(__name__)

DateLike = Union[str, date, pd.Timestamp]


def validate_month(year: int, month: int) -> None:
    """Reject an invalid (year, month) filter.

    Raises:
        InputError: If year or month is not an integer, or month is outside 1-12.
    """
    for name, value in (("year", year), ("month", month)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InputError(f"Invalid {name}: {value!r}")
    if month < 1 or month > 12:
        raise InputError(f"Invalid month: {month}. Must be between 1 and 12.")


def _parse_date(value: DateLike, name: str) -> pd.Timestamp:
    try:
        parsed = pd.to_datetime(value)
    except (ValueError, TypeError) as e:
        raise InputError(f"Invalid {name}: {value!r}") from e
    if pd.isna(parsed):
        raise InputError(f"Invalid {name}: {value!r}")
    return parsed.normalize()


def _prepare(transactions: pd.DataFrame) -> pd.DataFrame:
    """Select and coerce the columns needed for aggregation.

    Raises:
        DataQualityError: If columns are missing or dates/amounts are malformed.
    """
    missing_columns = [col for col in AGGREGATION_COLUMNS if col not in transactions.columns]
    if missing_columns:
        raise DataQualityError(
            f"Missing required columns in transactions: {missing_columns}. "
            f"Required: {AGGREGATION_COLUMNS}"
        )

    df = transactions.loc[:, AGGREGATION_COLUMNS].copy()

    try:
        df["date"] = pd.to_datetime(df["date"])
        df["quantity"] = pd.to_numeric(df["quantity"])
        df["value"] = pd.to_numeric(df["value"])
    except (ValueError, TypeError) as e:
        raise DataQualityError(f"Malformed transaction data: {e}") from e

    if df["date"].isna().any():
        raise DataQualityError(f"{int(df['date'].isna().sum())} transaction(s) without a date")

    # Cost is optional upstream; anything unparsable counts as missing
    df["cost"] = pd.to_numeric(df["cost"], errors="coerce")
    return df


def aggregate_monthly(
    transactions: pd.DataFrame,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
) -> list[MonthlyTotals]:
    """Aggregate transactions into one MonthlyTotals per calendar month.

    Only months with at least one transaction in the range are returned. Missing
    costs are summed as zero.

    Args:
        transactions: Transaction frame with at least 'date', 'quantity',
            'value' and 'cost' columns.
        start_date: Optional first date to include (inclusive).
        end_date: Optional last date to include (inclusive).

    Returns:
        MonthlyTotals sorted ascending by (year, month), unique per key.

    Raises:
        InputError: If a range bound is not a valid date or start is after end.
        DataQualityError: If the frame is missing columns or has malformed values.

    Examples:
        >>> totals = aggregate_monthly(df, "2024-01-01", "2024-12-31")
        >>> [(t.year, t.month) for t in totals][:2]
        [(2024, 1), (2024, 2)]
    """
    start = _parse_date(start_date, "start_date") if start_date is not None else None
    end = _parse_date(end_date, "end_date") if end_date is not None else None
    if start is not None and end is not None and start > end:
        raise InputError(f"start_date {start.date()} is after end_date {end.date()}")

    df = _prepare(transactions)

    day = df["date"].dt.normalize()
    in_range = pd.Series(True, index=df.index)
    if start is not None:
        in_range &= day >= start
    if end is not None:
        in_range &= day <= end
    df = df[in_range]

    if df.empty:
        logger.info("No transactions in range %s to %s", start_date, end_date)
        return []

    df = df.assign(year=df["date"].dt.year, month=df["date"].dt.month)
    grouped = df.groupby(["year", "month"], sort=True).agg(
        total_sales=("date", "size"),
        total_items=("quantity", "sum"),
        total_value=("value", "sum"),
        total_cost=("cost", "sum"),
    )

    totals = [
        MonthlyTotals(
            year=int(year),
            month=int(month),
            total_sales=int(row["total_sales"]),
            total_items=float(row["total_items"]),
            total_value=float(row["total_value"]),
            total_cost=float(row["total_cost"]),
        )
        for (year, month), row in grouped.iterrows()
    ]

    logger.info(f"Aggregated {len(df)} transactions into {len(totals)} months")
    return totals


def aggregate_month(transactions: pd.DataFrame, year: int, month: int) -> MonthlyTotals:
    """Aggregate transactions for a single calendar month.

    A month without transactions yields a record of zeros.

    Raises:
        InputError: If the (year, month) filter is invalid. Checked before the
            frame is read.
    """
    validate_month(year, month)

    df = _prepare(transactions)
    in_month = df[(df["date"].dt.year == year) & (df["date"].dt.month == month)]

    return MonthlyTotals(
        year=int(year),
        month=int(month),
        total_sales=int(len(in_month)),
        total_items=float(in_month["quantity"].sum()),
        total_value=float(in_month["value"].sum()),
        total_cost=float(in_month["cost"].sum()),
    )
