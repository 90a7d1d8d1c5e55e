"""Insight record types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, Sequence, Union

import pandas as pd

from sales_insights.sales.types import MonthlyTotals

# Growth fields that are omitted from to_dict() when there is no baseline
_OPTIONAL_FIELDS = ("mom_growth_value_pct", "mom_growth_sales_pct", "value_growth_pct")


def _without_absent(record: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.items()
        if not (key in _OPTIONAL_FIELDS and value is None)
    }


@dataclass(frozen=True)
class MonthlyInsight(MonthlyTotals):
    """MonthlyTotals enriched with ratios and month-over-month growth.

    The growth fields are None when there is no comparable baseline (first
    month, or a previous month with a zero base). None means "no baseline";
    0.0 means "no growth".
    """

    avg_ticket: float = 0.0
    avg_item_cost: float = 0.0
    gross_profit: float = 0.0
    gross_margin_pct: float = 0.0
    mom_growth_value_pct: Optional[float] = None
    mom_growth_sales_pct: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_absent(asdict(self))


@dataclass(frozen=True)
class YearlyInsight:
    """Yearly roll-up of monthly insights.

    Attributes:
        year: Calendar year.
        total_sales, total_items, total_value, total_cost: Sums over the year's months.
        avg_ticket, avg_item_cost, gross_profit, gross_margin_pct: Recomputed
            from the yearly sums.
        best_month: Month number with the highest total_value.
        worst_month: Month number with the lowest total_value.
        value_growth_pct: Growth of total_value against the previous year, or
            None for the first year or a previous year with zero value.
    """

    year: int
    total_sales: int
    total_items: float
    total_value: float
    total_cost: float
    avg_ticket: float
    avg_item_cost: float
    gross_profit: float
    gross_margin_pct: float
    best_month: Optional[int] = None
    worst_month: Optional[int] = None
    value_growth_pct: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return _without_absent(asdict(self))


def insights_to_frame(
    insights: Sequence[Union[MonthlyTotals, YearlyInsight]],
) -> pd.DataFrame:
    """Convert insight records to a DataFrame, one row per record.

    Absent growth values become missing values (NaN or None).
    """
    rows = [asdict(insight) for insight in insights]
    return pd.DataFrame(rows)
