"""Yearly roll-up of monthly insights."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from sales_insights.insights.monthly import derive_ratios, growth_pct
from sales_insights.insights.types import YearlyInsight
from sales_insights.sales.types import MonthlyTotals

logger = logging.getLogger(__name__)


def _summarize_year(year: int, months: list[MonthlyTotals]) -> YearlyInsight:
    total_sales = sum(m.total_sales for m in months)
    total_items = sum(m.total_items for m in months)
    total_value = sum(m.total_value for m in months)
    total_cost = sum(m.total_cost for m in months)

    # Stable sort: ties keep chronological order
    ranked = sorted(months, key=lambda m: m.total_value, reverse=True)

    return YearlyInsight(
        year=year,
        total_sales=total_sales,
        total_items=total_items,
        total_value=total_value,
        total_cost=total_cost,
        **derive_ratios(total_sales, total_items, total_value, total_cost),
        best_month=ranked[0].month,
        worst_month=ranked[-1].month,
    )


def compute_yearly_insights(insights: Sequence[MonthlyTotals]) -> list[YearlyInsight]:
    """Roll monthly records up into one YearlyInsight per year.

    Raw fields are summed first and the ratios recomputed from the sums; monthly
    ratios are never averaged. Year-over-year value growth is computed against
    the previous year in ascending order, and only when that year's value is
    strictly positive.

    Args:
        insights: MonthlyInsight (or MonthlyTotals) records.

    Returns:
        YearlyInsight list sorted ascending by year.
    """
    by_year: dict[int, list[MonthlyTotals]] = {}
    for month in insights:
        by_year.setdefault(month.year, []).append(month)

    yearly = sorted(
        (_summarize_year(year, months) for year, months in by_year.items()),
        key=lambda y: y.year,
    )

    for i in range(1, len(yearly)):
        yearly[i] = replace(
            yearly[i],
            value_growth_pct=growth_pct(yearly[i].total_value, yearly[i - 1].total_value),
        )

    logger.debug("Computed insights for %d years", len(yearly))
    return yearly
