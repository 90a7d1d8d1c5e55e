"""Monthly insight derivation.

Turns the ascending MonthlyTotals sequence into MonthlyInsight records: average
ticket, average item cost, gross profit and margin, and month-over-month growth
of value and sales count.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sales_insights.exceptions import InputError
from sales_insights.insights.types import MonthlyInsight
from sales_insights.sales.types import MonthlyTotals

logger = logging.getLogger(__name__)


def derive_ratios(
    total_sales: float,
    total_items: float,
    total_value: float,
    total_cost: float,
) -> dict[str, float]:
    """Compute ticket, item cost, profit and margin from raw totals.

    Ratios over a zero denominator are 0. Average item cost is also 0 when no
    cost was recorded, since cost is optional in the source data.
    """
    avg_ticket = total_value / total_sales if total_sales > 0 else 0.0
    avg_item_cost = total_cost / total_items if total_items > 0 and total_cost > 0 else 0.0
    gross_profit = total_value - total_cost
    gross_margin_pct = gross_profit / total_value * 100 if total_value > 0 else 0.0

    return {
        "avg_ticket": avg_ticket,
        "avg_item_cost": avg_item_cost,
        "gross_profit": gross_profit,
        "gross_margin_pct": gross_margin_pct,
    }


def growth_pct(current: float, previous: Optional[float]) -> Optional[float]:
    """Percentage growth against a strictly positive baseline, else None."""
    if previous is None or previous <= 0:
        return None
    return (current - previous) / previous * 100


def check_monthly_order(totals: Sequence[MonthlyTotals]) -> None:
    """Ensure totals are strictly ascending by (year, month).

    Raises:
        InputError: On a duplicate or out-of-order month.
    """
    for prev, curr in zip(totals, totals[1:]):
        if (curr.year, curr.month) <= (prev.year, prev.month):
            raise InputError(
                f"Monthly totals must be strictly ascending by (year, month); "
                f"got {prev.year}-{prev.month:02d} followed by {curr.year}-{curr.month:02d}"
            )


def compute_monthly_insights(totals: Sequence[MonthlyTotals]) -> list[MonthlyInsight]:
    """Derive one MonthlyInsight per MonthlyTotals, preserving order.

    Args:
        totals: Monthly totals sorted ascending by (year, month), no duplicates.

    Returns:
        MonthlyInsight list of the same length and order.

    Raises:
        InputError: If totals are not strictly ascending.

    Examples:
        >>> insights = compute_monthly_insights(store.fetch_monthly_totals())
        >>> insights[0].mom_growth_value_pct is None
        True
    """
    check_monthly_order(totals)

    insights = []
    prev: Optional[MonthlyTotals] = None
    for current in totals:
        insights.append(
            MonthlyInsight(
                year=current.year,
                month=current.month,
                total_sales=current.total_sales,
                total_items=current.total_items,
                total_value=current.total_value,
                total_cost=current.total_cost,
                **derive_ratios(
                    current.total_sales,
                    current.total_items,
                    current.total_value,
                    current.total_cost,
                ),
                mom_growth_value_pct=growth_pct(
                    current.total_value, prev.total_value if prev is not None else None
                ),
                mom_growth_sales_pct=growth_pct(
                    current.total_sales, prev.total_sales if prev is not None else None
                ),
            )
        )
        prev = current

    logger.debug("Computed insights for %d months", len(insights))
    return insights
