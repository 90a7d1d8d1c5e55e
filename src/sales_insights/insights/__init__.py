"""Insight derivation module.

Example:
    >>> from sales_insights.insights import compute_monthly_insights, compute_yearly_insights
    >>>
    >>> monthly = compute_monthly_insights(store.fetch_monthly_totals())
    >>> yearly = compute_yearly_insights(monthly)
    >>> yearly[-1].value_growth_pct
    12.5
"""

from sales_insights.insights.monthly import compute_monthly_insights, derive_ratios, growth_pct
from sales_insights.insights.types import MonthlyInsight, YearlyInsight, insights_to_frame
from sales_insights.insights.yearly import compute_yearly_insights

__all__ = [
    "MonthlyInsight",
    "YearlyInsight",
    "compute_monthly_insights",
    "compute_yearly_insights",
    "derive_ratios",
    "growth_pct",
    "insights_to_frame",
]
