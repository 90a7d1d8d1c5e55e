"""Public service API.

Query functions that read monthly totals from a TransactionStore and run the
insight and forecasting computations on them. Every call reads a fresh
snapshot; nothing is cached between calls.
"""

from __future__ import annotations

from typing import Optional

from sales_insights.forecasting.api import ForecastConfig, run_forecast, validate_horizon
from sales_insights.forecasting.chart import build_forecast_chart
from sales_insights.forecasting.config import DEFAULT_PERIODS
from sales_insights.forecasting.types import ForecastChart, ForecastResponse
from sales_insights.insights.monthly import compute_monthly_insights
from sales_insights.insights.types import MonthlyInsight, YearlyInsight
from sales_insights.insights.yearly import compute_yearly_insights
from sales_insights.sales.aggregate import DateLike, validate_month
from sales_insights.sales.store import TransactionStore
from sales_insights.sales.types import MonthlyTotals


def get_month_totals(store: TransactionStore, year: int, month: int) -> MonthlyTotals:
    """Totals for one calendar month.

    Raises:
        InputError: If month is outside 1-12. Checked before the store is queried.
    """
    validate_month(year, month)
    return store.fetch_month_totals(year, month)


def get_monthly_totals(
    store: TransactionStore,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
) -> list[MonthlyTotals]:
    """Totals for every month with sales in the optional date range."""
    return store.fetch_monthly_totals(start_date, end_date)


def get_monthly_insights(store: TransactionStore) -> list[MonthlyInsight]:
    """Monthly insights (ticket, margin, month-over-month growth) for all months."""
    return compute_monthly_insights(store.fetch_monthly_totals())


def get_yearly_insights(store: TransactionStore) -> list[YearlyInsight]:
    """Yearly insights (sums, ratios, best/worst month, year-over-year growth)."""
    return compute_yearly_insights(get_monthly_insights(store))


def predict(
    store: TransactionStore,
    metric: str = "total_value",
    periods: int = DEFAULT_PERIODS,
) -> ForecastResponse:
    """Forecast a monthly metric with every method.

    Args:
        store: Transaction store.
        metric: "total_value" or "total_sales".
        periods: Months ahead to forecast, 1 to 24.

    Returns:
        ForecastResponse.

    Raises:
        InputError: If the horizon is invalid (checked before the store is
            queried), the metric is unknown, or there are fewer than 3 months.

    Examples:
        >>> response = predict(store, "total_value", 6)
        >>> response.by_method()["linear"]
        (1520.0, 1580.0, ...)
    """
    validate_horizon(periods)
    monthly = get_monthly_insights(store)
    return run_forecast(monthly, ForecastConfig(metric=metric, periods=periods))


def predict_chart(
    store: TransactionStore,
    metric: str = "total_value",
    periods: int = DEFAULT_PERIODS,
) -> ForecastChart:
    """Forecast a monthly metric and reshape it into chart rows."""
    return build_forecast_chart(predict(store, metric, periods))
