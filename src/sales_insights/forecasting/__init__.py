"""Monthly forecasting module.

This module projects a monthly metric forward with three methods side by side:
linear regression, a recursive 3-month moving average and Holt-Winters
triple exponential smoothing.

Example:
    >>> from sales_insights.forecasting import ForecastConfig, forecast, run_forecast
    >>>
    >>> # Raw series
    >>> forecast([10, 20, 30, 40], 2)
    {'linear': [50.0, 60.0], 'moving_average': [30.0, 33.33...], 'holt_winters': [...]}
    >>>
    >>> # From monthly insights
    >>> response = run_forecast(monthly, ForecastConfig(metric="total_value", periods=6))
    >>> chart = build_forecast_chart(response)
    >>> print(chart.to_frame())
"""

from sales_insights.forecasting.api import (
    ForecastConfig,
    forecast,
    run_forecast,
    season_length_for,
    validate_horizon,
)
from sales_insights.forecasting.chart import build_forecast_chart
from sales_insights.forecasting.types import (
    ChartPoint,
    ForecastChart,
    ForecastResponse,
    ForecastResult,
)

__all__ = [
    "ChartPoint",
    "ForecastChart",
    "ForecastConfig",
    "ForecastResponse",
    "ForecastResult",
    "build_forecast_chart",
    "forecast",
    "run_forecast",
    "season_length_for",
    "validate_horizon",
]
