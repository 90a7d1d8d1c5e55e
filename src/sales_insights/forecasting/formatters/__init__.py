"""Output formatters for insights and forecasts."""

from sales_insights.forecasting.formatters.console import (
    format_forecast_for_console,
    format_insights_for_console,
)

__all__ = ["format_forecast_for_console", "format_insights_for_console"]
