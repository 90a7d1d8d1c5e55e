"""Row-oriented chart view of a forecast response."""

from __future__ import annotations

from sales_insights.forecasting.config import CURRENT_LABEL
from sales_insights.forecasting.types import ChartPoint, ForecastChart, ForecastResponse


def build_forecast_chart(response: ForecastResponse) -> ForecastChart:
    """Reshape a ForecastResponse into one row per forecast step.

    The first row is labelled "current" and carries only the number of
    historical points. Rows "M+1" .. "M+periods" follow, each with the value of
    every method at that step, or None where a method has no value.

    Examples:
        >>> chart = build_forecast_chart(response)
        >>> [point.label for point in chart.data]
        ['current', 'M+1', 'M+2', 'M+3']
    """
    by_method = response.by_method()

    data = [ChartPoint(label=CURRENT_LABEL, base=response.base_points)]
    for step in range(response.periods):
        step_values = {
            method: values[step] if step < len(values) else None
            for method, values in by_method.items()
        }
        data.append(ChartPoint(label=f"M+{step + 1}", **step_values))

    return ForecastChart(metric=response.metric, periods=response.periods, data=tuple(data))
