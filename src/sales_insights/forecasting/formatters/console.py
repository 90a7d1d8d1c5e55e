"""Console output formatting utilities."""

from __future__ import annotations

from typing import Optional, Sequence

from sales_insights.forecasting.chart import build_forecast_chart
from sales_insights.forecasting.types import ForecastResponse
from sales_insights.insights.types import MonthlyInsight, YearlyInsight

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

METHOD_NAMES = {
    "linear": "Linear",
    "moving_average": "Moving Avg",
    "holt_winters": "Holt-Winters",
}

METRIC_NAMES = {
    "total_value": "Revenue",
    "total_sales": "Sales",
}


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _pct(value: Optional[float]) -> str:
    # No baseline is shown as "-" so it is not mistaken for 0% growth
    if value is None:
        return "-"
    return f"{value:+.1f}%"


def format_insights_for_console(
    monthly: Sequence[MonthlyInsight],
    yearly: Sequence[YearlyInsight],
) -> str:
    """Build a human-readable table of monthly and yearly insights.

    Args:
        monthly: Monthly insights, ascending.
        yearly: Yearly insights, ascending.

    Returns:
        Text for console output.
    """
    if not monthly:
        return "No sales data available."

    lines = []
    lines.append("Monthly Insights")
    lines.append("=" * 78)
    lines.append(
        f"{'Month':<10}{'Sales':>8}{'Revenue':>16}{'Avg Ticket':>13}"
        f"{'Margin':>9}{'MoM Rev':>11}{'MoM Sales':>11}"
    )
    lines.append("-" * 78)
    for m in monthly:
        label = f"{MONTH_NAMES[m.month - 1]} {m.year}"
        lines.append(
            f"{label:<10}{m.total_sales:>8}{_money(m.total_value):>16}"
            f"{_money(m.avg_ticket):>13}{m.gross_margin_pct:>8.1f}%"
            f"{_pct(m.mom_growth_value_pct):>11}{_pct(m.mom_growth_sales_pct):>11}"
        )
    lines.append("")

    lines.append("Yearly Insights")
    lines.append("=" * 78)
    for y in yearly:
        best = MONTH_NAMES[y.best_month - 1] if y.best_month else "-"
        worst = MONTH_NAMES[y.worst_month - 1] if y.worst_month else "-"
        lines.append(f"{y.year}:")
        lines.append(f"  Revenue: {_money(y.total_value)} (YoY {_pct(y.value_growth_pct)})")
        lines.append(f"  Sales: {y.total_sales:,}  Items: {y.total_items:,.0f}")
        lines.append(
            f"  Avg ticket: {_money(y.avg_ticket)}  Gross profit: {_money(y.gross_profit)} "
            f"({y.gross_margin_pct:.1f}%)"
        )
        lines.append(f"  Best month: {best}  Worst month: {worst}")
    lines.append("")

    return "\n".join(lines)


def format_forecast_for_console(response: ForecastResponse) -> str:
    """Build a side-by-side comparison of the forecasting methods.

    Args:
        response: ForecastResponse from run_forecast().

    Returns:
        Text for console output.
    """
    metric_display = METRIC_NAMES.get(response.metric, response.metric)
    is_money = response.metric == "total_value"

    lines = []
    lines.append(
        f"{metric_display} Forecast - Next {response.periods} Months "
        f"(based on {response.base_points} months)"
    )
    lines.append("=" * 60)

    method_headers = [METHOD_NAMES.get(r.method, r.method) for r in response.forecasts]
    lines.append(f"{'Step':<8}" + "".join(f"{name:>17}" for name in method_headers))
    lines.append("-" * 60)

    chart = build_forecast_chart(response)
    for point in chart.data[1:]:
        cells = []
        for result in response.forecasts:
            value = getattr(point, result.method, None)
            if value is None:
                cells.append(f"{'n/a':>17}")
            elif is_money:
                cells.append(f"{_money(value):>17}")
            else:
                cells.append(f"{value:>17,.1f}")
        lines.append(f"{point.label:<8}" + "".join(cells))

    skipped = [METHOD_NAMES.get(r.method, r.method) for r in response.forecasts if not r.values]
    if skipped:
        lines.append("")
        lines.append(f"Not enough history for: {', '.join(skipped)}")

    return "\n".join(lines)
