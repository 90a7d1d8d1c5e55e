"""Public API for the forecasting engine.

This module runs the three forecasting methods side by side on one numeric
series. It does not read files or query the store; callers pass the history
in.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, List, Optional, Sequence

from sales_insights.exceptions import InputError
from sales_insights.forecasting.config import (
    DEFAULT_PERIODS,
    MAX_HORIZON,
    METRICS,
    MIN_HISTORY,
    MIN_HORIZON,
    SEASONAL_PERIOD,
)
from sales_insights.forecasting.models.base import ForecastModel
from sales_insights.forecasting.models.holt_winters import HoltWintersModel
from sales_insights.forecasting.models.linear import LinearRegressionModel
from sales_insights.forecasting.models.moving_average import MovingAverageModel
from sales_insights.forecasting.types import ForecastResponse, ForecastResult
from sales_insights.insights.monthly import check_monthly_order
from sales_insights.sales.types import MonthlyTotals

logger = logging.getLogger(__name__)


@dataclass
class ForecastConfig:
    """Configuration for a monthly forecast request.

    Attributes:
        metric: Monthly field to forecast (default: "total_value").
        periods: Number of months ahead to forecast (default: 3).
        season_length: Optional Holt-Winters season length. If None, it is
            chosen from the history length.
    """

    metric: str = "total_value"
    periods: int = DEFAULT_PERIODS
    season_length: Optional[int] = None


def season_length_for(n: int) -> int:
    """Seasonal period for a history of n points: 12 with a full year, else max(2, n // 2)."""
    if n >= SEASONAL_PERIOD:
        return SEASONAL_PERIOD
    return max(2, n // 2)


def validate_horizon(horizon: int) -> None:
    """Reject a horizon that is not an integer in [1, 24].

    Raises:
        InputError: If the horizon is invalid.
    """
    if isinstance(horizon, bool) or not isinstance(horizon, Integral):
        raise InputError(f"Invalid prediction horizon: {horizon!r}")
    if horizon < MIN_HORIZON or horizon > MAX_HORIZON:
        raise InputError(
            f"Invalid prediction horizon: {horizon}. "
            f"Must be between {MIN_HORIZON} and {MAX_HORIZON}."
        )


def _validate_series(series: Sequence[float]) -> List[float]:
    try:
        values = [float(v) for v in series]
    except (TypeError, ValueError) as e:
        raise InputError(f"Series must contain only numbers: {e}") from e

    if len(values) < MIN_HISTORY:
        raise InputError(
            f"Not enough historical data: {len(values)} points, need at least {MIN_HISTORY}"
        )
    if not all(math.isfinite(v) for v in values):
        raise InputError("Series contains NaN or infinite values")
    return values


def build_models(season_length: int) -> List[ForecastModel]:
    """Models in the order their results are returned."""
    return [
        LinearRegressionModel(),
        MovingAverageModel(),
        HoltWintersModel(season_length=season_length),
    ]


def forecast(
    series: Sequence[float],
    horizon: int,
    season_length: Optional[int] = None,
) -> Dict[str, List[float]]:
    """Forecast a series with every method.

    Each method runs independently on the same input. A method whose own data
    requirement is not met returns an empty list without affecting the others.

    Args:
        series: Monthly history, oldest first. At least 3 points.
        horizon: Months ahead to forecast, 1 to 24.
        season_length: Optional Holt-Winters season length (>= 2). Defaults to
            12 with a full year of history, else max(2, n // 2).

    Returns:
        Dictionary {method: values} with keys "linear", "moving_average",
        "holt_winters".

    Raises:
        InputError: If the horizon, series or season length is invalid.

    Examples:
        >>> forecast([10, 20, 30, 40], 2)["linear"]
        [50.0, 60.0]
    """
    validate_horizon(horizon)
    values = _validate_series(series)

    if season_length is None:
        season_length = season_length_for(len(values))
    elif isinstance(season_length, bool) or not isinstance(season_length, Integral):
        raise InputError(f"Invalid season length: {season_length!r}")
    elif season_length < 2:
        raise InputError(f"Invalid season length: {season_length}. Must be at least 2.")

    logger.debug(
        f"Forecasting {horizon} periods from {len(values)} points "
        f"(season length {season_length})"
    )

    results = {}
    for model in build_models(season_length):
        results[model.name] = model.predict(values, horizon)
    return results


def run_forecast(
    monthly: Sequence[MonthlyTotals],
    config: Optional[ForecastConfig] = None,
) -> ForecastResponse:
    """Forecast one metric of a monthly sequence.

    Args:
        monthly: MonthlyInsight (or MonthlyTotals) records, ascending by
            (year, month).
        config: ForecastConfig for metric, periods and season length. If None,
            uses defaults.

    Returns:
        ForecastResponse with one ForecastResult per method.

    Raises:
        InputError: If the metric or horizon is invalid, or the history is too
            short.
    """
    if config is None:
        config = ForecastConfig()

    if config.metric not in METRICS:
        raise InputError(f"Invalid metric '{config.metric}'. Must be one of {METRICS}.")
    validate_horizon(config.periods)
    check_monthly_order(monthly)

    series = [getattr(month, config.metric) for month in monthly]
    values = forecast(series, config.periods, config.season_length)

    forecasts = tuple(
        ForecastResult(
            method=method,
            metric=config.metric,
            periods=config.periods,
            values=tuple(method_values),
        )
        for method, method_values in values.items()
    )

    empty = [result.method for result in forecasts if not result.values]
    logger.info(
        f"Forecast {config.metric} for {config.periods} periods from {len(series)} months "
        f"({len(forecasts) - len(empty)} methods with results, empty: {empty or 'none'})"
    )

    return ForecastResponse(
        metric=config.metric,
        periods=config.periods,
        base_points=len(series),
        forecasts=forecasts,
    )
