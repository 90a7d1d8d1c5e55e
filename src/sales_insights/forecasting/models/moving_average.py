"""Recursive moving average model."""

from __future__ import annotations

from typing import Optional, Sequence

from sales_insights.forecasting.config import METHOD_MOVING_AVERAGE, MOVING_AVERAGE_WINDOW
from sales_insights.forecasting.models.base import ForecastModel


class MovingAverageModel(ForecastModel):
    """Self-feeding mean of the last `window` values.

    Each forecast is the mean of the previous `window` values, where values
    already forecast count as history for the following steps. With
    [10, 20, 30] the forecasts are 20, then mean(20, 30, 20) = 23.33...
    """

    name = METHOD_MOVING_AVERAGE

    def __init__(self, window: int = MOVING_AVERAGE_WINDOW) -> None:
        self.window = window

    def train(self, series: Sequence[float]) -> Optional[tuple[float, ...]]:
        if len(series) < self.window:
            return None
        # Only the trailing window feeds the recursion
        return tuple(float(v) for v in series[len(series) - self.window :])

    def forecast(self, model: tuple[float, ...], steps: int) -> list[float]:
        recent = list(model)
        values = []
        for _ in range(steps):
            avg = sum(recent) / len(recent)
            values.append(avg)
            recent = recent[1:] + [avg]
        return values
