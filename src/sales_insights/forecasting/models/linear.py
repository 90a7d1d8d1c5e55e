"""Ordinary least squares trend model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from sales_insights.forecasting.config import METHOD_LINEAR
from sales_insights.forecasting.models.base import ForecastModel


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float
    n: int


class LinearRegressionModel(ForecastModel):
    """Straight-line trend of value against position x = 1..n.

    slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
    intercept = (Sy - slope*Sx) / n

    The forecast for step k is slope*(n+k) + intercept.
    """

    name = METHOD_LINEAR

    def train(self, series: Sequence[float]) -> Optional[LinearFit]:
        n = len(series)
        if n < 2:
            return None

        y = np.asarray(series, dtype=float)
        x = np.arange(1, n + 1, dtype=float)

        sum_x = x.sum()
        sum_y = y.sum()
        sum_xy = (x * y).sum()
        sum_x2 = (x * x).sum()

        slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
        intercept = (sum_y - slope * sum_x) / n

        return LinearFit(slope=float(slope), intercept=float(intercept), n=n)

    def forecast(self, model: LinearFit, steps: int) -> list[float]:
        return [model.slope * (model.n + k) + model.intercept for k in range(1, steps + 1)]
