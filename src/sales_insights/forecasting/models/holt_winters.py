"""Holt-Winters triple exponential smoothing.

Additive trend with multiplicative seasonality. The initial state is taken
straight from the first observations:

    level      = series[0]
    trend      = series[1] - series[0]
    seasonals  = series[0:L] / level

Each historical point t then updates level, trend and the seasonal index
t mod L in place. The seasonal table left after the historical pass is the
one used for forecasting:

    forecast(k) = (level + trend * k) * seasonals[(n + k - 1) mod L]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from sales_insights.exceptions import InputError
from sales_insights.forecasting.config import (
    ALPHA,
    BETA,
    GAMMA,
    METHOD_HOLT_WINTERS,
    SEASONAL_PERIOD,
)
from sales_insights.forecasting.models.base import ForecastModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoltWintersState:
    level: float
    trend: float
    seasonals: tuple[float, ...]
    n: int


class HoltWintersModel(ForecastModel):
    """Holt-Winters model with fixed smoothing constants.

    Needs at least two full seasons of history; shorter series yield an empty
    forecast.
    """

    name = METHOD_HOLT_WINTERS

    def __init__(
        self,
        season_length: int = SEASONAL_PERIOD,
        alpha: float = ALPHA,
        beta: float = BETA,
        gamma: float = GAMMA,
    ) -> None:
        """Initialize HoltWintersModel.

        Args:
            season_length: Number of periods in one season (default: 12 months)
            alpha: Level smoothing constant (default: 0.3)
            beta: Trend smoothing constant (default: 0.1)
            gamma: Seasonal smoothing constant (default: 0.2)
        """
        self.season_length = season_length
        self.alpha = alpha
        self.beta = beta
        self.gamma = gamma

    def train(self, series: Sequence[float]) -> Optional[HoltWintersState]:
        """Run the smoothing pass over the full history.

        Returns None when the series is shorter than two seasons, or when a
        seasonal index or the level reaches zero during the pass.

        Raises:
            InputError: If the first value is zero.
        """
        length = self.season_length
        values = [float(v) for v in series]
        if len(values) < 2 * length:
            return None

        if values[0] == 0:
            raise InputError(
                "Holt-Winters needs a non-zero first value to normalize the seasonal indices"
            )

        level = values[0]
        trend = values[1] - values[0]
        seasonals = [v / level for v in values[:length]]

        for t, value in enumerate(values):
            idx = t % length
            seasonal = seasonals[idx]
            if seasonal == 0:
                logger.warning(f"holt_winters: seasonal index {idx} is zero at t={t}")
                return None

            prev_level = level
            level = self.alpha * (value / seasonal) + (1 - self.alpha) * (level + trend)
            trend = self.beta * (level - prev_level) + (1 - self.beta) * trend
            if level == 0:
                logger.warning(f"holt_winters: level collapsed to zero at t={t}")
                return None
            seasonals[idx] = self.gamma * (value / level) + (1 - self.gamma) * seasonal

        logger.debug(
            "holt_winters: level=%.4f trend=%.4f season_length=%d", level, trend, length
        )
        return HoltWintersState(
            level=level, trend=trend, seasonals=tuple(seasonals), n=len(values)
        )

    def forecast(self, model: HoltWintersState, steps: int) -> list[float]:
        length = len(model.seasonals)
        return [
            (model.level + model.trend * k) * model.seasonals[(model.n + k - 1) % length]
            for k in range(1, steps + 1)
        ]
