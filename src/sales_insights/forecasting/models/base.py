"""Base model interface for forecasting models.

This module defines the abstract base class that all forecasting models must implement,
enabling a consistent interface for the linear, moving-average and Holt-Winters methods.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


class ForecastModel(ABC):
    """Abstract base class for forecasting models.

    Models are stateless between calls: train() returns the fitted state and
    forecast() consumes it. Neither keeps anything on the instance, so one
    model can serve concurrent requests.
    """

    name: str = ""

    @abstractmethod
    def train(self, series: Sequence[float]) -> Optional[Any]:
        """Fit the model on a series of monthly values.

        Args:
            series: Historical values, oldest first.

        Returns:
            Fitted state, or None when this method cannot fit the series
            (too short, or a zero divisor met while smoothing).

        Raises:
            InputError: If the series cannot be fitted at all (e.g. a zero
                first value for Holt-Winters).
        """
        pass

    @abstractmethod
    def forecast(self, model: Any, steps: int) -> list[float]:
        """Project a fitted state forward.

        Args:
            model: Fitted state returned by train().
            steps: Number of periods to forecast ahead.

        Returns:
            One value per step ahead.
        """
        pass

    def predict(self, series: Sequence[float], steps: int) -> list[float]:
        """Train and forecast in one call, returning [] when the model cannot be fitted."""
        trained = self.train(series)
        if trained is None:
            logger.warning(
                f"{self.name}: cannot fit {len(series)} points, "
                f"returning empty forecast"
            )
            return []
        return self.forecast(trained, steps)
