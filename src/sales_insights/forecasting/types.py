"""Shared types for forecasting results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

import pandas as pd


@dataclass(frozen=True)
class ForecastResult:
    """Projection of one metric by one method.

    Attributes:
        method: Method identifier, e.g. "linear", "moving_average", "holt_winters".
        metric: Forecast metric, e.g. "total_value".
        periods: Requested horizon.
        values: One value per step ahead. Empty when the method did not have
            enough history.
    """

    method: str
    metric: str
    periods: int
    values: tuple[float, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        record = asdict(self)
        record["values"] = list(self.values)
        return record


@dataclass(frozen=True)
class ForecastResponse:
    """All method results for one forecast request.

    Attributes:
        metric: Forecast metric.
        periods: Requested horizon.
        base_points: Number of historical months used.
        forecasts: One ForecastResult per method, in METHODS order.
    """

    metric: str
    periods: int
    base_points: int
    forecasts: tuple[ForecastResult, ...] = ()

    def by_method(self) -> dict[str, tuple[float, ...]]:
        return {result.method: result.values for result in self.forecasts}

    def to_dict(self) -> dict[str, Any]:
        return {
            "metric": self.metric,
            "periods": self.periods,
            "base_points": self.base_points,
            "forecasts": [result.to_dict() for result in self.forecasts],
        }


@dataclass(frozen=True)
class ChartPoint:
    """One row of the forecast chart.

    The leading row only carries `base` (the number of historical points); the
    following rows carry one value per method, or None where the method has
    no value for that step.
    """

    label: str
    base: Optional[int] = None
    linear: Optional[float] = None
    moving_average: Optional[float] = None
    holt_winters: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class ForecastChart:
    """Row-oriented view of a ForecastResponse for charting."""

    metric: str
    periods: int
    data: tuple[ChartPoint, ...] = field(default_factory=tuple)

    def to_frame(self) -> pd.DataFrame:
        """Return the chart rows as a DataFrame indexed by label."""
        rows = [asdict(point) for point in self.data]
        columns = ["label", "base", "linear", "moving_average", "holt_winters"]
        return pd.DataFrame(rows, columns=columns).set_index("label")
