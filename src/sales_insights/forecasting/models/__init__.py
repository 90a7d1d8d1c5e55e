"""Forecasting models module.

Every model implements ForecastModel:

- train(series) returns the fitted state, or None when the series is too short
  for the method (the caller then gets an empty forecast for that method only)
- forecast(state, steps) returns one float per step ahead

Models never store fitted state on the instance. When adding a model, return
immutable state from train() (a frozen dataclass or a tuple) and register it
in sales_insights.forecasting.api.build_models().
"""

from sales_insights.forecasting.models.base import ForecastModel
from sales_insights.forecasting.models.holt_winters import HoltWintersModel, HoltWintersState
from sales_insights.forecasting.models.linear import LinearFit, LinearRegressionModel
from sales_insights.forecasting.models.moving_average import MovingAverageModel

__all__ = [
    "ForecastModel",
    "HoltWintersModel",
    "HoltWintersState",
    "LinearFit",
    "LinearRegressionModel",
    "MovingAverageModel",
]
