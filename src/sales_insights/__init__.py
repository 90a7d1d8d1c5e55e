"""Sales Insights - monthly sales metrics and multi-method forecasting.

This package turns per-transaction sales lines into monthly and yearly business
metrics and projects them forward:

- **Sales**: CSV ingestion, in-memory transaction store, monthly aggregation
- **Insights**: average ticket, item cost, gross margin, MoM and YoY growth
- **Forecasting**: linear regression, moving average and Holt-Winters, side by side

Module Structure:
    sales_insights.sales: Transaction ingestion, store and monthly aggregation
    sales_insights.insights: Monthly and yearly insight derivation
    sales_insights.forecasting: Forecasting engine and chart view
    sales_insights.api: Store-backed query functions
    sales_insights.config: DataPaths configuration

Quick Start:
    >>> from sales_insights import TransactionStore
    >>> from sales_insights.api import get_monthly_insights, get_yearly_insights, predict
    >>>
    >>> store = TransactionStore.from_csv("data/a_raw/sales/2024.csv")
    >>>
    >>> monthly = get_monthly_insights(store)
    >>> yearly = get_yearly_insights(store)
    >>>
    >>> response = predict(store, metric="total_value", periods=6)
    >>> response.by_method()["holt_winters"]
"""

__version__ = "0.1.0"

from sales_insights.config import DataPaths
from sales_insights.exceptions import (
    ConfigError,
    DataQualityError,
    InputError,
    SalesInsightsError,
)
from sales_insights.sales.store import TransactionStore

__all__ = [
    "ConfigError",
    "DataPaths",
    "DataQualityError",
    "InputError",
    "SalesInsightsError",
    "TransactionStore",
    "__version__",
]
