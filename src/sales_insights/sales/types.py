"""Record types for the sales domain."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional

# Column order of the normalized transaction frame
TRANSACTION_COLUMNS = [
    "date",
    "invoice_number",
    "transaction_number",
    "customer_code",
    "customer_name",
    "seller_code",
    "seller_name",
    "product_code",
    "product_name",
    "department",
    "quantity",
    "value",
    "cost",
]

# Columns the monthly aggregator needs
AGGREGATION_COLUMNS = ["date", "quantity", "value", "cost"]


@dataclass(frozen=True)
class TransactionRecord:
    """One sale line, as validated by the ingestion layer.

    Attributes:
        date: Sale date.
        quantity: Number of items sold on the line.
        value: Monetary value of the line.
        cost: Cost of goods sold, or None when the source did not report it.
    """

    date: date
    quantity: float
    value: float
    cost: Optional[float] = None
    invoice_number: Optional[int] = None
    transaction_number: Optional[int] = None
    customer_code: Optional[int] = None
    customer_name: str = ""
    seller_code: Optional[int] = None
    seller_name: str = ""
    product_code: Optional[int] = None
    product_name: str = ""
    department: Optional[str] = None


@dataclass(frozen=True)
class MonthlyTotals:
    """Totals for one calendar month.

    Attributes:
        year: Calendar year.
        month: Calendar month (1-12).
        total_sales: Number of transaction lines.
        total_items: Sum of quantities.
        total_value: Sum of values.
        total_cost: Sum of costs, missing costs counted as zero.
    """

    year: int
    month: int
    total_sales: int
    total_items: float
    total_value: float
    total_cost: float

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
