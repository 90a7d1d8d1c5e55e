"""Tests for monthly aggregation of transaction lines."""

import pandas as pd
import pytest

from sales_insights.exceptions import DataQualityError, InputError
from sales_insights.sales.aggregate import aggregate_month, aggregate_monthly, validate_month


def test_aggregate_monthly_groups_and_sorts(sample_transactions: pd.DataFrame) -> None:
    """Test one record per month, ascending by (year, month)."""
    totals = aggregate_monthly(sample_transactions)

    assert [(t.year, t.month) for t in totals] == [(2023, 12), (2024, 1), (2024, 2)]

    january = totals[1]
    assert january.total_sales == 2
    assert january.total_items == 3
    assert january.total_value == pytest.approx(150.0)


def test_aggregate_monthly_missing_cost_counts_as_zero(sample_transactions: pd.DataFrame) -> None:
    """Test that a missing cost is summed as zero instead of poisoning the month."""
    totals = aggregate_monthly(sample_transactions)

    january = totals[1]
    assert january.total_cost == pytest.approx(60.0)


def test_aggregate_monthly_does_not_modify_input(sample_transactions: pd.DataFrame) -> None:
    """Test that aggregation is a pure read."""
    before = sample_transactions.copy()

    aggregate_monthly(sample_transactions, "2024-01-01", "2024-12-31")

    pd.testing.assert_frame_equal(sample_transactions, before)


def test_aggregate_monthly_date_range_is_inclusive() -> None:
    """Test that both range bounds are inclusive at day granularity."""
    df = pd.DataFrame(
        {
            "date": pd.to_datetime(["2024-01-01 08:00", "2024-01-31 18:30", "2024-02-01"]),
            "quantity": [1, 1, 1],
            "value": [10.0, 20.0, 40.0],
            "cost": [None, None, None],
        }
    )

    totals = aggregate_monthly(df, start_date="2024-01-01", end_date="2024-01-31")

    assert len(totals) == 1
    assert totals[0].total_sales == 2
    assert totals[0].total_value == pytest.approx(30.0)
    assert totals[0].total_cost == 0.0


def test_aggregate_monthly_skips_months_without_sales() -> None:
    """Test that months with no transactions are not emitted."""
    df = pd.DataFrame(
        {
            "date": pd.to_datetime(["2024-01-10", "2024-04-10"]),
            "quantity": [1, 1],
            "value": [10.0, 20.0],
            "cost": [1.0, 2.0],
        }
    )

    totals = aggregate_monthly(df)

    assert [(t.year, t.month) for t in totals] == [(2024, 1), (2024, 4)]


def test_aggregate_monthly_empty_range(sample_transactions: pd.DataFrame) -> None:
    """Test that a range without transactions returns an empty list."""
    assert aggregate_monthly(sample_transactions, "2030-01-01", "2030-12-31") == []


def test_aggregate_monthly_rejects_bad_range(sample_transactions: pd.DataFrame) -> None:
    """Test that invalid or inverted ranges raise InputError."""
    with pytest.raises(InputError, match="start_date"):
        aggregate_monthly(sample_transactions, "not-a-date")

    with pytest.raises(InputError, match="after end_date"):
        aggregate_monthly(sample_transactions, "2024-03-01", "2024-01-01")


def test_aggregate_monthly_missing_columns() -> None:
    """Test that a frame without the aggregation columns is rejected."""
    df = pd.DataFrame({"date": ["2024-01-01"], "value": [1.0]})

    with pytest.raises(DataQualityError, match="Missing required columns"):
        aggregate_monthly(df)


def test_aggregate_month_returns_zeros_for_empty_month(sample_transactions: pd.DataFrame) -> None:
    """Test that a month without sales yields a zero record."""
    totals = aggregate_month(sample_transactions, 2024, 5)

    assert (totals.year, totals.month) == (2024, 5)
    assert totals.total_sales == 0
    assert totals.total_value == 0.0
    assert totals.total_cost == 0.0


def test_aggregate_month_single_month(sample_transactions: pd.DataFrame) -> None:
    """Test totals for one populated month."""
    totals = aggregate_month(sample_transactions, 2024, 2)

    assert totals.total_sales == 1
    assert totals.total_items == 3
    assert totals.total_value == pytest.approx(300.0)
    assert totals.total_cost == pytest.approx(150.0)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_validate_month_rejects_out_of_range(month: int) -> None:
    """Test that months outside 1-12 raise InputError."""
    with pytest.raises(InputError, match="Invalid month"):
        validate_month(2024, month)


def test_validate_month_rejects_non_integers() -> None:
    """Test that non-integer filters raise InputError."""
    with pytest.raises(InputError):
        validate_month(2024, "3")  # type: ignore[arg-type]
    with pytest.raises(InputError):
        validate_month(2024.5, 3)  # type: ignore[arg-type]


def test_aggregate_month_validates_before_reading() -> None:
    """Test that an invalid month is rejected even when the frame is unusable."""
    with pytest.raises(InputError):
        aggregate_month(pd.DataFrame(), 2024, 13)
