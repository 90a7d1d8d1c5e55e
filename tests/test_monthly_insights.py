"""Tests for monthly insight derivation."""

import pytest

from sales_insights.exceptions import InputError
from sales_insights.insights import compute_monthly_insights, growth_pct, insights_to_frame
from tests.test_utils import make_totals


@pytest.fixture
def totals() -> list:
    """Four months including a zero month and a month without cost data."""
    return [
        make_totals(2024, 1, sales=10, items=20, value=1000.0, cost=600.0),
        make_totals(2024, 2, sales=0, items=0, value=0.0, cost=0.0),
        make_totals(2024, 3, sales=5, items=10, value=500.0, cost=0.0),
        make_totals(2024, 4, sales=8, items=16, value=750.0, cost=300.0),
    ]


def test_output_preserves_length_and_order(totals: list) -> None:
    """Test the one-to-one mapping of totals to insights."""
    insights = compute_monthly_insights(totals)

    assert len(insights) == len(totals)
    assert [(i.year, i.month) for i in insights] == [(t.year, t.month) for t in totals]
    assert [i.total_value for i in insights] == [t.total_value for t in totals]


def test_ratios(totals: list) -> None:
    """Test ticket, item cost, profit and margin."""
    first, _, _, last = compute_monthly_insights(totals)

    assert first.avg_ticket == pytest.approx(100.0)
    assert first.avg_item_cost == pytest.approx(30.0)
    assert first.gross_profit == pytest.approx(400.0)
    assert first.gross_margin_pct == pytest.approx(40.0)

    assert last.avg_ticket == pytest.approx(93.75)
    assert last.avg_item_cost == pytest.approx(18.75)
    assert last.gross_profit == pytest.approx(450.0)
    assert last.gross_margin_pct == pytest.approx(60.0)


def test_zero_denominators_yield_zero(totals: list) -> None:
    """Test that ratios over zero denominators are 0, not errors."""
    empty_month = compute_monthly_insights(totals)[1]

    assert empty_month.avg_ticket == 0
    assert empty_month.avg_item_cost == 0
    assert empty_month.gross_profit == 0
    assert empty_month.gross_margin_pct == 0


def test_item_cost_is_zero_without_cost_data(totals: list) -> None:
    """Test that a month with items but no recorded cost has zero item cost."""
    march = compute_monthly_insights(totals)[2]

    assert march.total_items == 10
    assert march.avg_item_cost == 0
    assert march.gross_margin_pct == pytest.approx(100.0)


def test_growth_absent_for_first_month(totals: list) -> None:
    """Test that the first month has no baseline."""
    first = compute_monthly_insights(totals)[0]

    assert first.mom_growth_value_pct is None
    assert first.mom_growth_sales_pct is None


def test_growth_absent_after_zero_month(totals: list) -> None:
    """Test that a zero predecessor means no baseline, not zero growth."""
    march = compute_monthly_insights(totals)[2]

    assert march.mom_growth_value_pct is None
    assert march.mom_growth_sales_pct is None


def test_growth_values(totals: list) -> None:
    """Test growth against a positive baseline, including a drop to zero."""
    insights = compute_monthly_insights(totals)

    assert insights[1].mom_growth_value_pct == pytest.approx(-100.0)
    assert insights[1].mom_growth_sales_pct == pytest.approx(-100.0)
    assert insights[3].mom_growth_value_pct == pytest.approx(50.0)
    assert insights[3].mom_growth_sales_pct == pytest.approx(60.0)


def test_flat_month_has_zero_growth() -> None:
    """Test that equal consecutive months report 0, distinct from absent."""
    insights = compute_monthly_insights(
        [make_totals(2024, 1, value=200.0), make_totals(2024, 2, value=200.0)]
    )

    assert insights[1].mom_growth_value_pct == 0.0
    assert insights[1].mom_growth_sales_pct == 0.0


def test_growth_is_positional_across_year_boundary() -> None:
    """Test that December is the baseline for the following January."""
    insights = compute_monthly_insights(
        [make_totals(2023, 12, value=100.0), make_totals(2024, 1, value=125.0)]
    )

    assert insights[1].mom_growth_value_pct == pytest.approx(25.0)


def test_to_dict_omits_absent_growth(totals: list) -> None:
    """Test that serialized records drop growth fields without a baseline."""
    insights = compute_monthly_insights(totals)

    first = insights[0].to_dict()
    assert "mom_growth_value_pct" not in first
    assert "mom_growth_sales_pct" not in first
    assert first["avg_ticket"] == pytest.approx(100.0)

    assert "mom_growth_value_pct" in insights[3].to_dict()


def test_unsorted_or_duplicate_months_rejected() -> None:
    """Test the ascending, unique (year, month) precondition."""
    with pytest.raises(InputError, match="strictly ascending"):
        compute_monthly_insights([make_totals(2024, 2), make_totals(2024, 1)])

    with pytest.raises(InputError, match="strictly ascending"):
        compute_monthly_insights([make_totals(2024, 1), make_totals(2024, 1)])


def test_empty_input() -> None:
    """Test that no months yields no insights."""
    assert compute_monthly_insights([]) == []


def test_idempotent(totals: list) -> None:
    """Test that repeated calls give identical output."""
    assert compute_monthly_insights(totals) == compute_monthly_insights(totals)


def test_growth_pct_helper() -> None:
    """Test the strictly-positive baseline rule."""
    assert growth_pct(110.0, 100.0) == pytest.approx(10.0)
    assert growth_pct(10.0, 0.0) is None
    assert growth_pct(10.0, -5.0) is None
    assert growth_pct(10.0, None) is None


def test_insights_to_frame(totals: list) -> None:
    """Test DataFrame conversion for reporting."""
    df = insights_to_frame(compute_monthly_insights(totals))

    assert len(df) == 4
    assert "gross_margin_pct" in df.columns
    assert df["mom_growth_value_pct"].isna().tolist() == [True, False, True, False]
