"""Shared fixtures for sales_insights tests."""

import pandas as pd
import pytest

from tests.test_utils import CSV_HEADER


@pytest.fixture
def sample_transactions() -> pd.DataFrame:
    """Transaction lines over three months, deliberately not in date order."""
    return pd.DataFrame(
        {
            "date": pd.to_datetime(
                ["2024-01-05", "2023-12-31", "2024-02-10", "2024-01-20"]
            ),
            "quantity": [2, 1, 3, 1],
            "value": [100.0, 80.0, 300.0, 50.0],
            "cost": [60.0, 40.0, 150.0, None],
        }
    )


@pytest.fixture
def two_years_of_transactions() -> pd.DataFrame:
    """Two transactions per month from 2023-01 to 2024-12 with a growing trend."""
    rows = []
    for i, month_start in enumerate(pd.date_range("2023-01-01", periods=24, freq="MS")):
        for day in (3, 17):
            rows.append(
                {
                    "date": month_start + pd.Timedelta(days=day),
                    "quantity": 2,
                    "value": 500.0 + 10.0 * i,
                    "cost": 200.0,
                }
            )
    return pd.DataFrame(rows)


@pytest.fixture
def sample_csv_text() -> str:
    """Two valid rows in the source export format."""
    return "\n".join(
        [
            CSV_HEADER,
            '2024-01-05,1001,5001,10, Ana ,7,Bruno,300,Widget,Tools,2,"100,50",60',
            "",
            "2024-01-06,1002,5002,11,Carla,7,Bruno,301,Gadget,,1,50,",
        ]
    )

