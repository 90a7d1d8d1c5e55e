"""Tests for filesystem configuration."""

from pathlib import Path

import pytest

from sales_insights.config import DataPaths
from sales_insights.exceptions import ConfigError


def test_from_root_accepts_str_and_path(tmp_path: Path) -> None:
    """Test that both string and Path roots are accepted."""
    assert DataPaths.from_root(str(tmp_path)).data_root == tmp_path
    assert DataPaths.from_root(tmp_path).data_root == tmp_path


def test_layout(tmp_path: Path) -> None:
    """Test the raw and processed directory layout."""
    paths = DataPaths.from_root(tmp_path)

    assert paths.raw_sales == tmp_path / "a_raw" / "sales"
    assert paths.processed_sales == tmp_path / "c_processed" / "sales"


def test_ensure_dirs(tmp_path: Path) -> None:
    """Test that ensure_dirs creates every directory and is repeatable."""
    paths = DataPaths.from_root(tmp_path)

    paths.ensure_dirs()
    paths.ensure_dirs()

    assert paths.raw_sales.is_dir()
    assert paths.processed_sales.is_dir()


def test_sales_csv_files_sorted_and_recursive(tmp_path: Path) -> None:
    """Test CSV discovery under the raw sales directory."""
    paths = DataPaths.from_root(tmp_path)
    paths.ensure_dirs()
    (paths.raw_sales / "2024").mkdir()
    (paths.raw_sales / "b.csv").write_text("", encoding="utf-8")
    (paths.raw_sales / "2024" / "a.csv").write_text("", encoding="utf-8")
    (paths.raw_sales / "notes.txt").write_text("", encoding="utf-8")

    files = paths.sales_csv_files()

    assert [f.name for f in files] == ["a.csv", "b.csv"]


def test_sales_csv_files_missing_directory(tmp_path: Path) -> None:
    """Test that a missing raw directory raises ConfigError."""
    with pytest.raises(ConfigError):
        DataPaths.from_root(tmp_path / "missing").sales_csv_files()
