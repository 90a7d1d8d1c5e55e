"""Filesystem configuration for sales_insights.

The engine itself is pure and reads nothing from disk. This configuration is
only used by the CLI to locate transaction exports.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sales_insights.exceptions import ConfigError


@dataclass
class DataPaths:
    """All filesystem paths used by the sales pipeline.

    Attributes:
        data_root: Root directory for sales data.

    Directory Structure:
        data_root/
        ├── a_raw/
        │   └── sales/       # transaction CSV exports
        └── c_processed/
            └── sales/       # monthly/yearly insight tables
    """

    data_root: Path

    @classmethod
    def from_root(cls, data_root: str | Path) -> DataPaths:
        """Create DataPaths from a root directory.

        Args:
            data_root: Root directory for sales data.

        Returns:
            DataPaths instance.

        Examples:
            >>> paths = DataPaths.from_root("data")
            >>> paths.raw_sales
            PosixPath('data/a_raw/sales')
        """
        if isinstance(data_root, str):
            data_root = Path(data_root)

        return cls(data_root=data_root)

    @property
    def raw_sales(self) -> Path:
        """Raw transaction CSV exports."""
        return self.data_root / "a_raw" / "sales"

    @property
    def processed_sales(self) -> Path:
        """Monthly and yearly insight tables."""
        return self.data_root / "c_processed" / "sales"

    def ensure_dirs(self) -> None:
        """Create all directories in the data structure."""
        for path in [self.raw_sales, self.processed_sales]:
            path.mkdir(parents=True, exist_ok=True)

    def sales_csv_files(self) -> list[Path]:
        """List transaction CSV files under raw_sales, sorted by name.

        Raises:
            ConfigError: If the raw sales directory does not exist.
        """
        if not self.raw_sales.is_dir():
            raise ConfigError(f"Raw sales directory not found: {self.raw_sales}")
        return sorted(self.raw_sales.rglob("*.csv"))
