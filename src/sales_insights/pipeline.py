"""CLI wrapper for the sales insights pipeline.

This module provides a command-line interface that loads transaction CSVs,
prints monthly/yearly insights and compares the forecasting methods.
All core logic is in sales_insights.api.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from sales_insights.api import get_monthly_insights, predict
from sales_insights.config import DataPaths
from sales_insights.exceptions import ConfigError
from sales_insights.forecasting.config import DEFAULT_PERIODS, METRICS
from sales_insights.forecasting.formatters.console import (
    format_forecast_for_console,
    format_insights_for_console,
)
from sales_insights.insights.types import insights_to_frame
from sales_insights.insights.yearly import compute_yearly_insights
from sales_insights.sales.store import TransactionStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monthly sales insights and forecasts.")
    parser.add_argument(
        "--file",
        type=str,
        action="append",
        help="Transaction CSV export. Repeatable. If not provided, reads every CSV "
        "under <data-root>/a_raw/sales.",
    )
    parser.add_argument(
        "--data-root",
        type=str,
        default="data",
        help="Root data directory (default: data)",
    )
    parser.add_argument(
        "--metric",
        type=str,
        default="total_value",
        choices=METRICS,
        help="Metric to forecast (default: total_value)",
    )
    parser.add_argument(
        "--periods",
        type=int,
        default=DEFAULT_PERIODS,
        help=f"Number of months to forecast ahead (default: {DEFAULT_PERIODS})",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write monthly and yearly insight tables to <data-root>/c_processed/sales",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point.

    Parses command-line arguments, loads transactions, prints insights and
    forecasts.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    paths = DataPaths.from_root(args.data_root)

    print("=" * 60)
    print("Sales Insights Pipeline")
    print("=" * 60)

    try:
        print("\n[1/3] Loading transactions...")
        if args.file:
            csv_files = [Path(f) for f in args.file]
            missing = [str(f) for f in csv_files if not f.exists()]
            if missing:
                raise ConfigError(f"Transaction file(s) not found: {missing}")
        else:
            csv_files = paths.sales_csv_files()
            if not csv_files:
                raise ConfigError(f"No CSV files found in {paths.raw_sales}")

        store = TransactionStore.from_csv(*csv_files)
        print(f"[OK] Loaded {len(store)} transactions from {len(csv_files)} file(s)")

        print("\n[2/3] Computing insights...")
        monthly = get_monthly_insights(store)
        yearly = compute_yearly_insights(monthly)
        print(format_insights_for_console(monthly, yearly))

        if args.save:
            paths.ensure_dirs()
            monthly_path = paths.processed_sales / "monthly_insights.csv"
            yearly_path = paths.processed_sales / "yearly_insights.csv"
            insights_to_frame(monthly).to_csv(monthly_path, index=False)
            insights_to_frame(yearly).to_csv(yearly_path, index=False)
            print(f"Saved insights to: {paths.processed_sales}")

        print(f"\n[3/3] Forecasting {args.metric} for {args.periods} months...")
        response = predict(store, args.metric, args.periods)
        print(format_forecast_for_console(response))

        print("\n[OK] Pipeline completed successfully")

    except Exception as e:
        logger.error("Pipeline failed: %s", e)
        print(f"\n[ERROR] Pipeline failed: {e}")
        raise


if __name__ == "__main__":
    main()
