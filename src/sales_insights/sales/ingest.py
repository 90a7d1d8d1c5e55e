"""CSV ingestion for transaction exports.

This module reads the sales export produced by the ERP (one row per sale line,
Portuguese headers) and turns it into the normalized transaction frame used by
the store and the monthly aggregator.

Source headers and their normalized names:

    data                      -> date
    num_nota_saida            -> invoice_number
    numero_transacao_venda    -> transaction_number
    cod_cliente               -> customer_code
    nome_cliente              -> customer_name
    cod_rca                   -> seller_code
    nome_rca                  -> seller_name
    cod_produto               -> product_code
    nome_produto              -> product_name
    dpto_produto              -> department
    qtd_itens                 -> quantity
    valor                     -> value
    custo_mercadoria_vendida  -> cost
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict
from pathlib import Path
from typing import IO, Any, Iterable, Optional, Union

import pandas as pd

from sales_insights.exceptions import DataQualityError
from sales_insights.sales.types import TRANSACTION_COLUMNS, TransactionRecord

logger = logging.getLogger(__name__)

INTEGER_FIELDS = {
    "num_nota_saida": "invoice_number",
    "numero_transacao_venda": "transaction_number",
    "cod_cliente": "customer_code",
    "cod_rca": "seller_code",
    "cod_produto": "product_code",
}

TEXT_FIELDS = {
    "nome_cliente": "customer_name",
    "nome_rca": "seller_name",
    "nome_produto": "product_name",
}

REQUIRED_SOURCE_COLUMNS = ["data", *INTEGER_FIELDS, "qtd_itens", "valor"]


def _parse_number(value: Any, field: str) -> float:
    """Parse a required number, accepting a comma decimal separator."""
    if value is None or value == "":
        raise ValueError(f"Missing field {field}")
    try:
        number = float(str(value).replace(",", ".", 1))
    except ValueError:
        raise ValueError(f"Invalid number in {field}") from None
    if not math.isfinite(number):
        raise ValueError(f"Invalid number in {field}")
    return number


def _parse_optional_number(value: Any) -> Optional[float]:
    if not value:
        return None
    try:
        number = float(str(value).replace(",", ".", 1))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_row(row: dict[str, str]) -> dict[str, Any]:
    """Map one source row to a normalized transaction dict.

    Raises:
        ValueError: With a short description of the first invalid field.
    """
    raw_date = row.get("data", "")
    if not raw_date:
        raise ValueError("Missing data")
    try:
        sale_date = pd.to_datetime(raw_date)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid date {raw_date!r}") from None
    if pd.isna(sale_date):
        raise ValueError(f"Invalid date {raw_date!r}")

    parsed: dict[str, Any] = {"date": sale_date.date()}

    for source, target in INTEGER_FIELDS.items():
        parsed[target] = int(_parse_number(row.get(source), source))

    for source, target in TEXT_FIELDS.items():
        parsed[target] = (row.get(source) or "").strip()

    parsed["department"] = row.get("dpto_produto") or None

    # Fractional quantities (sold by weight) and negative values (returns) are kept
    parsed["quantity"] = _parse_number(row.get("qtd_itens"), "qtd_itens")
    parsed["value"] = _parse_number(row.get("valor"), "valor")
    parsed["cost"] = _parse_optional_number(row.get("custo_mercadoria_vendida"))
    return parsed


def _rows_to_frame(rows: list[dict[str, Any]]) -> pd.DataFrame:
    frame = pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"])
    frame["quantity"] = pd.to_numeric(frame["quantity"])
    frame["value"] = pd.to_numeric(frame["value"])
    frame["cost"] = pd.to_numeric(frame["cost"])
    return frame


def load_transactions_csv(source: Union[str, Path, IO[str]]) -> pd.DataFrame:
    """Read and validate a transaction CSV export.

    Empty lines are skipped and every cell is trimmed. Row numbers in error
    messages count the header as row 1.

    Args:
        source: Path to the CSV file or an open text buffer.

    Returns:
        Transaction frame with the columns listed in TRANSACTION_COLUMNS.

    Raises:
        DataQualityError: If required columns are missing or a row is invalid.
    """
    try:
        raw = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as e:
        raise DataQualityError("CSV file is empty") from e
    raw.columns = [str(col).strip() for col in raw.columns]

    missing_columns = [col for col in REQUIRED_SOURCE_COLUMNS if col not in raw.columns]
    if missing_columns:
        raise DataQualityError(
            f"Missing required columns in CSV: {missing_columns}. "
            f"Required: {REQUIRED_SOURCE_COLUMNS}"
        )

    rows: list[dict[str, Any]] = []
    for position, record in enumerate(raw.to_dict(orient="records")):
        row_number = position + 2
        # Short rows come back as NaN for the trailing cells
        trimmed = {
            key: value.strip() if isinstance(value, str) else "" for key, value in record.items()
        }
        try:
            rows.append(_parse_row(trimmed))
        except ValueError as e:
            raise DataQualityError(f"Error on row {row_number}: {e}") from e

    logger.info(f"Loaded {len(rows)} transactions from CSV")
    return _rows_to_frame(rows)


def records_to_frame(records: Iterable[TransactionRecord]) -> pd.DataFrame:
    """Convert TransactionRecord instances to a transaction frame."""
    return _rows_to_frame([asdict(record) for record in records])


def frame_to_records(frame: pd.DataFrame) -> list[TransactionRecord]:
    """Convert a transaction frame back to TransactionRecord instances.

    Columns other than date/quantity/value may be absent; they default to empty.
    """
    records = []
    for row in frame.to_dict(orient="records"):
        fields = {col: row[col] for col in TRANSACTION_COLUMNS if col in row}
        fields["date"] = pd.Timestamp(fields["date"]).date()
        fields["quantity"] = float(fields["quantity"])
        fields["value"] = float(fields["value"])
        for key, value in list(fields.items()):
            if key not in ("date", "quantity", "value") and _is_missing(value):
                fields.pop(key)
        for key in INTEGER_FIELDS.values():
            if key in fields:
                fields[key] = int(fields[key])
        if "cost" in fields:
            fields["cost"] = float(fields["cost"])
        records.append(TransactionRecord(**fields))
    return records


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))
