"""Column type inference and best-effort numeric coercion.

Types are decided from a bounded sample of leading rows:

- INTEGER when every sampled cell is a base-10 signed 64-bit integer
- FLOAT when every sampled cell is a decimal/exponential number
  (integers included, e.g. a column of "1.5" and "2")
- STRING otherwise; one unparseable cell in the sample is enough

A value such as "1.23" only ever counts as a float. Coercion afterwards
never fails: cells that do not parse keep their text.
"""
import math
import re
from typing import Optional

import structlog

from csv2xlsx.config import get_settings
from csv2xlsx.models.table import CellValue, ColumnType, Table

logger = structlog.get_logger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INFINITY_PATTERN = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)


def parse_integer(text: str) -> Optional[int]:
    """Parse a base-10 signed 64-bit integer, or return None."""
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    """Parse a 64-bit float, or return None.

    Finite literals too large for a double are rejected rather than
    turned into infinity.
    """
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value) and not _INFINITY_PATTERN.fullmatch(text):
        return None
    return value


def _classify(cell: CellValue) -> Optional[ColumnType]:
    """Return the narrowest numeric type a cell fits, or None."""
    if isinstance(cell, bool):
        return None
    if isinstance(cell, int):
        return ColumnType.INTEGER
    if isinstance(cell, float):
        return ColumnType.FLOAT
    if parse_integer(cell) is not None:
        return ColumnType.INTEGER
    if parse_float(cell) is not None:
        return ColumnType.FLOAT
    return None


def _resolve_sample_rows(sample_rows: Optional[int]) -> int:
    if sample_rows is None:
        return get_settings().inference_sample_rows
    if sample_rows < 1:
        raise ValueError(f"sample_rows must be positive, got {sample_rows}")
    return sample_rows


def infer_column_types(table: Table, sample_rows: Optional[int] = None) -> Table:
    """Upgrade STRING columns to INTEGER or FLOAT in place.

    Columns that already carry a numeric type are left alone, so running
    inference twice is a no-op.
    """
    sample_size = min(_resolve_sample_rows(sample_rows), table.row_count)
    log = logger.bind(source=table.source, sample_size=sample_size)

    if sample_size == 0:
        log.debug("type_inference_skipped_no_rows")
        return table

    sample = table.rows[:sample_size]
    for index, column in enumerate(table.columns):
        if column.type != ColumnType.STRING:
            continue

        integer_count, float_count = 0, 0
        for row in sample:
            kind = _classify(row[index])
            if kind == ColumnType.INTEGER:
                integer_count += 1
                float_count += 1
            elif kind == ColumnType.FLOAT:
                float_count += 1

        if integer_count == sample_size:
            column.type = ColumnType.INTEGER
        elif float_count == sample_size:
            column.type = ColumnType.FLOAT

        log.debug(
            "column_type_inferred",
            column=column.name,
            type=column.type.value,
            integer_count=integer_count,
            float_count=float_count,
        )

    return table


def convert_column_types(table: Table, sample_rows: Optional[int] = None) -> Table:
    """Infer column types, then coerce text cells of numeric columns in place."""
    infer_column_types(table, sample_rows)

    numeric_columns = [
        (index, column.type)
        for index, column in enumerate(table.columns)
        if column.type in (ColumnType.FLOAT, ColumnType.INTEGER)
    ]
    if not numeric_columns:
        return table

    left_as_text = 0
    for row in table.rows:
        for index, column_type in numeric_columns:
            cell = row[index]
            if not isinstance(cell, str):
                continue
            if column_type == ColumnType.FLOAT:
                value = parse_float(cell)
            else:
                value = parse_integer(cell)
            if value is None:
                left_as_text += 1
            else:
                row[index] = value

    logger.info(
        "column_types_converted",
        source=table.source,
        numeric_columns=len(numeric_columns),
        rows=table.row_count,
        cells_left_as_text=left_as_text,
    )
    return table
