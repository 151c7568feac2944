"""Workbook sink: persists a Table as a single-sheet XLSX file."""
import math
from pathlib import Path
from typing import Optional, Union

import structlog
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from csv2xlsx.config import get_settings
from csv2xlsx.errors.exceptions import OutputPathError
from csv2xlsx.models.table import CellValue, Table

logger = structlog.get_logger(__name__)

# Excel sheet name limit
MAX_SHEET_NAME_LENGTH = 31


def _cell_value(value: CellValue) -> CellValue:
    """Map a table cell onto the value openpyxl should store."""
    if isinstance(value, str):
        # Control characters are rejected by openpyxl
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    if isinstance(value, float) and not math.isfinite(value):
        # XLSX has no numeric encoding for NaN or infinity
        return str(value)
    if isinstance(value, (int, float)):
        return value
    raise TypeError(f"unsupported cell value type: {type(value).__name__}")


def save_as_excel(
    table: Table,
    output_path: Union[str, Path],
    sheet_name: Optional[str] = None,
) -> Path:
    """Write the header row and every row of a table to an XLSX workbook.

    Args:
        table: Table to persist
        output_path: Destination .xlsx file
        sheet_name: Worksheet title (defaults to settings.default_sheet_name)

    Returns:
        Path of the written workbook

    Raises:
        OutputPathError: If the destination directory does not exist or the
            file cannot be written
    """
    path = Path(output_path)
    if not path.parent.is_dir():
        raise OutputPathError(
            f"Invalid output path: {path.parent}",
            details={"output_path": str(path)},
        )

    title = (sheet_name or get_settings().default_sheet_name)[:MAX_SHEET_NAME_LENGTH]
    log = logger.bind(output_path=str(path), sheet_name=title)

    wb = Workbook()
    ws = wb.active
    ws.title = title

    ws.append([_cell_value(name) for name in table.header_names()])
    for row in table.rows:
        ws.append([_cell_value(value) for value in row])

    try:
        wb.save(path)
    except OSError as e:
        raise OutputPathError(f"Failed to write workbook {path}: {e}") from e
    finally:
        wb.close()

    log.info("workbook_saved", rows=table.row_count, columns=table.column_count)
    return path
