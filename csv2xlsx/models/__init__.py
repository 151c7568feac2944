"""Pydantic models for tables and reader configuration."""
from csv2xlsx.models.table import CellValue, Column, ColumnType, Row, Table
from csv2xlsx.models.reader_config import ReaderConfig

__all__ = [
    "CellValue",
    "Column",
    "ColumnType",
    "Row",
    "Table",
    "ReaderConfig",
]
