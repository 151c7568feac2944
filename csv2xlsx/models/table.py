"""Pydantic models for parsed delimited tables."""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator


# A cell holds text as read, or the number it was coerced to.
CellValue = Union[str, int, float]
Row = List[CellValue]


class ColumnType(str, Enum):
    """Semantic column types assigned by type inference."""
    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"


class Column(BaseModel):
    """A column read from the header row together with its inferred type."""

    name: str = Field(
        ...,
        frozen=True,
        description="Header text, exactly as read"
    )
    type: ColumnType = Field(
        default=ColumnType.STRING,
        description="Inferred semantic type (STRING until inference upgrades it)"
    )


class Table(BaseModel):
    """In-memory representation of one delimited source.

    Every row holds exactly one cell per column, in column order. Cells
    start out as text and may be replaced by int or float values once
    their column type has been inferred.
    """

    source: Optional[str] = Field(
        default=None,
        description="Path of the file the table was read from (None for merged tables)"
    )
    delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter the source was read with"
    )
    columns: List[Column] = Field(default_factory=list)
    rows: List[Row] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure every row has one cell per column."""
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f"row {index} has {len(row)} cells, expected {width}"
                )
        return self

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def header_names(self) -> List[str]:
        """Return the column names in order."""
        return [column.name for column in self.columns]

    def column_types(self) -> List[ColumnType]:
        return [column.type for column in self.columns]
