"""Merging of tables that share a column layout."""
from typing import List

import structlog

from csv2xlsx.errors.exceptions import NoInputTablesError, SchemaMismatchError
from csv2xlsx.models.table import Row, Table

logger = structlog.get_logger(__name__)


def merge_tables(*tables: Table) -> Table:
    """Concatenate tables into one, in the order given.

    The result takes its columns and delimiter from the first table. Only
    the column count is checked; differing column names are logged but
    accepted.

    Raises:
        NoInputTablesError: If no tables are given
        SchemaMismatchError: If any table's column count differs from the first
    """
    if not tables:
        raise NoInputTablesError("no files to merge")

    first = tables[0]
    for table in tables[1:]:
        if table.column_count != first.column_count:
            raise SchemaMismatchError(
                f"inconsistent number of columns in either {table.source} or {first.source}",
                details={
                    "expected_columns": first.column_count,
                    "actual_columns": table.column_count,
                    "source": table.source,
                },
            )
        if table.header_names() != first.header_names():
            logger.warning(
                "merge_header_names_differ",
                source=table.source,
                expected=first.header_names(),
                actual=table.header_names(),
            )

    merged_rows: List[Row] = []
    for table in tables:
        merged_rows.extend(table.rows)

    merged = Table.model_construct(
        source=None,
        delimiter=first.delimiter,
        columns=[column.model_copy() for column in first.columns],
        rows=merged_rows,
    )

    logger.info(
        "tables_merged",
        table_count=len(tables),
        columns=merged.column_count,
        rows=merged.row_count,
    )
    return merged
