"""Services for type inference, merging, concurrent ingestion and output."""
from csv2xlsx.services.type_inference import (
    convert_column_types,
    infer_column_types,
    parse_float,
    parse_integer,
)
from csv2xlsx.services.merge import merge_tables
from csv2xlsx.services.ingestion import ReadResult, check_reader_options, ingest, read_all
from csv2xlsx.services.excel_writer import save_as_excel
from csv2xlsx.services.paths import derive_output_path, discover_csv_files

__all__ = [
    "convert_column_types",
    "infer_column_types",
    "parse_float",
    "parse_integer",
    "merge_tables",
    "ReadResult",
    "check_reader_options",
    "ingest",
    "read_all",
    "save_as_excel",
    "derive_output_path",
    "discover_csv_files",
]
