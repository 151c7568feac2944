"""Error handling module."""
from csv2xlsx.errors.exceptions import (
    Csv2XlsxError,
    ValidationError,
    ReaderError,
    SourceUnavailableError,
    EmptySourceError,
    MalformedRecordError,
    IngestionError,
    InvalidInputFormatError,
    AggregatedReadError,
    NoValidSourcesError,
    MergeError,
    NoInputTablesError,
    SchemaMismatchError,
    OutputPathError,
)

__all__ = [
    "Csv2XlsxError",
    "ValidationError",
    "ReaderError",
    "SourceUnavailableError",
    "EmptySourceError",
    "MalformedRecordError",
    "IngestionError",
    "InvalidInputFormatError",
    "AggregatedReadError",
    "NoValidSourcesError",
    "MergeError",
    "NoInputTablesError",
    "SchemaMismatchError",
    "OutputPathError",
]
