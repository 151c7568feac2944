"""Custom exception hierarchy for CSV conversion errors."""
from typing import Any, Dict, List, Optional


class Csv2XlsxError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with message and optional context."""
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(Csv2XlsxError):
    """Raised when reader or CLI configuration is invalid."""
    pass


class ReaderError(Csv2XlsxError):
    """Base class for failures while reading a single delimited source."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        self.source = source
        super().__init__(message, **kwargs)


class SourceUnavailableError(ReaderError):
    """Raised when a source cannot be opened or read."""
    pass


class EmptySourceError(ReaderError):
    """Raised when a source contains no records at all."""
    pass


class MalformedRecordError(ReaderError):
    """Raised when a record cannot be tokenized with the given delimiter."""
    pass


class IngestionError(Csv2XlsxError):
    """Base class for multi-source ingestion failures."""
    pass


class InvalidInputFormatError(IngestionError):
    """Raised when an input path does not carry the recognized extension."""
    pass


class AggregatedReadError(IngestionError):
    """Raised when one or more concurrent reads failed.

    Carries every underlying reader error, in input order, rather than
    only the first one.
    """

    def __init__(self, errors: List[Exception]):
        self.errors = list(errors)
        summary = "; ".join(str(e) for e in self.errors)
        super().__init__(
            f"encountered {len(self.errors)} error(s) while reading files: {summary}",
            details={"error_count": len(self.errors)},
        )


class NoValidSourcesError(IngestionError):
    """Raised when there is nothing to merge after a successful fan-out."""
    pass


class MergeError(Csv2XlsxError):
    """Base class for merge failures."""
    pass


class NoInputTablesError(MergeError):
    """Raised when merge is called without any tables."""
    pass


class SchemaMismatchError(MergeError):
    """Raised when tables to be merged differ in column count."""
    pass


class OutputPathError(Csv2XlsxError):
    """Raised when the workbook destination cannot be written."""
    pass
