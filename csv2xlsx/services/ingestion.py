"""Concurrent reading and merging of several delimited files.

Every path gets its own read task on a thread pool. Results are joined
in input order, so the merged rows follow the order the paths were
given in regardless of which read finished first. Reads are all or
nothing: a single failure discards every successful table.
"""
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog
from pydantic import ValidationError as PydanticValidationError

from csv2xlsx.config import get_settings
from csv2xlsx.errors.exceptions import (
    AggregatedReadError,
    InvalidInputFormatError,
    NoValidSourcesError,
    ValidationError,
)
from csv2xlsx.models.reader_config import ReaderConfig
from csv2xlsx.models.table import Table
from csv2xlsx.parsers.csv_parser import CsvParser
from csv2xlsx.services.merge import merge_tables

logger = structlog.get_logger(__name__)


@dataclass
class ReadResult:
    """Outcome of reading a single path: a table or the error that stopped it."""

    file_path: str
    table: Optional[Table] = None
    error: Optional[Exception] = None


def _validate_paths(paths: Sequence[str], extension: str) -> List[str]:
    cleaned = []
    for path in paths:
        path = path.strip()
        if not path.lower().endswith(extension.lower()):
            raise InvalidInputFormatError(
                f"invalid input file format for {path!r}, please provide a {extension} file",
                details={"file_path": path, "expected_extension": extension},
            )
        cleaned.append(path)
    return cleaned


def check_reader_options(delimiter: str, encoding: str) -> None:
    """Reject an unusable delimiter or encoding before any file is touched."""
    try:
        ReaderConfig(file_path="-", delimiter=delimiter, encoding=encoding)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid reader configuration: {e}") from e


def _read_one(parser: CsvParser, config: ReaderConfig) -> ReadResult:
    try:
        table = parser.parse(config.model_dump())
    except Exception as e:
        logger.warning("file_read_failed", file_path=config.file_path, error=str(e))
        return ReadResult(file_path=config.file_path, error=e)
    return ReadResult(file_path=config.file_path, table=table)


def read_all(
    paths: Sequence[str],
    delimiter: str,
    encoding: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> List[ReadResult]:
    """Read every path concurrently and return one result per path, in input order.

    Raises:
        ValidationError: If the delimiter or encoding is unusable
        InvalidInputFormatError: If any path lacks the recognized extension
    """
    settings = get_settings()
    encoding = encoding or settings.encoding

    check_reader_options(delimiter, encoding)

    file_paths = _validate_paths(paths, settings.input_extension)
    if not file_paths:
        return []

    configs = [
        ReaderConfig(file_path=path, delimiter=delimiter, encoding=encoding)
        for path in file_paths
    ]
    workers = min(max_workers or settings.max_workers, len(configs))
    parser = CsvParser()

    log = logger.bind(source_count=len(configs), max_workers=workers)
    log.info("concurrent_read_started")

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="csv-reader") as executor:
        futures: List[Future] = [
            executor.submit(_read_one, parser, config) for config in configs
        ]
        results = [future.result() for future in futures]

    log.info(
        "concurrent_read_completed",
        succeeded=sum(1 for r in results if r.error is None),
        failed=sum(1 for r in results if r.error is not None),
    )
    return results


def ingest(
    paths: Sequence[str],
    delimiter: str,
    encoding: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> Table:
    """Read all paths in parallel and merge them into one table.

    Args:
        paths: Paths to delimited files; merged rows follow this order
        delimiter: Single field delimiter shared by all files
        encoding: File encoding (defaults to settings.encoding)
        max_workers: Upper bound on concurrent reads (defaults to settings.max_workers)

    Returns:
        The merged Table

    Raises:
        ValidationError: If the delimiter is empty or otherwise unusable
        InvalidInputFormatError: If any path lacks the recognized extension
        AggregatedReadError: If one or more files could not be read
        NoValidSourcesError: If no paths were given
        SchemaMismatchError: If the files differ in column count
    """
    results = read_all(paths, delimiter, encoding=encoding, max_workers=max_workers)

    errors = [result.error for result in results if result.error is not None]
    if errors:
        raise AggregatedReadError(errors)

    tables = [result.table for result in results if result.table is not None]
    if not tables:
        raise NoValidSourcesError("no valid CSV files to merge")

    return merge_tables(*tables)
