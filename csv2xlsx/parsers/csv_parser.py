"""CSV file parser implementation."""
import io
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import structlog
from pydantic import ValidationError as PydanticValidationError

from csv2xlsx.parsers.base_parser import ParserInterface
from csv2xlsx.models.reader_config import ReaderConfig
from csv2xlsx.models.table import Column, Row, Table
from csv2xlsx.errors.exceptions import (
    EmptySourceError,
    MalformedRecordError,
    ReaderError,
    SourceUnavailableError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

FALLBACK_ENCODING = "latin-1"


class CsvParser(ParserInterface):
    """Parser for reading delimited text files into a Table.

    The first record supplies the column names; every later record becomes
    a row of text cells. No type conversion happens here, that is left to
    the type inference service.

    Features:
    - Any single-character delimiter (comma, semicolon, tab, pipe, ...)
    - Quoted fields with embedded delimiters, quotes and newlines
    - Blank lines skipped
    - Records must match the header width, misplaced quotes are rejected
    - latin-1 fallback when the configured encoding cannot decode the file
    """

    def get_parser_name(self) -> str:
        """Return parser identifier."""
        return "csv"

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate parser-specific configuration.

        Raises:
            ValidationError: If configuration is invalid with detailed message
        """
        self._load_config(config)
        return True

    def parse(self, config: Dict[str, Any]) -> Table:
        """Read a CSV file into a Table.

        Args:
            config: Parser configuration dictionary (validated as ReaderConfig)

        Returns:
            Table whose columns are all STRING and whose cells are text

        Raises:
            ValidationError: If the configuration is invalid
            SourceUnavailableError: If the file cannot be opened or read
            EmptySourceError: If the file holds no records
            MalformedRecordError: If a record cannot be tokenized
        """
        parsed_config = self._load_config(config)
        file_path = parsed_config.file_path

        log = logger.bind(file_path=file_path, delimiter=parsed_config.delimiter)

        try:
            try:
                records = self._read_records(parsed_config, parsed_config.encoding)
            except UnicodeDecodeError as e:
                if parsed_config.encoding.lower().replace("_", "-") in ("latin-1", "latin1", "iso-8859-1"):
                    raise
                log.warning("decode_failed_trying_latin1", encoding=parsed_config.encoding, error=str(e))
                records = self._read_records(parsed_config, FALLBACK_ENCODING)
        except pd.errors.EmptyDataError as e:
            raise EmptySourceError(f"no records found in {file_path}", source=file_path) from e
        except pd.errors.ParserError as e:
            raise MalformedRecordError(f"malformed record in {file_path}: {e}", source=file_path) from e
        except OSError as e:
            raise SourceUnavailableError(f"cannot read {file_path}: {e}", source=file_path) from e
        except Exception as e:
            if isinstance(e, ReaderError):
                raise
            raise SourceUnavailableError(
                f"unexpected error while reading {file_path}: {e}", source=file_path
            ) from e

        if not records:
            raise EmptySourceError(f"no records found in {file_path}", source=file_path)

        header, data = records[0], records[1:]
        columns = [Column(name=name) for name in header]
        log.debug("csv_headers_read", headers=header, row_count=len(data))

        table = Table(
            source=file_path,
            delimiter=parsed_config.delimiter,
            columns=columns,
            rows=data,
        )

        log.info("csv_parse_completed", columns=table.column_count, rows=table.row_count)
        return table

    def _load_config(self, config: Dict[str, Any]) -> ReaderConfig:
        try:
            return ReaderConfig(**config)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid CSV configuration: {e}") from e

    def _read_records(self, config: ReaderConfig, encoding: str) -> List[Row]:
        """Tokenize the whole file, header included, into rows of text.

        Raises:
            MalformedRecordError: On a misplaced quote or a record whose
                field count differs from the header's
        """
        with open(config.file_path, "r", encoding=encoding, newline="") as handle:
            text = handle.read()

        problem = _find_malformed_record(text, config.delimiter)
        if problem is not None:
            line, reason = problem
            raise MalformedRecordError(
                f"malformed record in {config.file_path}: {reason} on line {line}",
                source=config.file_path,
                details={"line": line},
            )

        # The python engine accepts any single-character delimiter, multi-byte
        # ones included, and tokenizes with a strict csv dialect
        df = pd.read_csv(
            io.StringIO(text),
            sep=config.delimiter,
            engine="python",
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
        )
        return [list(record) for record in df.itertuples(index=False, name=None)]


def _find_malformed_record(text: str, delimiter: str) -> Optional[Tuple[int, str]]:
    """Return (line, reason) for the first malformed record, or None.

    A quote may only open a field or appear doubled inside a quoted field,
    and a closing quote must be followed by a delimiter or a line break.
    Every non-blank record must have as many fields as the first one.
    """
    line = record_line = 1
    expected: Optional[int] = None
    fields = 1
    blank = True
    in_quotes, field_start, closed = False, True, False

    def end_record() -> Optional[Tuple[int, str]]:
        nonlocal expected
        if blank:
            return None
        if expected is None:
            expected = fields
        elif fields != expected:
            return record_line, f"record has {fields} fields, expected {expected}"
        return None

    i = 0
    while i < len(text):
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if text.startswith('""', i):
                    blank = False
                    i += 2
                    continue
                in_quotes, closed = False, True
            else:
                if ch == "\n":
                    line += 1
                if not ch.isspace():
                    blank = False
        elif ch in "\r\n":
            problem = end_record()
            if problem is not None:
                return problem
            if ch == "\n":
                line += 1
            record_line = line
            fields, blank = 1, True
            field_start, closed = True, False
        elif ch == delimiter:
            fields += 1
            blank = False
            field_start, closed = True, False
        elif closed:
            return line, f"extraneous {ch!r} after closing quote"
        elif ch == '"':
            if not field_start:
                return line, "bare quote in unquoted field"
            in_quotes, field_start = True, False
        else:
            field_start = False
            if not ch.isspace():
                blank = False
        i += 1

    if in_quotes:
        return record_line, "unterminated quoted field"
    return end_record()


def read_table(file_path: str, delimiter: str = ",", encoding: Optional[str] = None) -> Table:
    """Read one delimited file with the CSV parser."""
    config: Dict[str, Any] = {"file_path": file_path, "delimiter": delimiter}
    if encoding:
        config["encoding"] = encoding
    return CsvParser().parse(config)
