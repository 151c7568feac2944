"""Command line interface for converting and merging CSV files.

Usage:
    csv2xlsx convert -i data.csv [-o out.xlsx | -n name] [-d ';'] [-c]
    csv2xlsx merge (-f a.csv,b.csv | -F folder) -o merged.xlsx [-d ';'] [-c]
"""
import argparse
import sys
from typing import List, Optional

import structlog

from csv2xlsx import __version__
from csv2xlsx.config import configure_logging, get_settings
from csv2xlsx.errors.exceptions import Csv2XlsxError, InvalidInputFormatError
from csv2xlsx.models.table import Table
from csv2xlsx.parsers.csv_parser import read_table
from csv2xlsx.services.excel_writer import save_as_excel
from csv2xlsx.services.ingestion import check_reader_options, ingest
from csv2xlsx.services.paths import derive_output_path, discover_csv_files
from csv2xlsx.services.type_inference import convert_column_types

logger = structlog.get_logger(__name__)


def _finish(table: Table, output_path, convert: bool) -> None:
    if convert:
        convert_column_types(table)
    path = save_as_excel(table, output_path)
    print(
        f"Successfully converted {table.row_count} records "
        f"with {table.column_count} columns to {path}"
    )


def run_convert(args: argparse.Namespace) -> None:
    """Convert a single CSV file."""
    check_reader_options(args.delimiter, get_settings().encoding)
    extension = get_settings().input_extension
    if not args.input.lower().endswith(extension.lower()):
        raise InvalidInputFormatError(
            f"Invalid input file format. Please provide a {extension} file."
        )

    table = read_table(args.input, args.delimiter)
    output_path = derive_output_path(args.input, output=args.output, name=args.name)
    _finish(table, output_path, args.convert)


def run_merge(args: argparse.Namespace) -> None:
    """Merge several CSV files into one workbook."""
    check_reader_options(args.delimiter, get_settings().encoding)
    if args.folder:
        files = discover_csv_files(args.folder)
    else:
        files = [path for path in args.files.split(",") if path.strip()]

    logger.debug("merge_inputs_resolved", files=files)
    table = ingest(files, args.delimiter)
    _finish(table, args.output, args.convert)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="csv2xlsx",
        description="Convert CSV files to Excel format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file, output next to the input as data.xlsx
  csv2xlsx convert --input data.csv --convert

  # Semicolon separated file with an explicit output
  csv2xlsx convert -i export.csv -d ';' -o /tmp/export.xlsx

  # Merge files or every CSV file in a folder
  csv2xlsx merge --files jan.csv,feb.csv --output q1.xlsx
  csv2xlsx merge --folder ./monthly --output year.xlsx
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a single CSV file")
    convert.add_argument(
        "-i", "--input",
        required=True,
        help="Path to the input CSV file"
    )
    output_group = convert.add_mutually_exclusive_group()
    output_group.add_argument(
        "-o", "--output",
        help="Path to the output Excel file"
    )
    output_group.add_argument(
        "-n", "--name",
        help="Name of the output Excel file, written next to the input"
    )
    convert.set_defaults(handler=run_convert)

    merge = subparsers.add_parser("merge", help="Merge multiple CSV files into a single Excel file")
    source_group = merge.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "-f", "--files",
        help="Comma separated list of CSV files to merge"
    )
    source_group.add_argument(
        "-F", "--folder",
        help="Path to the folder containing CSV files"
    )
    merge.add_argument(
        "-o", "--output",
        required=True,
        help="Path to the output Excel file"
    )
    merge.set_defaults(handler=run_merge)

    for sub in (convert, merge):
        sub.add_argument(
            "-d", "--delimiter",
            default=settings.default_delimiter,
            help=f"Delimiter for CSV file (default: {settings.default_delimiter!r})"
        )
        sub.add_argument(
            "-c", "--convert",
            action="store_true",
            help="Convert column types to inferred types"
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except Csv2XlsxError as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
