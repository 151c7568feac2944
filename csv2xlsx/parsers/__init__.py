"""Parser modules for delimited text sources."""
from csv2xlsx.parsers.base_parser import ParserInterface
from csv2xlsx.parsers.csv_parser import CsvParser, read_table

__all__ = [
    "ParserInterface",
    "CsvParser",
    "read_table",
]
