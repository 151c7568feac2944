"""Abstract parser interface for delimited text sources."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from csv2xlsx.models.table import Table


class ParserInterface(ABC):
    """Abstract base class for all table readers.

    Implementations must provide:
    - parse(): Read a source into a Table
    - validate_config(): Verify reader-specific configuration
    - get_parser_name(): Return unique parser identifier
    """

    @abstractmethod
    def parse(self, config: Dict[str, Any]) -> Table:
        """Read a source and return it as a Table.

        Parsing blocks until the whole source has been consumed; callers
        wanting concurrency run parsers on worker threads.

        Args:
            config: Parser-specific configuration dictionary containing
                   source location, delimiter, encoding, etc.

        Returns:
            Table with STRING-typed columns and text cells

        Raises:
            ValidationError: If the configuration is invalid
            ReaderError: If the source cannot be read or tokenized
        """
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate parser-specific configuration before parsing.

        Returns:
            True if configuration is valid

        Raises:
            ValidationError: If configuration is invalid with detailed message
        """
        pass

    @abstractmethod
    def get_parser_name(self) -> str:
        """Return unique identifier for this parser type (e.g., "csv")."""
        pass
