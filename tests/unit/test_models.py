"""Unit tests for Pydantic table and reader configuration models."""
import pytest
from pydantic import ValidationError

from csv2xlsx.models.table import Column, ColumnType, Table
from csv2xlsx.models.reader_config import ReaderConfig


class TestColumn:
    """Test Column model."""

    def test_column_defaults_to_string_type(self):
        """Verify a new column starts as STRING."""
        column = Column(name="price")

        assert column.name == "price"
        assert column.type == ColumnType.STRING

    def test_column_type_can_be_upgraded(self):
        """Verify the column type is mutable."""
        column = Column(name="price")
        column.type = ColumnType.FLOAT

        assert column.type == ColumnType.FLOAT

    def test_column_name_is_immutable(self):
        """Verify the column name cannot be reassigned after creation."""
        column = Column(name="price")

        with pytest.raises(ValidationError):
            column.name = "cost"


class TestTable:
    """Test Table model."""

    def test_empty_table(self):
        """Verify an empty table has no columns, rows or header names."""
        table = Table()

        assert table.column_count == 0
        assert table.row_count == 0
        assert table.header_names() == []

    def test_header_names_preserve_order(self):
        """Verify header_names() returns names in column order."""
        table = Table(columns=[Column(name="Column1"), Column(name="Column2"), Column(name="Column3")])

        assert table.header_names() == ["Column1", "Column2", "Column3"]

    def test_rows_keep_cell_variants(self):
        """Verify text, int and float cells survive validation unchanged."""
        table = Table(
            columns=[Column(name="a"), Column(name="b"), Column(name="c")],
            rows=[["x", 1, 2.5]],
        )

        assert table.rows == [["x", 1, 2.5]]
        assert isinstance(table.rows[0][1], int)
        assert isinstance(table.rows[0][2], float)

    def test_row_width_must_match_columns(self):
        """Verify a row with the wrong number of cells is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Table(columns=[Column(name="a"), Column(name="b")], rows=[["1"]])

        assert "row 0 has 1 cells, expected 2" in str(exc_info.value)

    def test_delimiter_must_be_single_character(self):
        """Verify the delimiter is one character."""
        with pytest.raises(ValidationError):
            Table(delimiter=";;")

    def test_column_types(self):
        """Verify column_types() mirrors the column list."""
        table = Table(columns=[Column(name="a", type=ColumnType.INTEGER), Column(name="b")])

        assert table.column_types() == [ColumnType.INTEGER, ColumnType.STRING]


class TestReaderConfig:
    """Test ReaderConfig validation."""

    def test_valid_config_with_defaults(self):
        """Verify defaults are applied."""
        config = ReaderConfig(file_path="data.csv")

        assert config.delimiter == ","
        assert config.encoding == "utf-8"

    def test_file_path_is_stripped(self):
        """Verify surrounding whitespace is removed from file_path."""
        config = ReaderConfig(file_path="  data.csv  ")

        assert config.file_path == "data.csv"

    def test_blank_file_path_rejected(self):
        """Verify whitespace-only file_path is rejected."""
        with pytest.raises(ValidationError):
            ReaderConfig(file_path="   ")

    def test_empty_delimiter_rejected(self):
        """Verify an empty delimiter is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ReaderConfig(file_path="data.csv", delimiter="")

        assert "delimiter cannot be empty" in str(exc_info.value)

    @pytest.mark.parametrize("delimiter", [";;", '"', "\n", "\r"])
    def test_unusable_delimiters_rejected(self, delimiter):
        """Verify multi-character, quote and newline delimiters are rejected."""
        with pytest.raises(ValidationError):
            ReaderConfig(file_path="data.csv", delimiter=delimiter)

    @pytest.mark.parametrize("delimiter", [",", ";", "\t", "|"])
    def test_common_delimiters_accepted(self, delimiter):
        """Verify common single-character delimiters are accepted."""
        assert ReaderConfig(file_path="data.csv", delimiter=delimiter).delimiter == delimiter
