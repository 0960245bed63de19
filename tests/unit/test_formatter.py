"""Tests for identifier and column type formatting."""

from ddlgen.core.types import Dialect, GenerationOptions
from ddlgen.ddl.formatter import (
    DEFAULT_TYPE,
    format_column,
    format_column_type,
    format_identifier,
    get_indent_string,
    is_reserved_word,
)
from ddlgen.schema.models import Column


class TestFormatIdentifier:
    """Tests for identifier quoting."""

    def test_quoted_mysql(self):
        """MySQL identifiers are wrapped in backticks."""
        assert format_identifier("orders", True) == "`orders`"

    def test_unquoted(self):
        """Unquoted identifiers are returned unchanged."""
        assert format_identifier("orders", False) == "orders"
        assert format_identifier("orders", False, Dialect.ORACLE) == "orders"

    def test_quoted_oracle(self):
        """Oracle identifiers are wrapped in double quotes."""
        assert format_identifier("orders", True, Dialect.ORACLE) == '"orders"'
        assert format_identifier("orders", True, "oracle") == '"orders"'

    def test_embedded_quotes_not_escaped(self):
        """Embedded quote characters are left as they are."""
        assert format_identifier("we`ird", True) == "`we`ird`"


class TestReservedWords:
    """Tests for reserved word detection."""

    def test_order_is_reserved(self):
        assert is_reserved_word("Order", Dialect.MYSQL)
        assert is_reserved_word("ORDER", Dialect.ORACLE)

    def test_regular_name_is_not_reserved(self):
        assert not is_reserved_word("customer_id", Dialect.MYSQL)
        assert not is_reserved_word("customer_id", Dialect.ORACLE)


class TestFormatColumnType:
    """Tests for column type strings."""

    def test_declared_type(self):
        assert format_column_type(Column("name", "VARCHAR")) == "VARCHAR"

    def test_length_appended(self):
        """Length is rendered in parentheses after the type."""
        assert format_column_type(Column("name", "VARCHAR", length=255)) == "VARCHAR(255)"
        assert format_column_type(Column("price", "DECIMAL", length="10,2")) == "DECIMAL(10,2)"

    def test_empty_type_defaults_to_integer(self):
        assert format_column_type(Column("n", "")) == DEFAULT_TYPE == "INTEGER"

    def test_whitespace_type_defaults_to_integer(self):
        assert format_column_type(Column("n", "   ")) == "INTEGER"

    def test_length_without_type_is_ignored(self):
        assert format_column_type(Column("n", "", length=10)) == "INTEGER"


class TestFormatColumn:
    """Tests for column clauses."""

    def test_nullable_column(self):
        options = GenerationOptions(quote_identifiers=False)
        assert format_column(Column("name", "VARCHAR", length=50), options) == "name VARCHAR(50)"

    def test_not_nullable_column(self):
        options = GenerationOptions(quote_identifiers=False)
        column = Column("name", "TEXT", nullable=False)
        assert format_column(column, options) == "name TEXT NOT NULL"

    def test_primary_key_forces_not_null(self):
        """Primary keys are NOT NULL even when flagged nullable."""
        options = GenerationOptions(quote_identifiers=False)
        column = Column("id", "", primary_key=True, nullable=True)
        assert format_column(column, options) == "id INTEGER NOT NULL"

    def test_quoted_column(self):
        options = GenerationOptions()
        assert format_column(Column("id", "INTEGER"), options) == "`id` INTEGER"

    def test_quoted_oracle_column(self):
        options = GenerationOptions(dbms="oracle")
        assert format_column(Column("id", "NUMBER"), options) == '"id" NUMBER'


class TestIndentString:
    """Tests for the indentation unit."""

    def test_default_four_spaces(self):
        assert get_indent_string(GenerationOptions()) == "    "

    def test_custom_spaces(self):
        assert get_indent_string(GenerationOptions(indent_spaces=2)) == "  "

    def test_tab(self):
        assert get_indent_string(GenerationOptions(use_tab=True, indent_spaces=2)) == "\t"
