"""Identifier and column type formatting.

Quote characters and reserved words come from the SQLAlchemy dialects, so
MySQL identifiers are wrapped in backticks and Oracle identifiers in double
quotes. Embedded quote characters are not escaped.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.dialects import mysql, oracle

from ddlgen.core.types import Dialect, GenerationOptions

if TYPE_CHECKING:
    from sqlalchemy.sql.compiler import IdentifierPreparer

    from ddlgen.schema.models import Column

DEFAULT_TYPE = "INTEGER"

_SQLALCHEMY_DIALECTS = {
    Dialect.MYSQL: mysql.dialect,
    Dialect.ORACLE: oracle.dialect,
}


@lru_cache(maxsize=None)
def get_preparer(dialect: Dialect | str) -> IdentifierPreparer:
    """Return the SQLAlchemy identifier preparer for a dialect."""
    return _SQLALCHEMY_DIALECTS[Dialect(dialect)]().identifier_preparer


def format_identifier(name: str, quote: bool, dialect: Dialect | str = Dialect.MYSQL) -> str:
    """Return ``name`` wrapped in the dialect's quotes when ``quote`` is set."""
    if not quote:
        return name
    preparer = get_preparer(dialect)
    return f"{preparer.initial_quote}{name}{preparer.final_quote}"


def is_reserved_word(name: str, dialect: Dialect | str = Dialect.MYSQL) -> bool:
    """Check whether ``name`` is a reserved word of the dialect."""
    return name.lower() in get_preparer(dialect).reserved_words


def format_column_type(column: Column) -> str:
    """Return the column's type string, or INTEGER when none is declared."""
    type_string = column.get_type_string()
    if not type_string.strip():
        return DEFAULT_TYPE
    return type_string


def format_column(column: Column, options: GenerationOptions) -> str:
    """Return the column clause used inside CREATE TABLE.

    Primary keys are always NOT NULL, whatever their nullable flag says.
    """
    line = f"{format_identifier(column.name, options.quote_identifiers, options.dbms)} "
    line += format_column_type(column)
    if column.primary_key or not column.nullable:
        line += " NOT NULL"
    return line


def get_indent_string(options: GenerationOptions) -> str:
    """Return one indentation unit."""
    if options.use_tab:
        return "\t"
    return " " * options.indent_spaces
