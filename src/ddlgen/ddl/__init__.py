"""DDL text generation."""

from ddlgen.ddl.formatter import (
    DEFAULT_TYPE,
    format_column,
    format_column_type,
    format_identifier,
    get_indent_string,
    is_reserved_word,
)
from ddlgen.ddl.generator import DDLGenerator, RenderedDDL, generate, write_ddl
from ddlgen.ddl.resolver import (
    ForeignKeyConstraint,
    describe_keys,
    foreign_keys,
    primary_keys,
    resolve_column_constraints,
    resolve_foreign_keys,
    resolve_relationship_constraints,
)
from ddlgen.ddl.writer import CodeWriter

__all__ = [
    "DEFAULT_TYPE",
    "CodeWriter",
    "DDLGenerator",
    "ForeignKeyConstraint",
    "RenderedDDL",
    "describe_keys",
    "foreign_keys",
    "format_column",
    "format_column_type",
    "format_identifier",
    "generate",
    "get_indent_string",
    "is_reserved_word",
    "primary_keys",
    "resolve_column_constraints",
    "resolve_foreign_keys",
    "resolve_relationship_constraints",
    "write_ddl",
]
