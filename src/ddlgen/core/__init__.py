"""Core types for ddlgen."""

from ddlgen.core.types import (
    ColumnRefSpec,
    ColumnSpec,
    DataModelSpec,
    Dialect,
    ElementSpec,
    EntitySpec,
    EntitySummary,
    FileExtension,
    ForeignKeyInfo,
    GenerationOptions,
    GenerationResult,
    RelationshipEndSpec,
)

__all__ = [
    "Dialect",
    "FileExtension",
    "GenerationOptions",
    "GenerationResult",
    "ColumnRefSpec",
    "ColumnSpec",
    "RelationshipEndSpec",
    "EntitySpec",
    "ElementSpec",
    "DataModelSpec",
    "ForeignKeyInfo",
    "EntitySummary",
]
