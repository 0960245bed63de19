"""Core types and specifications for ddlgen.

Input specs describe a data model file; options and results are the
configuration and the outcome of a generation run. All types are pydantic
models so they validate input and serialize to JSON for the CLI.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Dialect(StrEnum):
    """Database families the generated DDL can target."""

    MYSQL = "mysql"
    ORACLE = "oracle"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid dialect values."""
        return [d.value for d in cls]


class FileExtension(StrEnum):
    """Suggested suffixes for generated DDL files."""

    SQL = ".sql"
    DDL = ".ddl"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid file extension values."""
        return [e.value for e in cls]


class GenerationOptions(BaseModel):
    """Options controlling DDL text emission.

    Defaults match the ``ddl.gen.*`` preference defaults.
    """

    quote_identifiers: bool = Field(default=True, description="Quote table and column names")
    drop_table: bool = Field(default=True, description="Drop tables before create")
    dbms: Dialect = Field(default=Dialect.MYSQL, description="Target DBMS")
    use_tab: bool = Field(default=False, description="Indent with a tab instead of spaces")
    indent_spaces: int = Field(default=4, ge=0, description="Spaces per indentation level")
    file_extension: FileExtension = Field(
        default=FileExtension.SQL, description="Suggested output file suffix"
    )

    model_config = {"frozen": True}


class GenerationResult(BaseModel):
    """Outcome of a generation run."""

    written: bool
    path: str | None = None
    dbms: str | None = None
    tables: int = 0
    foreign_keys: int = 0
    size: int = 0


# === Data model file specs ===


class ColumnRefSpec(BaseModel):
    """Reference to a column of another entity."""

    entity: str = Field(..., description="Owning entity of the referenced column")
    column: str = Field(..., description="Referenced column name")


class ColumnSpec(BaseModel):
    """Specification for a column definition.

    ``reference_to`` accepts either ``"Entity.column"`` or
    ``{"entity": ..., "column": ...}``.
    """

    name: str = Field(..., description="Column name")
    type: str = Field(default="", description="SQL type name, INTEGER when empty")
    length: int | str | None = Field(default=None, description="Type length, e.g. 255 or '10,2'")
    primary_key: bool = Field(default=False, alias="primaryKey")
    unique: bool = False
    nullable: bool = True
    foreign_key: bool = Field(default=False, alias="foreignKey")
    reference_to: ColumnRefSpec | None = Field(default=None, alias="referenceTo")

    model_config = {"populate_by_name": True}

    @field_validator("reference_to", mode="before")
    @classmethod
    def _parse_reference(cls, value: Any) -> Any:
        if isinstance(value, str):
            entity, sep, column = value.rpartition(".")
            if not sep or not entity or not column:
                raise ValueError(f"Invalid column reference '{value}'. Expected 'Entity.column'")
            return {"entity": entity, "column": column}
        return value


class RelationshipEndSpec(BaseModel):
    """Specification for a relationship end owned by an entity."""

    name: str = ""
    cardinality: str = Field(default="1", description="'1', '0..1', '0..*', '1..*', ...")
    reference: str = Field(..., description="Target entity name")


class EntitySpec(BaseModel):
    """Specification for an entity (table)."""

    name: str = Field(..., description="Table name")
    columns: list[ColumnSpec] = Field(default_factory=list)
    relationships: list[RelationshipEndSpec] = Field(default_factory=list)


class ElementSpec(BaseModel):
    """Any other element owned by a data model (diagram, note, ...)."""

    name: str = ""


class DataModelSpec(BaseModel):
    """Specification for a whole data model file."""

    name: str = Field(default="DataModel", description="Model name, used for the output file")
    entities: list[EntitySpec] = Field(default_factory=list)
    elements: list[ElementSpec] = Field(default_factory=list)


# === Inspection output ===


class ForeignKeyInfo(BaseModel):
    """A resolved foreign-key constraint (output format)."""

    columns: list[str]
    target_table: str
    target_columns: list[str]


class EntitySummary(BaseModel):
    """Key summary of one entity (output format)."""

    name: str
    columns: int
    primary_keys: list[str]
    unique: list[str]
    foreign_keys: list[ForeignKeyInfo] = Field(default_factory=list)
