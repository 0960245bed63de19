"""ddlgen - SQL DDL generation from entity-relationship data models.

Turns a data model of entities, columns and relationships into one SQL
script: optional DROP TABLE statements, a CREATE TABLE block per entity,
then ALTER TABLE statements adding the foreign keys. Relationship ends with
cardinality "1" are merged with the columns that implement them into
(possibly composite) foreign keys.

Example:
    from ddlgen import GenerationOptions, generate, load_model

    model = load_model("shop.json")
    generate(model, "shop.sql", GenerationOptions(dbms="oracle", drop_table=False))
"""

from ddlgen.core.types import (
    ColumnSpec,
    DataModelSpec,
    Dialect,
    EntitySpec,
    EntitySummary,
    FileExtension,
    ForeignKeyInfo,
    GenerationOptions,
    GenerationResult,
    RelationshipEndSpec,
)
from ddlgen.ddl import (
    DDLGenerator,
    ForeignKeyConstraint,
    describe_keys,
    format_column,
    format_column_type,
    format_identifier,
    generate,
    resolve_foreign_keys,
)
from ddlgen.exceptions import (
    DDLGenError,
    DDLWriteError,
    EntityNotFoundError,
    ModelLoadError,
    PreferencesError,
)
from ddlgen.preferences import get_gen_options, resolve_options
from ddlgen.schema import (
    Column,
    ColumnRef,
    DataModel,
    Entity,
    NodeKind,
    OtherElement,
    RelationshipEnd,
    build_model,
    load_model,
    model_from_dict,
)

__version__ = "0.1.0"

__all__ = [
    # Generation
    "DDLGenerator",
    "generate",
    "ForeignKeyConstraint",
    "resolve_foreign_keys",
    "describe_keys",
    "format_identifier",
    "format_column",
    "format_column_type",
    # Model
    "DataModel",
    "Entity",
    "Column",
    "ColumnRef",
    "RelationshipEnd",
    "OtherElement",
    "NodeKind",
    "build_model",
    "load_model",
    "model_from_dict",
    # Types
    "Dialect",
    "FileExtension",
    "GenerationOptions",
    "GenerationResult",
    "ColumnSpec",
    "EntitySpec",
    "RelationshipEndSpec",
    "DataModelSpec",
    "ForeignKeyInfo",
    "EntitySummary",
    # Preferences
    "get_gen_options",
    "resolve_options",
    # Exceptions
    "DDLGenError",
    "DDLWriteError",
    "EntityNotFoundError",
    "ModelLoadError",
    "PreferencesError",
]
