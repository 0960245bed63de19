"""ER data model for ddlgen."""

from ddlgen.schema.loader import build_model, load_model, model_from_dict
from ddlgen.schema.models import (
    Column,
    ColumnRef,
    DataModel,
    Entity,
    NodeKind,
    OtherElement,
    RelationshipEnd,
)

__all__ = [
    "Column",
    "ColumnRef",
    "DataModel",
    "Entity",
    "NodeKind",
    "OtherElement",
    "RelationshipEnd",
    "build_model",
    "load_model",
    "model_from_dict",
]
