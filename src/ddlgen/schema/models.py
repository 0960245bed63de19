"""In-memory ER data model consumed by the DDL generator.

Every node carries a ``kind`` tag from a closed set, so the generator
dispatches on the tag instead of on Python classes. Cross references
(``Column.reference_to``, ``RelationshipEnd.reference``) are name handles
resolved through the owning ``DataModel``; no node links to another.
All nodes are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Union

from ddlgen.exceptions import EntityNotFoundError


class NodeKind(StrEnum):
    """Kinds of model nodes."""

    DATA_MODEL = "data_model"
    ENTITY = "entity"
    COLUMN = "column"
    RELATIONSHIP_END = "relationship_end"
    OTHER = "other"


@dataclass(frozen=True)
class ColumnRef:
    """Lookup handle for a column of an entity."""

    entity: str
    column: str

    def __str__(self) -> str:
        return f"{self.entity}.{self.column}"


@dataclass(frozen=True)
class Column:
    """A table column."""

    name: str
    type: str = ""
    length: int | str | None = None
    primary_key: bool = False
    unique: bool = False
    nullable: bool = True
    foreign_key: bool = False
    reference_to: ColumnRef | None = None
    kind: NodeKind = field(default=NodeKind.COLUMN, init=False)

    def get_type_string(self) -> str:
        """Return the declared type with its length, e.g. ``VARCHAR(255)``."""
        if self.length not in (None, "") and self.type.strip():
            return f"{self.type}({self.length})"
        return self.type


@dataclass(frozen=True)
class RelationshipEnd:
    """An association end owned by an entity, pointing at another entity."""

    reference: str
    cardinality: str = "1"
    name: str = ""
    kind: NodeKind = field(default=NodeKind.RELATIONSHIP_END, init=False)


@dataclass(frozen=True)
class Entity:
    """A modeled table."""

    name: str
    columns: tuple[Column, ...] = ()
    relationship_ends: tuple[RelationshipEnd, ...] = ()
    kind: NodeKind = field(default=NodeKind.ENTITY, init=False)

    def column(self, name: str) -> Column | None:
        """Return the column with the given name, if any."""
        for col in self.columns:
            if col.name == name:
                return col
        return None


@dataclass(frozen=True)
class OtherElement:
    """Any element of a data model that produces no DDL (diagrams, notes)."""

    name: str = ""
    kind: NodeKind = field(default=NodeKind.OTHER, init=False)


ModelNode = Union["DataModel", Entity, Column, RelationshipEnd, OtherElement]


@dataclass(frozen=True)
class DataModel:
    """An ordered collection of entities and other elements."""

    name: str
    owned_elements: tuple[Entity | OtherElement, ...] = ()
    kind: NodeKind = field(default=NodeKind.DATA_MODEL, init=False)

    @property
    def entities(self) -> list[Entity]:
        """Entities in model order."""
        return [e for e in self.owned_elements if e.kind == NodeKind.ENTITY]  # type: ignore[misc]

    def find_entity(self, name: str) -> Entity | None:
        """Return the entity named ``name``, or None."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None

    def entity(self, name: str) -> Entity:
        """Return the entity named ``name``.

        Raises:
            EntityNotFoundError: If no entity has that name
        """
        entity = self.find_entity(name)
        if entity is None:
            raise EntityNotFoundError(name, [e.name for e in self.entities])
        return entity

    def resolve(self, ref: ColumnRef) -> Column | None:
        """Follow a column reference, or return None when it dangles."""
        entity = self.find_entity(ref.entity)
        if entity is None:
            return None
        return entity.column(ref.column)
