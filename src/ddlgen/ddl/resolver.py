"""Foreign-key constraint resolution.

An entity's foreign-key columns become constraints in two passes:

1. Relationship ends with cardinality "1" claim the columns that reference
   every primary-key column of their target entity, yielding one (possibly
   composite) constraint per end. Ends that match only part of the target's
   primary key claim nothing.
2. Each foreign-key column left over becomes a single-column constraint,
   provided it references something.

Every referencing foreign-key column ends up in exactly one constraint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ddlgen.core.types import EntitySummary, ForeignKeyInfo
from ddlgen.schema.models import Column, ColumnRef, DataModel, Entity

logger = logging.getLogger(__name__)

ONE = "1"


@dataclass(frozen=True)
class ForeignKeyConstraint:
    """A resolved FOREIGN KEY constraint of one table."""

    columns: tuple[str, ...]
    target_table: str
    target_columns: tuple[str, ...]

    @property
    def is_composite(self) -> bool:
        return len(self.columns) > 1

    def to_dict(self) -> dict[str, object]:
        return {
            "columns": list(self.columns),
            "target_table": self.target_table,
            "target_columns": list(self.target_columns),
        }


def primary_keys(entity: Entity) -> list[Column]:
    """Primary-key columns in column order."""
    return [col for col in entity.columns if col.primary_key]


def foreign_keys(entity: Entity) -> list[Column]:
    """Columns flagged as foreign keys, in column order."""
    return [col for col in entity.columns if col.foreign_key]


def unique_columns(entity: Entity) -> list[Column]:
    return [col for col in entity.columns if col.unique]


def _match_primary_keys(
    target: Entity, target_pks: list[Column], remaining: tuple[Column, ...]
) -> list[Column] | None:
    """Find a remaining column for every target primary key, or None."""
    matched: list[Column] = []
    for pk in target_pks:
        ref = ColumnRef(target.name, pk.name)
        found = next((col for col in remaining if col.reference_to == ref), None)
        if found is None:
            return None
        matched.append(found)
    return matched


def resolve_relationship_constraints(
    model: DataModel, entity: Entity, remaining: tuple[Column, ...]
) -> tuple[list[ForeignKeyConstraint], tuple[Column, ...]]:
    """First pass: coalesce relationship ends with their foreign-key columns.

    Args:
        model: Model used to look up relationship targets
        entity: Entity whose relationship ends are resolved
        remaining: Foreign-key columns not yet claimed

    Returns:
        The constraints found and the columns still unclaimed
    """
    constraints: list[ForeignKeyConstraint] = []
    for end in entity.relationship_ends:
        if end.cardinality != ONE:
            continue

        target = model.find_entity(end.reference)
        if target is None:
            logger.debug("%s: relationship target %s not in model", entity.name, end.reference)
            continue

        target_pks = primary_keys(target)
        if not target_pks:
            logger.debug("%s: %s has no primary key, skipping end", entity.name, target.name)
            continue

        matched = _match_primary_keys(target, target_pks, remaining)
        if matched is None:
            continue

        claimed = {id(col) for col in matched}
        remaining = tuple(col for col in remaining if id(col) not in claimed)
        constraints.append(
            ForeignKeyConstraint(
                columns=tuple(col.name for col in matched),
                target_table=target.name,
                target_columns=tuple(pk.name for pk in target_pks),
            )
        )
    return constraints, remaining


def resolve_column_constraints(remaining: tuple[Column, ...]) -> list[ForeignKeyConstraint]:
    """Second pass: one constraint per unclaimed referencing column."""
    return [
        ForeignKeyConstraint(
            columns=(col.name,),
            target_table=col.reference_to.entity,
            target_columns=(col.reference_to.column,),
        )
        for col in remaining
        if col.reference_to is not None
    ]


def resolve_foreign_keys(model: DataModel, entity: Entity) -> list[ForeignKeyConstraint]:
    """Return all foreign-key constraints of ``entity`` in emission order."""
    constraints, remaining = resolve_relationship_constraints(
        model, entity, tuple(foreign_keys(entity))
    )
    constraints.extend(resolve_column_constraints(remaining))
    logger.debug("%s: resolved %d foreign key(s)", entity.name, len(constraints))
    return constraints


def describe_keys(model: DataModel) -> list[EntitySummary]:
    """Summarize keys and resolved foreign keys of every entity."""
    return [
        EntitySummary(
            name=entity.name,
            columns=len(entity.columns),
            primary_keys=[col.name for col in primary_keys(entity)],
            unique=[col.name for col in unique_columns(entity)],
            foreign_keys=[
                ForeignKeyInfo(**fk.to_dict()) for fk in resolve_foreign_keys(model, entity)
            ],
        )
        for entity in model.entities
    ]
