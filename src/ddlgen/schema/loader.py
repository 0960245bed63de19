"""Build data models from JSON model files.

Format:

    {
        "name": "Shop",
        "entities": [
            {
                "name": "Order",
                "columns": [
                    {"name": "id", "type": "INTEGER", "primary_key": true},
                    {"name": "customer_id", "foreign_key": true,
                     "reference_to": "Customer.id"}
                ],
                "relationships": [{"cardinality": "1", "reference": "Customer"}]
            }
        ],
        "elements": [{"name": "Main diagram"}]
    }

Entity names, and column names within an entity, must be unique because
references resolve by name. References are not checked against the model;
dangling ones are tolerated by the generator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ddlgen.core.types import ColumnSpec, DataModelSpec, EntitySpec
from ddlgen.exceptions import ModelLoadError
from ddlgen.schema.models import (
    Column,
    ColumnRef,
    DataModel,
    Entity,
    OtherElement,
    RelationshipEnd,
)

logger = logging.getLogger(__name__)


def _build_column(spec: ColumnSpec) -> Column:
    ref = None
    if spec.reference_to is not None:
        ref = ColumnRef(spec.reference_to.entity, spec.reference_to.column)
    return Column(
        name=spec.name,
        type=spec.type,
        length=spec.length,
        primary_key=spec.primary_key,
        unique=spec.unique,
        nullable=spec.nullable,
        foreign_key=spec.foreign_key,
        reference_to=ref,
    )


def _build_entity(spec: EntitySpec) -> Entity:
    return Entity(
        name=spec.name,
        columns=tuple(_build_column(c) for c in spec.columns),
        relationship_ends=tuple(
            RelationshipEnd(reference=r.reference, cardinality=r.cardinality, name=r.name)
            for r in spec.relationships
        ),
    )


def build_model(spec: DataModelSpec) -> DataModel:
    """Convert a validated spec into an immutable data model."""
    elements: list[Entity | OtherElement] = [_build_entity(e) for e in spec.entities]
    elements.extend(OtherElement(name=e.name) for e in spec.elements)
    return DataModel(name=spec.name, owned_elements=tuple(elements))


def _duplicates(names: list[str]) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for name in names:
        if name in seen and name not in dupes:
            dupes.append(name)
        seen.add(name)
    return dupes


def _check_unique_names(spec: DataModelSpec, source: str) -> None:
    dupes = _duplicates([e.name for e in spec.entities])
    if dupes:
        raise ModelLoadError(source, f"duplicate entity name(s): {', '.join(dupes)}")
    for entity in spec.entities:
        dupes = _duplicates([c.name for c in entity.columns])
        if dupes:
            raise ModelLoadError(
                source, f"duplicate column name(s) in entity '{entity.name}': {', '.join(dupes)}"
            )


def model_from_dict(data: dict[str, Any], source: str = "<dict>") -> DataModel:
    """Validate a model document and build the data model.

    Raises:
        ModelLoadError: If the document does not match the model format or
            repeats an entity name, or a column name within an entity
    """
    try:
        spec = DataModelSpec.model_validate(data)
    except ValidationError as e:
        raise ModelLoadError(source, f"{e.error_count()} validation error(s): {e}") from e
    _check_unique_names(spec, source)
    return build_model(spec)


def load_model(path: str | Path) -> DataModel:
    """Read a JSON model file.

    Raises:
        ModelLoadError: If the file is missing, unreadable, not JSON, or not a model
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ModelLoadError(str(path), "file not found")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ModelLoadError(str(path), f"invalid JSON on line {e.lineno}: {e.msg}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise ModelLoadError(str(path), "top-level JSON value must be an object")

    model = model_from_dict(data, source=str(path))
    logger.debug("Loaded model %s with %d entities", model.name, len(model.entities))
    return model
