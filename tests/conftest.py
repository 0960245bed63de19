"""Shared test fixtures for ddlgen."""

import json
from pathlib import Path

import pytest

from ddlgen import (
    Column,
    ColumnRef,
    DataModel,
    Entity,
    GenerationOptions,
    OtherElement,
    RelationshipEnd,
)

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def customer_order_model() -> DataModel:
    """Customer(id, name) and Order(id, customer_id -> Customer.id)."""
    customer = Entity(
        name="Customer",
        columns=(
            Column("id", "INTEGER", primary_key=True),
            Column("name", "VARCHAR", length=100),
        ),
    )
    order = Entity(
        name="Order",
        columns=(
            Column("id", "INTEGER", primary_key=True),
            Column(
                "customer_id",
                "INTEGER",
                foreign_key=True,
                reference_to=ColumnRef("Customer", "id"),
            ),
        ),
        relationship_ends=(RelationshipEnd(reference="Customer", cardinality="1"),),
    )
    return DataModel(name="Shop", owned_elements=(customer, order))


@pytest.fixture
def composite_model() -> DataModel:
    """A references B's composite primary key (pk1, pk2) through fk1 and fk2."""
    b = Entity(
        name="B",
        columns=(
            Column("pk1", "INTEGER", primary_key=True),
            Column("pk2", "INTEGER", primary_key=True),
        ),
    )
    a = Entity(
        name="A",
        columns=(
            Column("id", "INTEGER", primary_key=True),
            Column("fk1", "INTEGER", foreign_key=True, reference_to=ColumnRef("B", "pk1")),
            Column("fk2", "INTEGER", foreign_key=True, reference_to=ColumnRef("B", "pk2")),
        ),
        relationship_ends=(RelationshipEnd(reference="B", cardinality="1"),),
    )
    return DataModel(name="Composite", owned_elements=(a, b, OtherElement("Diagram")))


@pytest.fixture
def plain_options() -> GenerationOptions:
    """Unquoted identifiers, no drop section, MySQL."""
    return GenerationOptions(quote_identifiers=False, drop_table=False, dbms="mysql")


@pytest.fixture
def shop_model_path() -> Path:
    """Path of the example shop model."""
    return EXAMPLES_DIR / "shop.json"


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document to a temporary file and return its path."""

    def _write(data: object, name: str = "model.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
