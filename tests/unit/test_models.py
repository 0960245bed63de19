"""Tests for the data model and the model loader."""

import dataclasses
from pathlib import Path

import pytest

from ddlgen.exceptions import EntityNotFoundError, ModelLoadError
from ddlgen.schema.loader import load_model, model_from_dict
from ddlgen.schema.models import (
    Column,
    ColumnRef,
    DataModel,
    Entity,
    NodeKind,
    OtherElement,
    RelationshipEnd,
)


class TestNodeKinds:
    """Every node carries its kind tag."""

    def test_kinds(self):
        assert DataModel(name="M").kind == NodeKind.DATA_MODEL
        assert Entity(name="E").kind == NodeKind.ENTITY
        assert Column(name="c").kind == NodeKind.COLUMN
        assert RelationshipEnd(reference="E").kind == NodeKind.RELATIONSHIP_END
        assert OtherElement("d").kind == NodeKind.OTHER

    def test_nodes_are_immutable(self):
        column = Column(name="c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            column.name = "d"  # type: ignore[misc]


class TestDataModel:
    """Tests for model lookups."""

    def test_entities_skip_other_elements(self, composite_model: DataModel):
        assert [e.name for e in composite_model.entities] == ["A", "B"]
        assert len(composite_model.owned_elements) == 3

    def test_entity_lookup(self, customer_order_model: DataModel):
        assert customer_order_model.entity("Order").name == "Order"
        assert customer_order_model.find_entity("Invoice") is None

    def test_entity_not_found(self, customer_order_model: DataModel):
        with pytest.raises(EntityNotFoundError) as exc_info:
            customer_order_model.entity("Invoice")
        assert exc_info.value.available_entities == ["Customer", "Order"]
        assert "Available entities: Customer, Order" in str(exc_info.value)

    def test_resolve_reference(self, customer_order_model: DataModel):
        column = customer_order_model.resolve(ColumnRef("Customer", "id"))
        assert column is not None
        assert column.primary_key is True
        assert customer_order_model.resolve(ColumnRef("Customer", "nope")) is None
        assert customer_order_model.resolve(ColumnRef("Nope", "id")) is None

    def test_column_ref_str(self):
        assert str(ColumnRef("Customer", "id")) == "Customer.id"


class TestModelFromDict:
    """Tests for building models from documents."""

    def test_reference_forms(self):
        model = model_from_dict(
            {
                "name": "M",
                "entities": [
                    {
                        "name": "A",
                        "columns": [
                            {"name": "x", "foreign_key": True, "reference_to": "B.id"},
                            {
                                "name": "y",
                                "foreignKey": True,
                                "referenceTo": {"entity": "B", "column": "code"},
                            },
                        ],
                        "relationships": [{"reference": "B"}],
                    },
                    {"name": "B", "columns": [{"name": "id", "primaryKey": True}]},
                ],
            }
        )
        a = model.entity("A")
        assert a.columns[0].reference_to == ColumnRef("B", "id")
        assert a.columns[1].reference_to == ColumnRef("B", "code")
        assert a.columns[1].foreign_key is True
        assert a.relationship_ends == (RelationshipEnd(reference="B", cardinality="1"),)
        assert model.entity("B").columns[0].primary_key is True

    def test_dotted_entity_name(self):
        """The column name is taken after the last dot."""
        model = model_from_dict(
            {
                "entities": [
                    {
                        "name": "A",
                        "columns": [{"name": "x", "reference_to": "sales.Order.id"}],
                    }
                ]
            }
        )
        assert model.entity("A").columns[0].reference_to == ColumnRef("sales.Order", "id")

    def test_defaults(self):
        model = model_from_dict({"entities": [{"name": "A", "columns": [{"name": "x"}]}]})
        assert model.name == "DataModel"
        column = model.entity("A").columns[0]
        assert column.type == ""
        assert column.nullable is True
        assert column.primary_key is False
        assert column.reference_to is None

    def test_elements_follow_entities(self):
        model = model_from_dict({"entities": [{"name": "A"}], "elements": [{"name": "Diagram1"}]})
        kinds = [e.kind for e in model.owned_elements]
        assert kinds == [NodeKind.ENTITY, NodeKind.OTHER]

    def test_unknown_keys_ignored(self):
        model = model_from_dict(
            {
                "entities": [{"name": "A", "description": "Accounts"}],
                "elements": [{"name": "Diagram1", "type": "diagram"}],
            }
        )
        assert [e.name for e in model.owned_elements] == ["A", "Diagram1"]

    def test_duplicate_entity_names(self):
        with pytest.raises(ModelLoadError) as exc_info:
            model_from_dict(
                {
                    "entities": [
                        {"name": "Customer", "columns": [{"name": "id", "primary_key": True}]},
                        {"name": "Order"},
                        {"name": "Customer", "columns": [{"name": "code"}]},
                    ]
                }
            )
        assert exc_info.value.reason == "duplicate entity name(s): Customer"

    def test_duplicate_column_names(self):
        with pytest.raises(ModelLoadError) as exc_info:
            model_from_dict(
                {"entities": [{"name": "A", "columns": [{"name": "x"}, {"name": "x"}]}]}
            )
        assert exc_info.value.reason == "duplicate column name(s) in entity 'A': x"

    def test_column_names_may_repeat_across_entities(self):
        model = model_from_dict(
            {
                "entities": [
                    {"name": "A", "columns": [{"name": "id"}]},
                    {"name": "B", "columns": [{"name": "id"}]},
                ]
            }
        )
        assert [e.name for e in model.entities] == ["A", "B"]

    def test_invalid_reference(self):
        with pytest.raises(ModelLoadError) as exc_info:
            model_from_dict(
                {"entities": [{"name": "A", "columns": [{"name": "x", "reference_to": "B"}]}]}
            )
        assert "Expected 'Entity.column'" in exc_info.value.reason

    def test_missing_entity_name(self):
        with pytest.raises(ModelLoadError):
            model_from_dict({"entities": [{"columns": []}]})


class TestLoadModel:
    """Tests for reading model files."""

    def test_load_example(self, shop_model_path: Path):
        model = load_model(shop_model_path)
        assert model.name == "Shop"
        assert [e.name for e in model.entities] == [
            "Customer",
            "Order",
            "OrderLine",
            "Shipment",
            "Product",
        ]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ModelLoadError) as exc_info:
            load_model(tmp_path / "missing.json")
        assert exc_info.value.reason == "file not found"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ModelLoadError) as exc_info:
            load_model(path)
        assert "invalid JSON" in exc_info.value.reason

    def test_not_utf8(self, tmp_path: Path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(ModelLoadError) as exc_info:
            load_model(path)
        assert exc_info.value.path == str(path)

    def test_directory(self, tmp_path: Path):
        with pytest.raises(ModelLoadError):
            load_model(tmp_path)

    def test_not_an_object(self, write_json):
        with pytest.raises(ModelLoadError) as exc_info:
            load_model(write_json([1, 2, 3]))
        assert "object" in exc_info.value.reason
