"""Reflection-based schema derivation tests."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Annotated, ClassVar, Optional

import pytest
from openapi_spec_dsl.configuration.encoder_settings import JsonEncoderSettings
from openapi_spec_dsl.document_encoding.json_encoder import encode_json
from openapi_spec_dsl.reflection_derivation import (
    PropertyDescription,
    SchemaDerivationError,
    class_description,
    derive_schema,
    schema_description,
)
from openapi_spec_dsl.spec_model.schema_models import Schema, SchemaType


@dataclass
class Account:
    id: str
    age: int | None
    active: bool


class Owner:
    name: str


@schema_description("A pet in the store")
@dataclass
class Pet:
    name: Annotated[str, PropertyDescription("Display name")]
    weight: float
    tags: list[str]
    aliases: Sequence[str]
    attributes: dict[str, str]
    owner: Owner
    nickname: Optional[str] = None
    registry: ClassVar[int] = 0


@schema_description("Base record")
class Record:
    id: int


class Invoice(Record):
    total: float


class TreeNode:
    value: int
    parent: TreeNode | None
    children: list[TreeNode]


def test_flat_object_schema_lists_required_non_nullable_properties() -> None:
    text = encode_json(derive_schema(Account), JsonEncoderSettings(indent=None))

    assert json.loads(text) == {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "age": {"type": "integer"},
            "active": {"type": "boolean"},
        },
        "required": ["id", "active"],
    }
    assert list(json.loads(text)) == ["type", "properties", "required"]


def test_property_types_map_through_fixed_table_without_recursion() -> None:
    schema = derive_schema(Pet)

    assert schema.properties is not None
    assert {name: prop.type for name, prop in schema.properties.items()} == {
        "name": SchemaType.STRING,
        "weight": SchemaType.NUMBER,
        "tags": SchemaType.ARRAY,
        "aliases": SchemaType.ARRAY,
        "attributes": SchemaType.OBJECT,
        "owner": SchemaType.OBJECT,
        "nickname": SchemaType.STRING,
    }
    assert schema.properties["owner"].properties is None
    assert schema.required == ("name", "weight", "tags", "aliases", "attributes", "owner")


def test_descriptions_come_from_class_and_property_markers() -> None:
    schema = derive_schema(Pet)

    assert schema.description == "A pet in the store"
    assert schema.properties is not None
    assert schema.properties["name"] == Schema(type=SchemaType.STRING, description="Display name")
    assert schema.properties["weight"].description is None


def test_class_variables_are_skipped() -> None:
    schema = derive_schema(Pet)

    assert schema.properties is not None
    assert "registry" not in schema.properties


def test_inherited_properties_and_descriptions_are_ignored() -> None:
    schema = derive_schema(Invoice)

    assert schema.properties == {"total": Schema(type=SchemaType.NUMBER)}
    assert schema.required == ("total",)
    assert schema.description is None
    assert class_description(Record) == "Base record"


def test_self_referencing_class_derives_without_recursing() -> None:
    schema = derive_schema(TreeNode)

    assert schema.properties == {
        "value": Schema(type=SchemaType.INTEGER),
        "parent": Schema(type=SchemaType.OBJECT),
        "children": Schema(type=SchemaType.ARRAY),
    }
    assert schema.required == ("value", "children")


def test_locally_defined_self_reference_resolves() -> None:
    class Link:
        next: Link | None

    schema = derive_schema(Link)

    assert schema.properties == {"next": Schema(type=SchemaType.OBJECT)}
    assert schema.required is None


def test_class_without_annotations_yields_bare_object() -> None:
    class Empty:
        pass

    assert derive_schema(Empty) == Schema(type=SchemaType.OBJECT)


def test_nameless_type_raises_derivation_error() -> None:
    with pytest.raises(SchemaDerivationError, match="no simple name"):
        derive_schema(type("", (), {}))


def test_unresolvable_annotation_raises_derivation_error() -> None:
    class Broken:
        missing: UndefinedThing  # type: ignore[name-defined]  # noqa: F821

    with pytest.raises(SchemaDerivationError, match="Cannot resolve annotations of Broken"):
        derive_schema(Broken)
