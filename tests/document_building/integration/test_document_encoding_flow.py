"""End-to-end document construction and encoding tests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import pytest
import yaml
from openapi_spec_dsl.configuration.loader import load_encoder_settings
from openapi_spec_dsl.document_building.components_builder import ComponentsBuilder
from openapi_spec_dsl.document_building.content_builders import content_schema
from openapi_spec_dsl.document_building.openapi_builder import InfoBuilder, OpenApiBuilder, openapi
from openapi_spec_dsl.document_building.paths_builder import OperationBuilder, PathsBuilder
from openapi_spec_dsl.document_encoding.json_encoder import encode_json
from openapi_spec_dsl.document_encoding.yaml_encoder import (
    UnsupportedOperationError,
    decode_yaml,
    encode_yaml,
)
from openapi_spec_dsl.reflection_derivation import PropertyDescription, schema_description
from openapi_spec_dsl.schema_composition.composition_patterns import discriminated_union
from openapi_spec_dsl.schema_composition.schema_builder import SchemaBuilder
from openapi_spec_dsl.spec_model.schema_models import SchemaFormat, SchemaType


@schema_description("A dog")
@dataclass
class Dog:
    name: Annotated[str, PropertyDescription("Call name")]
    good: bool


@dataclass
class Cat:
    name: str
    lives: int | None


def _info(info: InfoBuilder) -> None:
    info.title = "Pet Store"
    info.version = "1.0.0"
    info.license("MIT")


def _pet_schema(schema: SchemaBuilder) -> None:
    discriminated_union(schema, "petType", {"dog": Dog, "cat": Cat})


def _pet_array(schema: SchemaBuilder) -> None:
    schema.type = SchemaType.ARRAY
    schema.items = content_schema("Pet")


def _list_pets(operation: OperationBuilder) -> None:
    operation.operation_id = "listPets"
    operation.parameter("limit", "query", SchemaType.INTEGER, schema_format=SchemaFormat.INT32)
    operation.response(
        "200", "Pets", lambda response: response.json_content(block=_pet_array, example=[])
    )


def _paths(paths: PathsBuilder) -> None:
    paths.path("/pets", lambda item: item.get(_list_pets))


def _components(components: ComponentsBuilder) -> None:
    components.schema("Pet", _pet_schema).schema_from_type(Dog).schema_from_type(Cat)


def _document(api: OpenApiBuilder) -> None:
    api.info(_info).server("https://api.example.com").paths(_paths).components(_components)


_EXPECTED = {
    "openapi": "3.1.0",
    "info": {"title": "Pet Store", "version": "1.0.0", "license": {"name": "MIT"}},
    "servers": [{"url": "https://api.example.com"}],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "schema": {"type": "integer", "format": "int32"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "Pets",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "array",
                                    "items": {"$ref": "#/components/schemas/Pet"},
                                },
                                "example": [],
                            }
                        },
                    }
                },
            }
        }
    },
    "components": {
        "schemas": {
            "Pet": {
                "oneOf": [
                    {"$ref": "#/components/schemas/Dog"},
                    {"$ref": "#/components/schemas/Cat"},
                ],
                "discriminator": {
                    "propertyName": "petType",
                    "mapping": {
                        "dog": "#/components/schemas/Dog",
                        "cat": "#/components/schemas/Cat",
                    },
                },
            },
            "Dog": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Call name"},
                    "good": {"type": "boolean"},
                },
                "required": ["name", "good"],
                "description": "A dog",
            },
            "Cat": {
                "type": "object",
                "properties": {"name": {"type": "string"}, "lives": {"type": "integer"}},
                "required": ["name"],
            },
        }
    },
}


def test_document_encodes_to_json() -> None:
    tree = json.loads(encode_json(openapi(_document)))

    assert tree == _EXPECTED
    assert list(tree) == ["openapi", "info", "servers", "paths", "components"]


def test_document_encodes_to_equivalent_yaml() -> None:
    text = encode_yaml(openapi(_document))

    assert text.startswith("openapi: 3.1.0\ninfo:\n  title: Pet Store\n")
    assert yaml.safe_load(text) == _EXPECTED

    with pytest.raises(UnsupportedOperationError):
        decode_yaml(text)


def test_settings_file_drives_both_encoders(tmp_path: Path) -> None:
    config_path = tmp_path / "encoders.yaml"
    config_path.write_text(
        "json:\n  indent: null\n  encode_defaults: true\nyaml:\n  encode_defaults: true\n",
        encoding="utf-8",
    )
    settings = load_encoder_settings(config_path)
    spec = openapi(_document)

    json_tree = json.loads(encode_json(spec, settings.json))
    yaml_tree = yaml.safe_load(encode_yaml(spec, settings.yaml))

    assert "\n" not in encode_json(spec, settings.json)
    assert json_tree["paths"]["/pets"]["get"]["parameters"][0]["required"] is False
    assert yaml_tree["paths"]["/pets"]["get"]["parameters"][0]["required"] is False
    assert json_tree == yaml_tree
