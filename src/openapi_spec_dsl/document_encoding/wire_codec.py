"""Conversion between model entities and plain wire trees."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import MISSING, Field, fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from openapi_spec_dsl.spec_model.schema_models import (
    JSON_VALUE,
    WIRE_NAME,
    Discriminator,
    Example,
    Inline,
    JsonValue,
    Ref,
    Schema,
    SchemaFormat,
    SchemaReference,
    SchemaType,
)

_COMPOSITION_KEYS = (("oneOf", "one_of"), ("allOf", "all_of"), ("anyOf", "any_of"))


class WireFormatError(ValueError):
    """Raised when a wire tree does not have the shape of a schema."""


def wire_name(model_field: Field[Any]) -> str:
    """Return the serialized key of a model field."""
    return model_field.metadata.get(WIRE_NAME, model_field.name)


def is_json_value_field(model_field: Field[Any]) -> bool:
    """Return whether a field holds an open JSON value."""
    return bool(model_field.metadata.get(JSON_VALUE, False))


def iter_wire_fields(
    entity: Any, *, encode_defaults: bool, explicit_nulls: bool
) -> Iterator[tuple[str, Field[Any], Any]]:
    """Yield ``(key, field, value)`` for every field that survives the omission rules."""
    for model_field in fields(entity):
        value = getattr(entity, model_field.name)
        if not encode_defaults and _equals_default(model_field, value):
            continue
        if value is None and not explicit_nulls:
            continue
        yield wire_name(model_field), model_field, value


def to_wire(value: Any, *, encode_defaults: bool = False, explicit_nulls: bool = False) -> Any:
    """Convert a model tree into dicts, lists, and scalars."""
    if isinstance(value, Ref):
        return to_wire(
            Schema(ref=value.path), encode_defaults=encode_defaults, explicit_nulls=explicit_nulls
        )
    if isinstance(value, Inline):
        return to_wire(value.schema, encode_defaults=encode_defaults, explicit_nulls=explicit_nulls)
    if is_dataclass(value) and not isinstance(value, type):
        tree: dict[str, Any] = {}
        for key, model_field, field_value in iter_wire_fields(
            value, encode_defaults=encode_defaults, explicit_nulls=explicit_nulls
        ):
            if is_json_value_field(model_field):
                tree[key] = to_json_value(field_value)
            else:
                tree[key] = to_wire(
                    field_value, encode_defaults=encode_defaults, explicit_nulls=explicit_nulls
                )
        return tree
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {
            str(key): to_wire(item, encode_defaults=encode_defaults, explicit_nulls=explicit_nulls)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [
            to_wire(item, encode_defaults=encode_defaults, explicit_nulls=explicit_nulls)
            for item in value
        ]
    return value


def to_json_value(value: Any) -> JsonValue:
    """Convert an arbitrary Python object into an open JSON value.

    Dataclasses become their wire mapping, mappings and sequences are converted
    element-wise, and anything unrecognized falls back to ``str(value)``.
    """
    if isinstance(value, Enum):
        return to_json_value(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, SchemaReference) or (is_dataclass(value) and not isinstance(value, type)):
        return to_wire(value)
    if isinstance(value, Mapping):
        return {str(key): to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def schema_from_wire(tree: Any) -> Schema:
    """Build a schema from its wire mapping. Unknown keys are ignored."""
    node = _require_mapping(tree, "schema")
    compositions = {
        attribute: _optional_references(node.get(key), key) for key, attribute in _COMPOSITION_KEYS
    }
    return Schema(
        type=_optional_enum(SchemaType, node.get("type"), "type"),
        format=_optional_enum(SchemaFormat, node.get("format"), "format"),
        properties=_optional_properties(node.get("properties")),
        required=_optional_names(node.get("required")),
        items=schema_from_wire(node["items"]) if node.get("items") is not None else None,
        ref=_optional_string(node.get("$ref"), "$ref"),
        enum_values=_optional_json_list(node.get("enum")),
        not_=reference_from_wire(node["not"]) if node.get("not") is not None else None,
        discriminator=_optional_discriminator(node.get("discriminator")),
        description=_optional_string(node.get("description"), "description"),
        example=node.get("example"),
        examples=_optional_examples(node.get("examples")),
        **compositions,
    )


def reference_from_wire(tree: Any) -> SchemaReference:
    """Lift a wire mapping into ``Ref`` when it carries ``$ref``, else ``Inline``."""
    schema = schema_from_wire(tree)
    if schema.ref is not None:
        return Ref(schema.ref)
    return Inline(schema)


def _equals_default(model_field: Field[Any], value: Any) -> bool:
    if model_field.default is not MISSING:
        return bool(value == model_field.default)
    if model_field.default_factory is not MISSING:
        return bool(value == model_field.default_factory())
    return False


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise WireFormatError(f"{label} must be an object.")
    return value


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise WireFormatError(f"{label} must be a string.")
    return value


def _require_string(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise WireFormatError(f"{label} must be a string.")
    return value


def _optional_enum(enum_type: type[Enum], value: Any, label: str) -> Any:
    if value is None:
        return None
    try:
        return enum_type(value)
    except ValueError as exc:
        raise WireFormatError(f"Unsupported {label}: {value!r}") from exc


def _optional_sequence(value: Any, label: str) -> Sequence[Any] | None:
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise WireFormatError(f"{label} must be an array.")
    return value


def _optional_properties(value: Any) -> dict[str, Schema] | None:
    if value is None:
        return None
    properties = _require_mapping(value, "properties")
    return {str(name): schema_from_wire(child) for name, child in properties.items()}


def _optional_names(value: Any) -> tuple[str, ...] | None:
    names = _optional_sequence(value, "required")
    if names is None:
        return None
    return tuple(_require_string(name, "required entry") for name in names)


def _optional_json_list(value: Any) -> tuple[JsonValue, ...] | None:
    values = _optional_sequence(value, "enum")
    return tuple(values) if values is not None else None


def _optional_references(value: Any, label: str) -> tuple[SchemaReference, ...] | None:
    entries = _optional_sequence(value, label)
    if entries is None:
        return None
    return tuple(reference_from_wire(entry) for entry in entries)


def _optional_discriminator(value: Any) -> Discriminator | None:
    if value is None:
        return None
    node = _require_mapping(value, "discriminator")
    property_name = _optional_string(node.get("propertyName"), "discriminator.propertyName")
    if property_name is None:
        raise WireFormatError("discriminator.propertyName is required.")
    mapping = node.get("mapping")
    if mapping is not None:
        mapping = {
            str(key): _require_string(path, "discriminator.mapping entry")
            for key, path in _require_mapping(mapping, "discriminator.mapping").items()
        }
    return Discriminator(property_name=property_name, mapping=mapping or None)


def _optional_examples(value: Any) -> dict[str, Example] | None:
    if value is None:
        return None
    examples = {}
    for name, entry in _require_mapping(value, "examples").items():
        node = _require_mapping(entry, f"examples.{name}")
        examples[str(name)] = Example(
            summary=_optional_string(node.get("summary"), "example.summary"),
            description=_optional_string(node.get("description"), "example.description"),
            value=node.get("value"),
            external_value=_optional_string(node.get("externalValue"), "example.externalValue"),
        )
    return examples
