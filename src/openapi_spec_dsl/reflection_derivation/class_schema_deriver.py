"""Flat object schema derivation from native classes.

Only the class's own annotations are read, in declaration order. Each
property maps to a primitive schema type through a fixed table; anything not
in the table, nested classes included, becomes ``object`` without looking
inside it. Because nothing recurses, self-referencing classes are safe here.
"""

from __future__ import annotations

import inspect
import logging
import types
from collections import abc
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from openapi_spec_dsl.schema_composition.reference_paths import (
    SchemaDerivationError,
    native_type_name,
)
from openapi_spec_dsl.schema_composition.schema_builder import SchemaBlock, SchemaBuilder
from openapi_spec_dsl.spec_model.schema_models import Schema, SchemaType

from .description_markers import PropertyDescription, class_description

_LOGGER = logging.getLogger("openapi_spec_dsl.derivation")
_LOGGER.addHandler(logging.NullHandler())

_TYPE_TABLE: dict[Any, SchemaType] = {
    list: SchemaType.ARRAY,
    tuple: SchemaType.ARRAY,
    set: SchemaType.ARRAY,
    frozenset: SchemaType.ARRAY,
    abc.Sequence: SchemaType.ARRAY,
    abc.MutableSequence: SchemaType.ARRAY,
    abc.Set: SchemaType.ARRAY,
    abc.MutableSet: SchemaType.ARRAY,
    abc.Collection: SchemaType.ARRAY,
    abc.Iterable: SchemaType.ARRAY,
    str: SchemaType.STRING,
    int: SchemaType.INTEGER,
    float: SchemaType.NUMBER,
    bool: SchemaType.BOOLEAN,
}

_UNION_ORIGINS = (Union, types.UnionType)


@dataclass(frozen=True)
class _PropertyShape:
    """Classified property annotation."""

    schema_type: SchemaType
    nullable: bool
    description: str | None


def derive_schema(native_type: type) -> Schema:
    """Derive ``{type: object, properties, required}`` from a class's own annotations."""
    name = native_type_name(native_type)
    builder = SchemaBuilder()
    builder.type = SchemaType.OBJECT
    builder.description = class_description(native_type)

    for property_name, annotation in _own_annotations(native_type, name).items():
        if get_origin(annotation) is ClassVar or annotation is ClassVar:
            continue
        shape = _classify(annotation)
        builder.add_property(
            property_name,
            shape.schema_type,
            required=not shape.nullable,
            block=_describe(shape.description),
        )

    schema = builder.build()
    _LOGGER.debug("Derived schema for %s with %d properties", name, len(schema.properties or {}))
    return schema


def _own_annotations(native_type: type, name: str) -> dict[str, Any]:
    namespace = dict(vars(native_type))
    namespace.setdefault(name, native_type)
    try:
        return inspect.get_annotations(native_type, locals=namespace, eval_str=True)
    except (NameError, SyntaxError, TypeError) as exc:
        raise SchemaDerivationError(f"Cannot resolve annotations of {name}: {exc}") from exc


def _classify(annotation: Any) -> _PropertyShape:
    nullable = False
    description: str | None = None
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            base, *extras = get_args(annotation)
            if description is None:
                description = next(
                    (extra.value for extra in extras if isinstance(extra, PropertyDescription)),
                    None,
                )
            annotation = base
            continue
        if origin in _UNION_ORIGINS:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            nullable = nullable or len(members) < len(get_args(annotation))
            if len(members) == 1:
                annotation = members[0]
                continue
        break
    if annotation is None or annotation is type(None):
        return _PropertyShape(SchemaType.OBJECT, True, description)
    key = get_origin(annotation) or annotation
    return _PropertyShape(_TYPE_TABLE.get(key, SchemaType.OBJECT), nullable, description)


def _describe(description: str | None) -> SchemaBlock | None:
    if description is None:
        return None

    def apply(schema: SchemaBuilder) -> None:
        schema.description = description

    return apply
