"""Common composition shapes expressed through ``SchemaBuilder``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from openapi_spec_dsl.spec_model.schema_models import SchemaType

from .discriminator_builder import DiscriminatorBuilder
from .schema_builder import AllOfBuilder, AnyOfBuilder, OneOfBuilder, SchemaBlock, SchemaBuilder


def _null_schema(schema: SchemaBuilder) -> None:
    schema.type = SchemaType.NULL


def _object_schema(block: SchemaBlock | None) -> SchemaBlock:
    def configure(schema: SchemaBuilder) -> None:
        schema.type = SchemaType.OBJECT
        if block is not None:
            block(schema)

    return configure


def _discriminator_mapping(
    mappings: Mapping[str, type],
) -> Callable[[DiscriminatorBuilder], None]:
    def configure(discriminator: DiscriminatorBuilder) -> None:
        for value, native_type in mappings.items():
            discriminator.mapping(value, native_type)

    return configure


def nullable(builder: SchemaBuilder, block: SchemaBlock) -> SchemaBuilder:
    """``anyOf`` the schema built by ``block`` and ``{type: null}``."""

    def compose(any_of: AnyOfBuilder) -> None:
        any_of.schema(block).schema(_null_schema)

    return builder.any_of(compose)


def optional_schema(builder: SchemaBuilder, native_type: type) -> SchemaBuilder:
    """``anyOf`` a reference to ``native_type`` and ``{type: null}``."""

    def compose(any_of: AnyOfBuilder) -> None:
        any_of.schema(native_type).schema(_null_schema)

    return builder.any_of(compose)


def extending(
    builder: SchemaBuilder, *base_types: type, block: SchemaBlock | None = None
) -> SchemaBuilder:
    """``allOf`` the base type references followed by an inline object schema."""

    def compose(all_of: AllOfBuilder) -> None:
        for base_type in base_types:
            all_of.schema(base_type)
        all_of.schema(_object_schema(block))

    return builder.all_of(compose)


def discriminated_union(
    builder: SchemaBuilder, property_name: str, mappings: Mapping[str, type]
) -> SchemaBuilder:
    """``oneOf`` the mapped types, with a discriminator over the same values."""
    builder.one_of(*mappings.values())
    return builder.discriminator(property_name, _discriminator_mapping(mappings))


def one_of_classes(
    builder: SchemaBuilder,
    *native_types: type,
    discriminator_property: str | None = None,
    discriminator_mappings: Mapping[str, type] | None = None,
) -> SchemaBuilder:
    """``oneOf`` the given types, optionally adding a discriminator."""
    builder.one_of(*native_types)
    if discriminator_property is not None:
        builder.discriminator(
            discriminator_property, _discriminator_mapping(discriminator_mappings or {})
        )
    return builder


def all_of_classes(
    builder: SchemaBuilder,
    *native_types: type,
    additional_properties: SchemaBlock | None = None,
) -> SchemaBuilder:
    """``allOf`` the given types, plus an inline object only when a block is given."""

    def compose(all_of: AllOfBuilder) -> None:
        for native_type in native_types:
            all_of.schema(native_type)
        if additional_properties is not None:
            all_of.schema(_object_schema(additional_properties))

    return builder.all_of(compose)


def choice(builder: SchemaBuilder, block: Callable[[OneOfBuilder], Any]) -> SchemaBuilder:
    """Alias of ``one_of`` with a ``OneOfBuilder`` block."""
    return builder.one_of(block)


def combine(builder: SchemaBuilder, block: Callable[[AllOfBuilder], Any]) -> SchemaBuilder:
    """Alias of ``all_of`` with an ``AllOfBuilder`` block."""
    return builder.all_of(block)
