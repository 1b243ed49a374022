"""Schema builder and composition accumulators.

Builders are single-use: create one per construction, configure it, call
``build()`` and discard it. A *target* names what a composition entry points
at and takes one of three forms:

* a component name (``"Pet"``), prefixed with ``#/components/schemas/``
  unless it already starts with ``#/``;
* a native type, referenced by its ``__name__``;
* a block, a callable receiving a fresh builder, whose result is inlined.

Ready-made ``Ref`` / ``Inline`` values are accepted as targets as well, and the
composition methods of ``SchemaBuilder`` also take the lists produced by the
``|`` and ``&`` combinators.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar, Union

from openapi_spec_dsl.document_encoding.wire_codec import to_json_value
from openapi_spec_dsl.spec_model.schema_models import (
    Discriminator,
    Example,
    Inline,
    Schema,
    SchemaFormat,
    SchemaReference,
    SchemaType,
    frozen_mapping,
)

from .discriminator_builder import DiscriminatorBuilder
from .example_builders import ExamplesBuilder
from .reference_paths import ref_from_name, ref_from_type

SchemaBlock = Callable[["SchemaBuilder"], Any]
ReferenceTarget = Union[str, type, SchemaReference, SchemaBlock]

_BuilderT = TypeVar("_BuilderT", bound="_ReferenceListBuilder")


def inline(block: SchemaBlock) -> Inline:
    """Build a nested schema from ``block`` and wrap it as an inline reference."""
    builder = SchemaBuilder()
    block(builder)
    return Inline(builder.build())


def resolve_reference(target: ReferenceTarget) -> SchemaReference:
    """Turn a name, native type, reference, or schema block into a ``SchemaReference``."""
    if isinstance(target, SchemaReference):
        return target
    if isinstance(target, str):
        return ref_from_name(target)
    if isinstance(target, type):
        return ref_from_type(target)
    if callable(target):
        return inline(target)
    raise TypeError(f"Unsupported schema reference target: {target!r}")


class _ReferenceListBuilder:
    """Ordered accumulator of schema references."""

    def __init__(self) -> None:
        self._schemas: list[SchemaReference] = []

    def schema(self: _BuilderT, target: ReferenceTarget) -> _BuilderT:
        """Append a reference to a name, native type, or inline schema block."""
        self._schemas.append(resolve_reference(target))
        return self

    def build(self) -> tuple[SchemaReference, ...]:
        return tuple(self._schemas)


class OneOfBuilder(_ReferenceListBuilder):
    """Members of a ``oneOf`` composition, in call order."""


class AllOfBuilder(_ReferenceListBuilder):
    """Members of an ``allOf`` composition, in call order."""


class AnyOfBuilder(_ReferenceListBuilder):
    """Members of an ``anyOf`` composition, in call order."""


class SchemaBuilder:  # pylint: disable=too-many-instance-attributes
    """Accumulates the fields of one schema node.

    ``type``, ``format``, ``description``, ``items`` and ``example`` are plain
    attributes; ``example`` accepts any value and is converted to a JSON value
    on ``build()``. The composition methods append to their slot on every
    call, except ``not_`` which keeps only the last target.
    """

    def __init__(self) -> None:
        self.type: SchemaType | None = None
        self.format: SchemaFormat | None = None
        self.description: str | None = None
        self.items: Schema | None = None
        self.example: Any = None
        self.properties: dict[str, Schema] = {}
        self._required: list[str] = []
        self._enum_values: list[Any] | None = None
        self._examples: Mapping[str, Example] | None = None
        self._one_of: list[SchemaReference] | None = None
        self._all_of: list[SchemaReference] | None = None
        self._any_of: list[SchemaReference] | None = None
        self._not: SchemaReference | None = None
        self._discriminator: Discriminator | None = None

    def add_property(
        self,
        name: str,
        property_type: SchemaType | str,
        required: bool = False,
        block: SchemaBlock | None = None,
    ) -> SchemaBuilder:
        """Add a typed property, optionally refined by ``block``."""
        nested = SchemaBuilder()
        nested.type = SchemaType(property_type)
        if block is not None:
            block(nested)
        self.properties[name] = nested.build()
        if required:
            self._required.append(name)
        return self

    def items_schema(self, block: SchemaBlock) -> SchemaBuilder:
        """Set the array item schema from a block."""
        nested = SchemaBuilder()
        block(nested)
        self.items = nested.build()
        return self

    def enum(self, *values: Any) -> SchemaBuilder:
        """Restrict the schema to the given values."""
        self._enum_values = [to_json_value(value) for value in values]
        return self

    def examples(self, block: Callable[[ExamplesBuilder], Any]) -> SchemaBuilder:
        """Set named examples from a block configuring an ``ExamplesBuilder``."""
        builder = ExamplesBuilder()
        block(builder)
        self._examples = builder.build()
        return self

    def one_of(self, *targets: ReferenceTarget | Callable[[OneOfBuilder], Any]) -> SchemaBuilder:
        """Append ``oneOf`` members; a block receives a ``OneOfBuilder``."""
        self._one_of = _extend_slot(self._one_of, targets, OneOfBuilder)
        return self

    def all_of(self, *targets: ReferenceTarget | Callable[[AllOfBuilder], Any]) -> SchemaBuilder:
        """Append ``allOf`` members; a block receives an ``AllOfBuilder``."""
        self._all_of = _extend_slot(self._all_of, targets, AllOfBuilder)
        return self

    def any_of(self, *targets: ReferenceTarget | Callable[[AnyOfBuilder], Any]) -> SchemaBuilder:
        """Append ``anyOf`` members; a block receives an ``AnyOfBuilder``."""
        self._any_of = _extend_slot(self._any_of, targets, AnyOfBuilder)
        return self

    def not_(self, target: ReferenceTarget) -> SchemaBuilder:
        """Set the ``not`` slot, replacing any previous value."""
        self._not = resolve_reference(target)
        return self

    def discriminator(
        self, property_name: str, block: Callable[[DiscriminatorBuilder], Any] | None = None
    ) -> SchemaBuilder:
        """Set the discriminator property and its optional value mapping."""
        builder = DiscriminatorBuilder(property_name)
        if block is not None:
            block(builder)
        self._discriminator = builder.build()
        return self

    def build(self) -> Schema:
        return Schema(
            type=SchemaType(self.type) if self.type is not None else None,
            format=SchemaFormat(self.format) if self.format is not None else None,
            properties=frozen_mapping(self.properties) or None,
            required=tuple(self._required) or None,
            items=self.items,
            enum_values=_freeze(self._enum_values),
            one_of=_freeze(self._one_of),
            all_of=_freeze(self._all_of),
            any_of=_freeze(self._any_of),
            not_=self._not,
            discriminator=self._discriminator,
            description=self.description,
            example=to_json_value(self.example),
            examples=frozen_mapping(self._examples) if self._examples is not None else None,
        )


def _extend_slot(
    slot: list[SchemaReference] | None,
    targets: tuple[Any, ...],
    builder_type: type[_ReferenceListBuilder],
) -> list[SchemaReference]:
    entries = list(slot) if slot is not None else []
    for target in targets:
        if isinstance(target, (str, type, SchemaReference)):
            entries.append(resolve_reference(target))
        elif isinstance(target, (list, tuple)):
            entries.extend(resolve_reference(item) for item in target)
        elif callable(target):
            builder = builder_type()
            target(builder)
            entries.extend(builder.build())
        else:
            raise TypeError(f"Unsupported composition target: {target!r}")
    return entries


def _freeze(values: list[Any] | None) -> tuple[Any, ...] | None:
    return tuple(values) if values is not None else None
