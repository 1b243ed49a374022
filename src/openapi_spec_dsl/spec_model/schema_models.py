"""Schema document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias, TypeVar

JsonValue: TypeAlias = None | bool | int | float | str | list[Any] | dict[str, Any]

COMPONENTS_SCHEMAS_PREFIX = "#/components/schemas/"

# Field metadata keys read by the encoders.
WIRE_NAME = "wire_name"
JSON_VALUE = "json_value"

_ValueT = TypeVar("_ValueT")


def frozen_mapping(values: Mapping[str, _ValueT]) -> Mapping[str, _ValueT]:
    """Return a read-only copy of ``values`` for storing in a built entity."""
    return MappingProxyType(dict(values))


class SchemaType(str, Enum):
    """Primitive type keyword of a schema node."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


class SchemaFormat(str, Enum):
    """Format keyword refining a primitive type."""

    INT32 = "int32"
    INT64 = "int64"
    DATE_TIME = "date-time"
    EMAIL = "email"
    PASSWORD = "password"
    URL = "url"


@dataclass(frozen=True)
class Example:
    """Named example attached to a schema, media type, or parameter."""

    summary: str | None = None
    description: str | None = None
    value: JsonValue = field(default=None, metadata={JSON_VALUE: True})
    external_value: str | None = field(default=None, metadata={WIRE_NAME: "externalValue"})


@dataclass(frozen=True)
class Discriminator:
    """Property whose value selects a member of a composition."""

    property_name: str = field(metadata={WIRE_NAME: "propertyName"})
    mapping: Mapping[str, str] | None = None


class SchemaReference:
    """Closed union of a pointer to a named schema and an inline schema.

    The only members are :class:`Ref` and :class:`Inline`. ``a | b`` collects
    references into a ``oneOf``-shaped list and ``a & b`` into an
    ``allOf``-shaped list; both also extend an existing list on the left.
    """

    __slots__ = ()

    def __or__(self, other: SchemaReference) -> list[SchemaReference]:
        if not isinstance(other, SchemaReference):
            return NotImplemented
        return [self, other]

    def __ror__(self, other: list[SchemaReference]) -> list[SchemaReference]:
        if not isinstance(other, list):
            return NotImplemented
        return [*other, self]

    def __and__(self, other: SchemaReference) -> list[SchemaReference]:
        if not isinstance(other, SchemaReference):
            return NotImplemented
        return [self, other]

    def __rand__(self, other: list[SchemaReference]) -> list[SchemaReference]:
        if not isinstance(other, list):
            return NotImplemented
        return [*other, self]


@dataclass(frozen=True)
class Ref(SchemaReference):
    """Pointer to a schema, e.g. ``#/components/schemas/Pet``. Never resolved here."""

    path: str


@dataclass(frozen=True)
class Inline(SchemaReference):
    """Schema embedded at its use site."""

    schema: Schema


@dataclass(frozen=True)
class Schema:  # pylint: disable=too-many-instance-attributes
    """Recursive schema node.

    A node with ``ref`` set is a bare pointer and carries no other field.
    Builders store mappings read-only, so nodes compare by value but are not
    hashable.
    """

    type: SchemaType | None = None
    format: SchemaFormat | None = None
    properties: Mapping[str, Schema] | None = None
    required: tuple[str, ...] | None = None
    items: Schema | None = None
    ref: str | None = field(default=None, metadata={WIRE_NAME: "$ref"})
    enum_values: tuple[JsonValue, ...] | None = field(
        default=None, metadata={WIRE_NAME: "enum", JSON_VALUE: True}
    )
    one_of: tuple[SchemaReference, ...] | None = field(
        default=None, metadata={WIRE_NAME: "oneOf"}
    )
    all_of: tuple[SchemaReference, ...] | None = field(
        default=None, metadata={WIRE_NAME: "allOf"}
    )
    any_of: tuple[SchemaReference, ...] | None = field(
        default=None, metadata={WIRE_NAME: "anyOf"}
    )
    not_: SchemaReference | None = field(default=None, metadata={WIRE_NAME: "not"})
    discriminator: Discriminator | None = None
    description: str | None = None
    example: JsonValue = field(default=None, metadata={JSON_VALUE: True})
    examples: Mapping[str, Example] | None = None
