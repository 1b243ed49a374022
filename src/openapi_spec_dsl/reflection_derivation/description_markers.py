"""Description metadata for classes and their properties."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

_TypeT = TypeVar("_TypeT", bound=type)

SCHEMA_DESCRIPTION_ATTRIBUTE = "__schema_description__"


@dataclass(frozen=True)
class PropertyDescription:
    """``Annotated`` marker describing a property.

    Example: ``name: Annotated[str, PropertyDescription("Display name")]``.
    """

    value: str


def schema_description(value: str) -> Callable[[_TypeT], _TypeT]:
    """Class decorator attaching a description to the derived object schema."""

    def decorate(native_type: _TypeT) -> _TypeT:
        setattr(native_type, SCHEMA_DESCRIPTION_ATTRIBUTE, value)
        return native_type

    return decorate


def class_description(native_type: type) -> str | None:
    """Return the description declared on ``native_type`` itself, ignoring base classes."""
    value = vars(native_type).get(SCHEMA_DESCRIPTION_ATTRIBUTE)
    return value if isinstance(value, str) else None
