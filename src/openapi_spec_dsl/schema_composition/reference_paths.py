"""Reference pointer construction helpers."""

from __future__ import annotations

from openapi_spec_dsl.spec_model.schema_models import COMPONENTS_SCHEMAS_PREFIX, Ref

_ABSOLUTE_POINTER_PREFIX = "#/"


class SchemaDerivationError(ValueError):
    """Raised when a native type cannot name or describe a schema."""


def native_type_name(native_type: type) -> str:
    """Return the simple name used to register a native type as a component."""
    name = getattr(native_type, "__name__", None)
    if not isinstance(name, str) or not name:
        raise SchemaDerivationError(f"Type {native_type!r} has no simple name.")
    return name


def component_path(name: str) -> str:
    """Return the components pointer for ``name`` unless it is already absolute."""
    if name.startswith(_ABSOLUTE_POINTER_PREFIX):
        return name
    return f"{COMPONENTS_SCHEMAS_PREFIX}{name}"


def schema_ref(path: str) -> Ref:
    """Wrap a pointer string verbatim."""
    return Ref(path)


def ref_from_name(name: str) -> Ref:
    """Reference a named component schema, keeping absolute pointers unchanged."""
    return Ref(component_path(name))


def ref_from_type(native_type: type) -> Ref:
    """Reference the component schema registered under a native type's name."""
    return Ref(f"{COMPONENTS_SCHEMAS_PREFIX}{native_type_name(native_type)}")
