"""Reflection-based schema derivation exports."""

from openapi_spec_dsl.schema_composition.reference_paths import SchemaDerivationError

from .class_schema_deriver import derive_schema
from .description_markers import PropertyDescription, class_description, schema_description

__all__ = [
    "derive_schema",
    "PropertyDescription",
    "class_description",
    "schema_description",
    "SchemaDerivationError",
]
