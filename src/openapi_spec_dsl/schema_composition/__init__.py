"""Schema composition exports."""

from .composition_patterns import (
    all_of_classes,
    choice,
    combine,
    discriminated_union,
    extending,
    nullable,
    one_of_classes,
    optional_schema,
)
from .discriminator_builder import DiscriminatorBuilder
from .example_builders import ExampleBuilder, ExamplesBuilder
from .reference_paths import (
    SchemaDerivationError,
    component_path,
    native_type_name,
    ref_from_name,
    ref_from_type,
    schema_ref,
)
from .schema_builder import (
    AllOfBuilder,
    AnyOfBuilder,
    OneOfBuilder,
    SchemaBuilder,
    inline,
    resolve_reference,
)

__all__ = [
    "SchemaBuilder",
    "OneOfBuilder",
    "AllOfBuilder",
    "AnyOfBuilder",
    "DiscriminatorBuilder",
    "ExampleBuilder",
    "ExamplesBuilder",
    "SchemaDerivationError",
    "component_path",
    "native_type_name",
    "ref_from_name",
    "ref_from_type",
    "schema_ref",
    "inline",
    "resolve_reference",
    "nullable",
    "optional_schema",
    "extending",
    "discriminated_union",
    "one_of_classes",
    "all_of_classes",
    "choice",
    "combine",
]
