"""Components builder."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from openapi_spec_dsl.document_encoding.wire_codec import to_json_value
from openapi_spec_dsl.reflection_derivation.class_schema_deriver import derive_schema
from openapi_spec_dsl.schema_composition.example_builders import ExampleBuilder
from openapi_spec_dsl.schema_composition.reference_paths import native_type_name
from openapi_spec_dsl.schema_composition.schema_builder import SchemaBlock, SchemaBuilder
from openapi_spec_dsl.spec_model.document_models import Components, SecurityScheme
from openapi_spec_dsl.spec_model.schema_models import Example, Schema, frozen_mapping


class ComponentsBuilder:
    """Accumulates reusable schemas, security schemes, and examples."""

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}
        self._security_schemes: dict[str, SecurityScheme] = {}
        self._examples: dict[str, Example] = {}

    def schema(self, name: str, block: SchemaBlock) -> ComponentsBuilder:
        """Register a schema built by ``block`` under ``name``."""
        builder = SchemaBuilder()
        block(builder)
        self._schemas[name] = builder.build()
        return self

    def schema_from_type(self, native_type: type) -> ComponentsBuilder:
        """Register the flat object schema derived from ``native_type`` under its name."""
        self._schemas[native_type_name(native_type)] = derive_schema(native_type)
        return self

    def security_scheme(
        self,
        name: str,
        scheme_type: str,
        scheme: str | None = None,
        bearer_format: str | None = None,
        description: str | None = None,
    ) -> ComponentsBuilder:
        self._security_schemes[name] = SecurityScheme(
            type=scheme_type, scheme=scheme, bearer_format=bearer_format, description=description
        )
        return self

    def example(
        self,
        name: str,
        value: Any = None,
        *,
        summary: str | None = None,
        description: str | None = None,
        block: Callable[[ExampleBuilder], Any] | None = None,
    ) -> ComponentsBuilder:
        """Register an example from a value, or from a block configuring an ``ExampleBuilder``."""
        if block is not None:
            builder = ExampleBuilder()
            block(builder)
            self._examples[name] = builder.build()
        else:
            self._examples[name] = Example(
                summary=summary, description=description, value=to_json_value(value)
            )
        return self

    def build(self) -> Components:
        return Components(
            schemas=frozen_mapping(self._schemas) or None,
            security_schemes=frozen_mapping(self._security_schemes) or None,
            examples=frozen_mapping(self._examples) or None,
        )
