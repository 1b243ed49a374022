"""Example builders shared by schemas, media types, and headers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from openapi_spec_dsl.document_encoding.wire_codec import to_json_value
from openapi_spec_dsl.spec_model.schema_models import Example, frozen_mapping


class ExampleBuilder:
    """Accumulates the fields of one named example."""

    def __init__(self) -> None:
        self.summary: str | None = None
        self.description: str | None = None
        self.value: Any = None
        self.external_value: str | None = None

    def build(self) -> Example:
        return Example(
            summary=self.summary,
            description=self.description,
            value=to_json_value(self.value),
            external_value=self.external_value,
        )


class ExamplesBuilder:
    """Accumulates named examples in call order."""

    def __init__(self) -> None:
        self._examples: dict[str, Example] = {}

    def example(
        self,
        name: str,
        value: Any = None,
        *,
        summary: str | None = None,
        description: str | None = None,
        block: Callable[[ExampleBuilder], None] | None = None,
    ) -> ExamplesBuilder:
        """Add an example from a value, or from a block configuring an ``ExampleBuilder``."""
        if block is not None:
            builder = ExampleBuilder()
            block(builder)
            self._examples[name] = builder.build()
        else:
            self._examples[name] = Example(
                summary=summary, description=description, value=to_json_value(value)
            )
        return self

    def build(self) -> Mapping[str, Example]:
        return frozen_mapping(self._examples)
