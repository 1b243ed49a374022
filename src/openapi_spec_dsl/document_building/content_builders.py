"""Request body, response, and header builders."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from openapi_spec_dsl.document_encoding.wire_codec import to_json_value
from openapi_spec_dsl.schema_composition.example_builders import ExamplesBuilder
from openapi_spec_dsl.schema_composition.reference_paths import component_path, native_type_name
from openapi_spec_dsl.schema_composition.schema_builder import SchemaBlock, SchemaBuilder
from openapi_spec_dsl.spec_model.document_models import (
    Header,
    MediaType,
    RequestBody,
    Response,
)
from openapi_spec_dsl.spec_model.schema_models import Example, Schema, SchemaType, frozen_mapping

JSON_MEDIA_TYPE = "application/json"

_UNSET: Any = object()


def content_schema(target: str | type | None = None, block: SchemaBlock | None = None) -> Schema:
    """Return a pointer schema for a name or native type, else an inline schema from ``block``."""
    if isinstance(target, str):
        return Schema(ref=component_path(target))
    if isinstance(target, type):
        return Schema(ref=component_path(native_type_name(target)))
    builder = SchemaBuilder()
    if block is not None:
        block(builder)
    return builder.build()


class _JsonContentBuilder:
    """Shared ``application/json`` content handling."""

    def __init__(self) -> None:
        self._content: dict[str, MediaType] = {}

    def json_content(
        self,
        target: str | type | None = None,
        block: SchemaBlock | None = None,
        *,
        example: Any = _UNSET,
    ) -> Any:
        """Set the JSON media type schema, optionally with a single example."""
        media_type = MediaType(schema=content_schema(target, block))
        if example is not _UNSET:
            media_type = replace(media_type, example=to_json_value(example))
        self._content[JSON_MEDIA_TYPE] = media_type
        return self

    def example(self, value: Any) -> Any:
        """Set the single example of existing JSON content. No-op without content."""
        media_type = self._content.get(JSON_MEDIA_TYPE)
        if media_type is not None:
            self._content[JSON_MEDIA_TYPE] = replace(media_type, example=to_json_value(value))
        return self

    def examples(self, block: Callable[[ExamplesBuilder], Any]) -> Any:
        """Set named examples of existing JSON content, clearing the single example."""
        media_type = self._content.get(JSON_MEDIA_TYPE)
        if media_type is not None:
            builder = ExamplesBuilder()
            block(builder)
            self._content[JSON_MEDIA_TYPE] = replace(
                media_type, examples=builder.build(), example=None
            )
        return self


class RequestBodyBuilder(_JsonContentBuilder):
    """Accumulates an operation request body."""

    def __init__(self) -> None:
        super().__init__()
        self.description: str | None = None
        self.required = False

    def build(self) -> RequestBody:
        return RequestBody(
            description=self.description,
            content=frozen_mapping(self._content),
            required=self.required,
        )


class HeaderBuilder:
    """Accumulates a response header. ``example`` and ``examples`` replace each other."""

    def __init__(self) -> None:
        self.description: str | None = None
        self.required = False
        self.deprecated = False
        self._schema: Schema | None = None
        self._example: Any = None
        self._examples: Mapping[str, Example] | None = None

    def schema(self, target: str | SchemaBlock) -> HeaderBuilder:
        """Set the header schema from a component name or a schema block."""
        if isinstance(target, str):
            self._schema = content_schema(target)
        else:
            self._schema = content_schema(block=target)
        return self

    def example(self, value: Any) -> HeaderBuilder:
        self._example = value
        self._examples = None
        return self

    def examples(self, block: Callable[[ExamplesBuilder], Any]) -> HeaderBuilder:
        builder = ExamplesBuilder()
        block(builder)
        self._examples = builder.build()
        self._example = None
        return self

    def build(self) -> Header:
        return Header(
            description=self.description,
            required=self.required,
            deprecated=self.deprecated,
            schema=self._schema,
            example=to_json_value(self._example),
            examples=self._examples,
        )


class ResponseBuilder(_JsonContentBuilder):
    """Accumulates the response for one status code."""

    def __init__(self, description: str) -> None:
        super().__init__()
        self._description = description
        self._headers: dict[str, Header] = {}

    def header(  # pylint: disable=too-many-arguments
        self,
        name: str,
        description: str | None = None,
        *,
        schema_type: SchemaType | None = None,
        ref: str | None = None,
        required: bool = False,
        block: Callable[[HeaderBuilder], Any] | None = None,
    ) -> ResponseBuilder:
        """Add a header typed by ``schema_type`` or pointing at ``ref``, refined by ``block``."""
        builder = HeaderBuilder()
        builder.description = description
        builder.required = required
        if schema_type is not None:
            builder.schema(_typed_schema(schema_type))
        elif ref is not None:
            builder.schema(ref)
        if block is not None:
            block(builder)
        self._headers[name] = builder.build()
        return self

    def build(self) -> Response:
        return Response(
            description=self._description,
            content=frozen_mapping(self._content) or None,
            headers=frozen_mapping(self._headers) or None,
        )


def _typed_schema(schema_type: SchemaType) -> SchemaBlock:
    def configure(schema: SchemaBuilder) -> None:
        schema.type = schema_type

    return configure
