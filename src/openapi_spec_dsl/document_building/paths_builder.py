"""Path, path item, and operation builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from openapi_spec_dsl.spec_model.document_models import (
    Operation,
    Parameter,
    ParameterLocation,
    PathItem,
    RequestBody,
    Response,
)
from openapi_spec_dsl.spec_model.schema_models import (
    Schema,
    SchemaFormat,
    SchemaType,
    frozen_mapping,
)

from .content_builders import RequestBodyBuilder, ResponseBuilder


class OperationBuilder:  # pylint: disable=too-many-instance-attributes
    """Accumulates a single HTTP operation."""

    def __init__(self) -> None:
        self.summary: str | None = None
        self.description: str | None = None
        self.operation_id: str | None = None
        self._tags: list[str] = []
        self._parameters: list[Parameter] = []
        self._request_body: RequestBody | None = None
        self._responses: dict[str, Response] = {}
        self._security: list[dict[str, tuple[str, ...]]] = []

    def tags(self, *tag_names: str) -> OperationBuilder:
        self._tags.extend(tag_names)
        return self

    def parameter(  # pylint: disable=too-many-arguments
        self,
        name: str,
        location: ParameterLocation | str,
        parameter_type: SchemaType | str,
        *,
        required: bool = False,
        description: str | None = None,
        schema_format: SchemaFormat | None = None,
    ) -> OperationBuilder:
        """Add a parameter whose schema is a bare primitive type."""
        self._parameters.append(
            Parameter(
                name=name,
                location=ParameterLocation(location),
                description=description,
                required=required,
                schema=Schema(type=SchemaType(parameter_type), format=schema_format),
            )
        )
        return self

    def request_body(self, block: Callable[[RequestBodyBuilder], Any]) -> OperationBuilder:
        builder = RequestBodyBuilder()
        block(builder)
        self._request_body = builder.build()
        return self

    def response(
        self,
        code: str,
        description: str,
        block: Callable[[ResponseBuilder], Any] | None = None,
    ) -> OperationBuilder:
        builder = ResponseBuilder(description)
        if block is not None:
            block(builder)
        self._responses[code] = builder.build()
        return self

    def security(self, scheme: str, *scopes: str) -> OperationBuilder:
        self._security.append({scheme: tuple(scopes)})
        return self

    def build(self) -> Operation:
        return Operation(
            tags=tuple(self._tags) or None,
            summary=self.summary,
            description=self.description,
            operation_id=self.operation_id,
            parameters=tuple(self._parameters) or None,
            request_body=self._request_body,
            responses=frozen_mapping(self._responses),
            security=tuple(self._security) or None,
        )


OperationBlock = Callable[[OperationBuilder], Any]


class PathItemBuilder:
    """Accumulates the operations of one path."""

    def __init__(self) -> None:
        self.summary: str | None = None
        self.description: str | None = None
        self._operations: dict[str, Operation] = {}

    def get(self, block: OperationBlock) -> PathItemBuilder:
        return self._operation("get", block)

    def post(self, block: OperationBlock) -> PathItemBuilder:
        return self._operation("post", block)

    def put(self, block: OperationBlock) -> PathItemBuilder:
        return self._operation("put", block)

    def delete(self, block: OperationBlock) -> PathItemBuilder:
        return self._operation("delete", block)

    def patch(self, block: OperationBlock) -> PathItemBuilder:
        return self._operation("patch", block)

    def _operation(self, method: str, block: OperationBlock) -> PathItemBuilder:
        builder = OperationBuilder()
        block(builder)
        self._operations[method] = builder.build()
        return self

    def build(self) -> PathItem:
        return PathItem(summary=self.summary, description=self.description, **self._operations)


class PathsBuilder:
    """Accumulates path items into a shared, ordered mapping."""

    def __init__(self, paths: dict[str, PathItem]) -> None:
        self._paths = paths

    def path(self, path: str, block: Callable[[PathItemBuilder], Any]) -> PathsBuilder:
        builder = PathItemBuilder()
        block(builder)
        self._paths[path] = builder.build()
        return self
