"""OpenAPI document building exports."""

from .components_builder import ComponentsBuilder
from .content_builders import (
    JSON_MEDIA_TYPE,
    HeaderBuilder,
    RequestBodyBuilder,
    ResponseBuilder,
    content_schema,
)
from .openapi_builder import (
    ContactBuilder,
    DocumentBuildError,
    InfoBuilder,
    OpenApiBuilder,
    ServerBuilder,
    openapi,
)
from .paths_builder import OperationBuilder, PathItemBuilder, PathsBuilder

__all__ = [
    "openapi",
    "OpenApiBuilder",
    "InfoBuilder",
    "ContactBuilder",
    "ServerBuilder",
    "DocumentBuildError",
    "PathsBuilder",
    "PathItemBuilder",
    "OperationBuilder",
    "RequestBodyBuilder",
    "ResponseBuilder",
    "HeaderBuilder",
    "ComponentsBuilder",
    "JSON_MEDIA_TYPE",
    "content_schema",
]
