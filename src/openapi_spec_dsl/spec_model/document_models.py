"""OpenAPI document entities embedding schemas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from .schema_models import JSON_VALUE, WIRE_NAME, Example, JsonValue, Schema

DEFAULT_OPENAPI_VERSION = "3.1.0"


class ParameterLocation(str, Enum):
    """Location of an operation parameter."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


@dataclass(frozen=True)
class Contact:
    """Contact information for the exposed API."""

    name: str | None = None
    url: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class License:
    """License information for the exposed API."""

    name: str
    url: str | None = None


@dataclass(frozen=True)
class Info:
    """API metadata."""

    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = field(default=None, metadata={WIRE_NAME: "termsOfService"})
    contact: Contact | None = None
    license: License | None = None


@dataclass(frozen=True)
class ServerVariable:
    """Substitution variable of a server URL template."""

    default: str
    enum_values: tuple[str, ...] | None = field(default=None, metadata={WIRE_NAME: "enum"})
    description: str | None = None


@dataclass(frozen=True)
class Server:
    """Target host of the API."""

    url: str
    description: str | None = None
    variables: Mapping[str, ServerVariable] | None = None


@dataclass(frozen=True)
class MediaType:
    """Schema and examples for one content type."""

    schema: Schema | None = None
    example: JsonValue = field(default=None, metadata={JSON_VALUE: True})
    examples: Mapping[str, Example] | None = None


@dataclass(frozen=True)
class Header:
    """Response header definition."""

    description: str | None = None
    required: bool = False
    deprecated: bool = False
    schema: Schema | None = None
    example: JsonValue = field(default=None, metadata={JSON_VALUE: True})
    examples: Mapping[str, Example] | None = None


@dataclass(frozen=True)
class Parameter:
    """Operation parameter."""

    name: str
    location: ParameterLocation = field(metadata={WIRE_NAME: "in"})
    description: str | None = None
    required: bool = False
    schema: Schema | None = None
    example: JsonValue = field(default=None, metadata={JSON_VALUE: True})
    examples: Mapping[str, Example] | None = None


@dataclass(frozen=True, kw_only=True)
class RequestBody:
    """Operation request body."""

    description: str | None = None
    content: Mapping[str, MediaType]
    required: bool = False


@dataclass(frozen=True)
class Response:
    """Operation response for one status code."""

    description: str
    content: Mapping[str, MediaType] | None = None
    headers: Mapping[str, Header] | None = None


@dataclass(frozen=True, kw_only=True)
class Operation:  # pylint: disable=too-many-instance-attributes
    """Single HTTP operation on a path."""

    tags: tuple[str, ...] | None = None
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = field(default=None, metadata={WIRE_NAME: "operationId"})
    parameters: tuple[Parameter, ...] | None = None
    request_body: RequestBody | None = field(default=None, metadata={WIRE_NAME: "requestBody"})
    responses: Mapping[str, Response]
    security: tuple[Mapping[str, tuple[str, ...]], ...] | None = None


@dataclass(frozen=True)
class PathItem:
    """Operations available on a single path."""

    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None
    patch: Operation | None = None
    summary: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class SecurityScheme:
    """Security scheme usable by operations."""

    type: str
    scheme: str | None = None
    bearer_format: str | None = field(default=None, metadata={WIRE_NAME: "bearerFormat"})
    description: str | None = None


@dataclass(frozen=True)
class Components:
    """Reusable document objects."""

    schemas: Mapping[str, Schema] | None = None
    security_schemes: Mapping[str, SecurityScheme] | None = field(
        default=None, metadata={WIRE_NAME: "securitySchemes"}
    )
    examples: Mapping[str, Example] | None = None


@dataclass(frozen=True, kw_only=True)
class OpenApiSpec:
    """Root OpenAPI document."""

    openapi: str
    info: Info
    servers: tuple[Server, ...] = ()
    paths: Mapping[str, PathItem] = field(default_factory=dict)
    components: Components | None = None
