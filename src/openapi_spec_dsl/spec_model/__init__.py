"""Schema and document model exports."""

from .document_models import (
    DEFAULT_OPENAPI_VERSION,
    Components,
    Contact,
    Header,
    Info,
    License,
    MediaType,
    OpenApiSpec,
    Operation,
    Parameter,
    ParameterLocation,
    PathItem,
    RequestBody,
    Response,
    SecurityScheme,
    Server,
    ServerVariable,
)
from .schema_models import (
    COMPONENTS_SCHEMAS_PREFIX,
    Discriminator,
    Example,
    Inline,
    JsonValue,
    Ref,
    Schema,
    SchemaFormat,
    SchemaReference,
    SchemaType,
    frozen_mapping,
)

__all__ = [
    "COMPONENTS_SCHEMAS_PREFIX",
    "Discriminator",
    "Example",
    "Inline",
    "JsonValue",
    "Ref",
    "Schema",
    "SchemaFormat",
    "SchemaReference",
    "SchemaType",
    "frozen_mapping",
    "DEFAULT_OPENAPI_VERSION",
    "Components",
    "Contact",
    "Header",
    "Info",
    "License",
    "MediaType",
    "OpenApiSpec",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "PathItem",
    "RequestBody",
    "Response",
    "SecurityScheme",
    "Server",
    "ServerVariable",
]
