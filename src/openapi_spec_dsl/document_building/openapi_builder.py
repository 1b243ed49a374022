"""OpenAPI document entry point and metadata builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from openapi_spec_dsl.spec_model.document_models import (
    DEFAULT_OPENAPI_VERSION,
    Components,
    Contact,
    Info,
    License,
    OpenApiSpec,
    PathItem,
    Server,
    ServerVariable,
)
from openapi_spec_dsl.spec_model.schema_models import frozen_mapping

from .components_builder import ComponentsBuilder
from .paths_builder import PathsBuilder


class DocumentBuildError(Exception):
    """Raised when a document is built without its mandatory parts."""


class ContactBuilder:
    """Accumulates API contact details."""

    def __init__(self) -> None:
        self.name: str | None = None
        self.url: str | None = None
        self.email: str | None = None

    def build(self) -> Contact:
        return Contact(name=self.name, url=self.url, email=self.email)


class InfoBuilder:
    """Accumulates API metadata. ``title`` and ``version`` are mandatory."""

    def __init__(self) -> None:
        self.title: str | None = None
        self.version: str | None = None
        self.description: str | None = None
        self.terms_of_service: str | None = None
        self._contact: Contact | None = None
        self._license: License | None = None

    def contact(self, block: Callable[[ContactBuilder], Any]) -> InfoBuilder:
        builder = ContactBuilder()
        block(builder)
        self._contact = builder.build()
        return self

    def license(self, name: str, url: str | None = None) -> InfoBuilder:
        self._license = License(name=name, url=url)
        return self

    def build(self) -> Info:
        if self.title is None:
            raise DocumentBuildError("info.title is required.")
        if self.version is None:
            raise DocumentBuildError("info.version is required.")
        return Info(
            title=self.title,
            version=self.version,
            description=self.description,
            terms_of_service=self.terms_of_service,
            contact=self._contact,
            license=self._license,
        )


class ServerBuilder:
    """Accumulates one server entry."""

    def __init__(self, url: str) -> None:
        self._url = url
        self.description: str | None = None
        self._variables: dict[str, ServerVariable] = {}

    def variable(
        self,
        name: str,
        default: str,
        enum_values: tuple[str, ...] | None = None,
        description: str | None = None,
    ) -> ServerBuilder:
        self._variables[name] = ServerVariable(
            default=default, enum_values=enum_values, description=description
        )
        return self

    def build(self) -> Server:
        return Server(
            url=self._url,
            description=self.description,
            variables=frozen_mapping(self._variables) or None,
        )


class OpenApiBuilder:
    """Accumulates a whole OpenAPI document."""

    def __init__(self) -> None:
        self.openapi = DEFAULT_OPENAPI_VERSION
        self._info: Info | None = None
        self._servers: list[Server] = []
        self._paths: dict[str, PathItem] = {}
        self._components: Components | None = None

    def info(self, block: Callable[[InfoBuilder], Any]) -> OpenApiBuilder:
        builder = InfoBuilder()
        block(builder)
        self._info = builder.build()
        return self

    def server(
        self, url: str, block: Callable[[ServerBuilder], Any] | None = None
    ) -> OpenApiBuilder:
        builder = ServerBuilder(url)
        if block is not None:
            block(builder)
        self._servers.append(builder.build())
        return self

    def paths(self, block: Callable[[PathsBuilder], Any]) -> OpenApiBuilder:
        block(PathsBuilder(self._paths))
        return self

    def components(self, block: Callable[[ComponentsBuilder], Any]) -> OpenApiBuilder:
        builder = ComponentsBuilder()
        block(builder)
        self._components = builder.build()
        return self

    def build(self) -> OpenApiSpec:
        if self._info is None:
            raise DocumentBuildError("An OpenAPI document requires info(...).")
        return OpenApiSpec(
            openapi=self.openapi,
            info=self._info,
            servers=tuple(self._servers),
            paths=frozen_mapping(self._paths),
            components=self._components,
        )


def openapi(block: Callable[[OpenApiBuilder], Any]) -> OpenApiSpec:
    """Build an OpenAPI document from a block configuring an ``OpenApiBuilder``."""
    builder = OpenApiBuilder()
    block(builder)
    return builder.build()
