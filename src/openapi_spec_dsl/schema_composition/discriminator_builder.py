"""Discriminator builder."""

from __future__ import annotations

from openapi_spec_dsl.spec_model.schema_models import (
    COMPONENTS_SCHEMAS_PREFIX,
    Discriminator,
    frozen_mapping,
)

from .reference_paths import native_type_name


class DiscriminatorBuilder:
    """Accumulates ``value -> pointer`` pairs for a discriminator property."""

    def __init__(self, property_name: str) -> None:
        self._property_name = property_name
        self._mapping: dict[str, str] = {}

    def mapping(self, value: str, target: str | type) -> DiscriminatorBuilder:
        """Map a discriminator value to a pointer string (verbatim) or a native type."""
        if isinstance(target, str):
            self._mapping[value] = target
        else:
            self._mapping[value] = f"{COMPONENTS_SCHEMAS_PREFIX}{native_type_name(target)}"
        return self

    def build(self) -> Discriminator:
        return Discriminator(
            property_name=self._property_name, mapping=frozen_mapping(self._mapping) or None
        )
