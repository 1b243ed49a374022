"""JSON document encoder."""

from __future__ import annotations

import json
import logging
from typing import Any

from openapi_spec_dsl.configuration.encoder_settings import JsonEncoderSettings
from openapi_spec_dsl.spec_model.schema_models import Schema, SchemaReference

from .wire_codec import WireFormatError, reference_from_wire, schema_from_wire, to_wire

_LOGGER = logging.getLogger("openapi_spec_dsl.encoding")
_LOGGER.addHandler(logging.NullHandler())


def encode_json(document: Any, settings: JsonEncoderSettings | None = None) -> str:
    """Serialize a document, schema, or reference to JSON text."""
    settings = settings or JsonEncoderSettings()
    tree = to_wire(
        document,
        encode_defaults=settings.encode_defaults,
        explicit_nulls=settings.explicit_nulls,
    )
    separators = None if settings.indent is not None else (",", ":")
    text = json.dumps(
        tree,
        indent=settings.indent,
        ensure_ascii=settings.ensure_ascii,
        separators=separators,
    )
    _LOGGER.debug("Encoded %s as JSON (%d characters)", type(document).__name__, len(text))
    return text


def decode_json_schema(text: str) -> Schema:
    """Parse JSON text into a schema."""
    return schema_from_wire(_load_object(text))


def decode_json_reference(text: str) -> SchemaReference:
    """Parse JSON text into ``Ref`` or ``Inline`` depending on the presence of ``$ref``."""
    return reference_from_wire(_load_object(text))


def _load_object(text: str) -> dict[str, Any]:
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise WireFormatError("JSON schema documents must be objects.")
    return parsed
