"""YAML document encoder.

PyYAML has no notion of the open JSON value union used for examples and enum
entries, so those fields are represented by ``_represent_json_value`` which
recurses through arrays and objects itself. Values are first normalized
with ``to_json_value``, as in the JSON encoder. Model entities go through a
representer that applies the same omission rules as the JSON encoder.
Decoding always raises: YAML output is never read back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, is_dataclass
from enum import Enum
from functools import lru_cache
from typing import Any

import yaml
from yaml.nodes import MappingNode, Node, SequenceNode

from openapi_spec_dsl.configuration.encoder_settings import YamlEncoderSettings
from openapi_spec_dsl.spec_model.schema_models import Inline, Ref, Schema, SchemaReference

from .wire_codec import is_json_value_field, iter_wire_fields, to_json_value

_LOGGER = logging.getLogger("openapi_spec_dsl.encoding")
_LOGGER.addHandler(logging.NullHandler())

_MAP_TAG = "tag:yaml.org,2002:map"
_SEQ_TAG = "tag:yaml.org,2002:seq"


class UnsupportedOperationError(NotImplementedError):
    """Raised for operations the YAML format deliberately does not offer."""


@dataclass(frozen=True)
class _OpenValue:
    """Top-level holder routing a bare JSON value through the open value representer."""

    value: Any


class _DocumentDumper(yaml.SafeDumper):  # pylint: disable=too-many-ancestors
    """Safe dumper with representers for model entities."""

    encode_defaults = False

    def ignore_aliases(self, data: Any) -> bool:
        return True


def encode_yaml(document: Any, settings: YamlEncoderSettings | None = None) -> str:
    """Serialize a document, schema, or reference to YAML text."""
    settings = settings or YamlEncoderSettings()
    text = _dump(document, settings)
    _LOGGER.debug("Encoded %s as YAML (%d characters)", type(document).__name__, len(text))
    return text


def encode_yaml_value(value: Any, settings: YamlEncoderSettings | None = None) -> str:
    """Serialize a bare open JSON value (null, bool, number, string, array, object) to YAML."""
    settings = settings or YamlEncoderSettings()
    return _dump(_OpenValue(to_json_value(value)), settings)


def decode_yaml(text: str) -> Any:
    """Always fails: YAML output is never read back."""
    raise UnsupportedOperationError("Decoding YAML documents is not supported.")


def _dump(data: Any, settings: YamlEncoderSettings) -> str:
    dumper = _dumper_for(settings.encode_defaults)
    return yaml.dump(
        data,
        Dumper=dumper,
        sort_keys=False,
        default_flow_style=False,
        width=settings.line_width,
        allow_unicode=settings.allow_unicode,
    )


@lru_cache(maxsize=None)
def _dumper_for(encode_defaults: bool) -> type[_DocumentDumper]:
    return type(
        "_ConfiguredDocumentDumper",
        (_DocumentDumper,),
        {"encode_defaults": encode_defaults},
    )


def _represent_json_value(dumper: _DocumentDumper, value: Any) -> Node:
    if value is None:
        return dumper.represent_none(value)
    # bool is a subclass of int and must be matched first.
    if isinstance(value, bool):
        return dumper.represent_bool(value)
    if isinstance(value, int):
        return dumper.represent_int(value)
    if isinstance(value, float):
        return dumper.represent_float(value)
    if isinstance(value, str):
        return dumper.represent_str(value)
    if isinstance(value, Mapping):
        pairs = [
            (dumper.represent_str(str(key)), _represent_json_value(dumper, item))
            for key, item in value.items()
        ]
        return MappingNode(_MAP_TAG, pairs)
    if isinstance(value, Sequence):
        return SequenceNode(_SEQ_TAG, [_represent_json_value(dumper, item) for item in value])
    return dumper.represent_str(str(value))


def _represent_open_value(dumper: _DocumentDumper, data: _OpenValue) -> Node:
    return _represent_json_value(dumper, data.value)


def _represent_reference(dumper: _DocumentDumper, data: SchemaReference) -> Node:
    if isinstance(data, Ref):
        return _represent_entity(dumper, Schema(ref=data.path))
    if isinstance(data, Inline):
        return _represent_entity(dumper, data.schema)
    raise yaml.representer.RepresenterError(f"Unknown schema reference variant: {data!r}")


def _represent_entity(dumper: _DocumentDumper, data: Any) -> Node:
    pairs = []
    for key, model_field, value in iter_wire_fields(
        data, encode_defaults=dumper.encode_defaults, explicit_nulls=False
    ):
        if is_json_value_field(model_field):
            value_node = _represent_json_value(dumper, to_json_value(value))
        else:
            value_node = dumper.represent_data(value)
        pairs.append((dumper.represent_str(key), value_node))
    return MappingNode(_MAP_TAG, pairs)


def _represent_enum(dumper: _DocumentDumper, data: Enum) -> Node:
    return dumper.represent_data(data.value)


def _represent_fallback(dumper: _DocumentDumper, data: Any) -> Node:
    if is_dataclass(data) and not isinstance(data, type):
        return _represent_entity(dumper, data)
    if isinstance(data, Mapping):
        pairs = [
            (dumper.represent_data(str(key)), dumper.represent_data(item))
            for key, item in data.items()
        ]
        return MappingNode(_MAP_TAG, pairs)
    if isinstance(data, (tuple, list)):
        return SequenceNode(_SEQ_TAG, [dumper.represent_data(item) for item in data])
    raise yaml.representer.RepresenterError(f"Cannot represent {type(data).__name__} as YAML.")


_DocumentDumper.add_representer(_OpenValue, _represent_open_value)
_DocumentDumper.add_multi_representer(SchemaReference, _represent_reference)
_DocumentDumper.add_multi_representer(Enum, _represent_enum)
_DocumentDumper.add_multi_representer(object, _represent_fallback)
