"""Encoder configuration entities."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_JSON_INDENT = 2
DEFAULT_YAML_LINE_WIDTH = 80


@dataclass(frozen=True)
class JsonEncoderSettings:
    """Options for JSON text output.

    ``indent=None`` produces compact single-line output.
    """

    indent: int | None = DEFAULT_JSON_INDENT
    encode_defaults: bool = False
    explicit_nulls: bool = False
    ensure_ascii: bool = False


@dataclass(frozen=True)
class YamlEncoderSettings:
    """Options for YAML text output."""

    encode_defaults: bool = False
    line_width: int = DEFAULT_YAML_LINE_WIDTH
    allow_unicode: bool = True


@dataclass(frozen=True)
class EncoderSettings:
    """Top-level encoder configuration aggregate."""

    json: JsonEncoderSettings = field(default_factory=JsonEncoderSettings)
    yaml: YamlEncoderSettings = field(default_factory=YamlEncoderSettings)
