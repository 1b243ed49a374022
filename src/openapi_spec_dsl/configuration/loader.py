"""Encoder settings file loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .encoder_settings import (
    DEFAULT_JSON_INDENT,
    DEFAULT_YAML_LINE_WIDTH,
    EncoderSettings,
    JsonEncoderSettings,
    YamlEncoderSettings,
)


class ConfigurationError(Exception):
    """Raised when the encoder settings file is invalid."""


def load_encoder_settings(config_path: Path | str) -> EncoderSettings:
    """Load and validate an encoder settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    return parse_encoder_settings(parsed)


def parse_encoder_settings(parsed: Any) -> EncoderSettings:
    """Validate an already parsed settings mapping."""
    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    return EncoderSettings(
        json=_parse_json_section(parsed.get("json")),
        yaml=_parse_yaml_section(parsed.get("yaml")),
    )


def _parse_json_section(value: Any) -> JsonEncoderSettings:
    section = _optional_mapping(value, "json")
    indent_raw = section.get("indent", DEFAULT_JSON_INDENT)
    indent = None if indent_raw is None else _require_positive_int(indent_raw, "json.indent")
    return JsonEncoderSettings(
        indent=indent,
        encode_defaults=_require_bool(
            section.get("encode_defaults", False), "json.encode_defaults"
        ),
        explicit_nulls=_require_bool(section.get("explicit_nulls", False), "json.explicit_nulls"),
        ensure_ascii=_require_bool(section.get("ensure_ascii", False), "json.ensure_ascii"),
    )


def _parse_yaml_section(value: Any) -> YamlEncoderSettings:
    section = _optional_mapping(value, "yaml")
    return YamlEncoderSettings(
        encode_defaults=_require_bool(
            section.get("encode_defaults", False), "yaml.encode_defaults"
        ),
        line_width=_require_positive_int(
            section.get("line_width", DEFAULT_YAML_LINE_WIDTH), "yaml.line_width"
        ),
        allow_unicode=_require_bool(section.get("allow_unicode", True), "yaml.allow_unicode"),
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
