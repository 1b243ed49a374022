"""Encoder configuration exports."""

from .encoder_settings import (
    DEFAULT_JSON_INDENT,
    DEFAULT_YAML_LINE_WIDTH,
    EncoderSettings,
    JsonEncoderSettings,
    YamlEncoderSettings,
)
from .loader import ConfigurationError, load_encoder_settings, parse_encoder_settings

__all__ = [
    "EncoderSettings",
    "JsonEncoderSettings",
    "YamlEncoderSettings",
    "DEFAULT_JSON_INDENT",
    "DEFAULT_YAML_LINE_WIDTH",
    "ConfigurationError",
    "load_encoder_settings",
    "parse_encoder_settings",
]
