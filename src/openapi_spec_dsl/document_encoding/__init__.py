"""Document encoding exports."""

from .json_encoder import decode_json_reference, decode_json_schema, encode_json
from .wire_codec import (
    WireFormatError,
    reference_from_wire,
    schema_from_wire,
    to_json_value,
    to_wire,
)
from .yaml_encoder import UnsupportedOperationError, decode_yaml, encode_yaml, encode_yaml_value

__all__ = [
    "encode_json",
    "decode_json_schema",
    "decode_json_reference",
    "encode_yaml",
    "encode_yaml_value",
    "decode_yaml",
    "UnsupportedOperationError",
    "WireFormatError",
    "reference_from_wire",
    "schema_from_wire",
    "to_json_value",
    "to_wire",
]
