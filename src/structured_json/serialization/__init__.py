"""
structured-json serialization.

This package loads documents from JSON text and writes them back.
"""

from structured_json.serialization.codec import (
    decode_value,
    dump_document,
    load_document,
)
from structured_json.serialization.options import (
    SerializationOptions,
    create_serialization_options,
)

__all__ = [
    "SerializationOptions",
    "create_serialization_options",
    "load_document",
    "decode_value",
    "dump_document",
]
