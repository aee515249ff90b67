"""
structured-json - A mutable JSON document addressed by compact string paths

Values are read and written through paths such as ``user:addresses[0]:city``
instead of nested object graphs.
"""

from importlib.metadata import version

from structured_json.conversion import TypeMappingConfig
from structured_json.core.values import (
    NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    ValueKind,
)
from structured_json.document import StructuredJson
from structured_json.exceptions import (
    InvalidDocumentError,
    PathValidationError,
    StructuredJsonError,
)
from structured_json.serialization import SerializationOptions

__version__ = version("structured-json")

__all__ = [
    "__version__",
    "StructuredJson",
    "SerializationOptions",
    "TypeMappingConfig",
    "StructuredJsonError",
    "PathValidationError",
    "InvalidDocumentError",
    "Value",
    "ValueKind",
    "NULL",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
]
