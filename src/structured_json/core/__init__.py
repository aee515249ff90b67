"""
Core structured-json components.

This package provides the value model every document tree is built from and
the type aliases shared across the package.
"""

from structured_json.core.types import PathListing, PythonValue
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
    is_value,
    to_python,
    to_value,
)

__all__ = [
    "Value",
    "ValueKind",
    "NULL",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "is_value",
    "to_value",
    "to_python",
    "PythonValue",
    "PathListing",
]
