"""
structured-json exception classes.

This package provides all exception types used throughout structured-json
for consistent error handling and reporting.
"""

from structured_json.exceptions.core import (
    EmptyArrayIndexError,
    EmptyPathError,
    InvalidArrayIndexError,
    InvalidDocumentError,
    InvalidPathSegmentError,
    MultipleArrayIndicesError,
    NegativeArrayIndexError,
    PathValidationError,
    StructuredJsonError,
    UnsupportedValueError,
)

__all__ = [
    "StructuredJsonError",
    "PathValidationError",
    "EmptyPathError",
    "InvalidPathSegmentError",
    "EmptyArrayIndexError",
    "InvalidArrayIndexError",
    "NegativeArrayIndexError",
    "MultipleArrayIndicesError",
    "InvalidDocumentError",
    "UnsupportedValueError",
]
