"""
Exception classes for structured-json documents.

This module defines specific exception types for the error conditions that
can occur while parsing paths, loading documents and storing values.
"""


class StructuredJsonError(Exception):
    """Base exception for all structured-json errors."""

    pass


class PathValidationError(StructuredJsonError, ValueError):
    """Raised when a path string does not follow the path grammar."""

    def __init__(self, path: str | None, reason: str, segment: str | None = None):
        """
        Initialize the exception.

        Params:
            path: The invalid path
            reason: Why the path is invalid
            segment: The colon-delimited part that failed, if any
        """
        self.path = path
        self.reason = reason
        self.segment = segment
        super().__init__(f"Invalid path '{path}': {reason}")


class EmptyPathError(PathValidationError):
    """Raised when a path is empty or contains no segments."""

    def __init__(self, path: str | None):
        super().__init__(path, "path resulted in no valid segments")


class InvalidPathSegmentError(PathValidationError):
    """Raised when a segment has no key or cannot be fully consumed."""

    def __init__(self, path: str, segment: str):
        super().__init__(path, f"invalid path segment '{segment}'", segment)


class EmptyArrayIndexError(PathValidationError):
    """Raised for an empty bracket pair such as ``items[]``."""

    def __init__(self, path: str, segment: str):
        super().__init__(path, f"empty array index in '{segment}'", segment)


class InvalidArrayIndexError(PathValidationError):
    """Raised when bracket contents are not an integer."""

    def __init__(self, path: str, segment: str, index_text: str):
        """
        Initialize the exception.

        Params:
            path: The invalid path
            segment: The part holding the bad index
            index_text: Raw bracket contents
        """
        self.index_text = index_text
        super().__init__(
            path, f"invalid array index '{index_text}' in '{segment}'", segment
        )


class NegativeArrayIndexError(PathValidationError):
    """Raised when bracket contents are a negative integer."""

    def __init__(self, path: str, segment: str, index: int):
        self.index = index
        super().__init__(
            path, f"negative array index '{index}' in '{segment}'", segment
        )


class MultipleArrayIndicesError(PathValidationError):
    """Raised when one segment carries more than one bracket, e.g. ``a[0][1]``."""

    def __init__(self, path: str, segment: str):
        super().__init__(
            path, f"multiple array indices not supported in '{segment}'", segment
        )


class InvalidDocumentError(StructuredJsonError, ValueError):
    """Raised when serialized input cannot be loaded as a document."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Description of the decoding failure
        """
        self.reason = reason
        super().__init__(f"Invalid JSON document: {reason}")


class UnsupportedValueError(StructuredJsonError, TypeError):
    """Raised when a Python object cannot be represented as a JSON value."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"Cannot store value of type '{type(value).__name__}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
