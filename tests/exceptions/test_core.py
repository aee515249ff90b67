"""
Tests for the exception hierarchy.
"""

import pytest

from structured_json.exceptions import (
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
from structured_json.parsing import parse_path


class TestHierarchy:
    """Test base classes of every error."""

    def test_path_errors_share_a_base(self):
        """Test every grammar error is a PathValidationError."""
        errors = [
            EmptyPathError(""),
            InvalidPathSegmentError("a]", "a]"),
            EmptyArrayIndexError("a[]", "a[]"),
            InvalidArrayIndexError("a[x]", "a[x]", "x"),
            NegativeArrayIndexError("a[-1]", "a[-1]", -1),
            MultipleArrayIndicesError("a[0][1]", "a[0][1]"),
        ]

        for error in errors:
            assert isinstance(error, PathValidationError)
            assert isinstance(error, StructuredJsonError)
            assert isinstance(error, ValueError)

    def test_document_and_value_errors(self):
        """Test builtin bases of non-path errors."""
        assert isinstance(InvalidDocumentError("bad"), ValueError)
        assert isinstance(UnsupportedValueError(object()), TypeError)
        assert isinstance(UnsupportedValueError(object()), StructuredJsonError)

    def test_catchable_as_value_error(self):
        """Test callers can catch grammar errors with ValueError."""
        with pytest.raises(ValueError):
            parse_path("items[abc]")


class TestMessages:
    """Test messages and attributes."""

    def test_path_validation_error(self):
        """Test the base message format."""
        error = PathValidationError("a::b", "something wrong")

        assert str(error) == "Invalid path 'a::b': something wrong"
        assert error.path == "a::b"
        assert error.reason == "something wrong"
        assert error.segment is None

    def test_segment_is_recorded(self):
        """Test the failing segment is available on the error."""
        with pytest.raises(EmptyArrayIndexError) as exc_info:
            parse_path("user:items[]:name")

        assert exc_info.value.path == "user:items[]:name"
        assert exc_info.value.segment == "items[]"

    def test_invalid_index_text(self):
        """Test the raw index text is kept."""
        with pytest.raises(InvalidArrayIndexError) as exc_info:
            parse_path("items[abc]")

        assert exc_info.value.index_text == "abc"
        assert "abc" in str(exc_info.value)

    def test_negative_index_value(self):
        """Test the parsed negative index is kept."""
        with pytest.raises(NegativeArrayIndexError) as exc_info:
            parse_path("items[-1]")

        assert exc_info.value.index == -1

    def test_empty_path(self):
        """Test the empty path message."""
        assert "no valid segments" in str(EmptyPathError(":::"))

    def test_invalid_document(self):
        """Test the document message prefix."""
        error = InvalidDocumentError("unexpected end")

        assert str(error) == "Invalid JSON document: unexpected end"
        assert error.reason == "unexpected end"

    def test_unsupported_value(self):
        """Test the type name and optional reason."""

        class Opaque:
            pass

        value = Opaque()
        error = UnsupportedValueError(value, "no JSON form")

        assert str(error) == "Cannot store value of type 'Opaque': no JSON form"
        assert error.value is value
        assert str(UnsupportedValueError(1j)) == "Cannot store value of type 'complex'"
