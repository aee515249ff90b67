"""
Parser for structured-json paths.

Path grammar::

    path    = segment (":" segment)*
    segment = key ("[" index "]")?

``:`` descends into an object, ``[n]`` addresses a zero-based array slot.
Keys are taken verbatim once the optional bracket suffix is stripped: they
may hold whitespace or symbols, and only ``:``, ``[`` and ``]`` are special.
There is no escaping, so a key can never contain those three characters.
"""

import re

from attrs import frozen

from structured_json.exceptions import (
    EmptyArrayIndexError,
    EmptyPathError,
    InvalidArrayIndexError,
    InvalidPathSegmentError,
    MultipleArrayIndicesError,
    NegativeArrayIndexError,
    PathValidationError,
)

PATH_SEPARATOR = ":"
INDEX_OPEN = "["
INDEX_CLOSE = "]"

_INDEX_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# Indices are 32-bit signed integers
MAX_INDEX = 2**31 - 1


@frozen
class PathSegment:
    """One colon-delimited unit of a parsed path."""

    key: str
    index: int | None = None

    @property
    def is_array_access(self) -> bool:
        return self.index is not None

    def __str__(self) -> str:
        if self.index is None:
            return self.key
        return f"{self.key}{INDEX_OPEN}{self.index}{INDEX_CLOSE}"


def parse_path(path: str | None) -> list[PathSegment]:
    """
    Parse a path string into its ordered segments.

    Empty parts produced by consecutive, leading or trailing separators are
    skipped, so ``"a::b"`` parses the same as ``"a:b"``.

    Params:
        path: Path string such as ``"user:addresses[0]:city"``

    Returns:
        Non-empty list of PathSegment

    Raises:
        EmptyPathError: If the path is empty or yields no segments
        PathValidationError: If any part violates the grammar (see parse_segment)
    """
    if path is None or path == "":
        raise EmptyPathError(path)
    if not isinstance(path, str):
        raise PathValidationError(path, "must be a string")

    segments = [
        parse_segment(part, path) for part in path.split(PATH_SEPARATOR) if part
    ]
    if not segments:
        raise EmptyPathError(path)
    return segments


def parse_segment(part: str, path: str | None = None) -> PathSegment:
    """
    Parse a single colon-free part into a PathSegment.

    Index problems are reported in a fixed order: empty brackets, non-integer
    or out of 32-bit range contents, negative value, then more than one
    opening bracket in the part.
    A well-formed index followed by trailing text is an invalid segment.

    Params:
        part: One non-empty part of a path
        path: The full path, used for error messages

    Returns:
        PathSegment for the part

    Raises:
        InvalidPathSegmentError: Empty key, unbalanced or misplaced brackets
        EmptyArrayIndexError: ``key[]``
        InvalidArrayIndexError: ``key[abc]``
        NegativeArrayIndexError: ``key[-1]``
        MultipleArrayIndicesError: ``key[0][1]``
    """
    path = part if path is None else path

    open_at = part.find(INDEX_OPEN)
    if open_at == -1:
        if INDEX_CLOSE in part:
            raise InvalidPathSegmentError(path, part)
        return PathSegment(part)

    key = part[:open_at]
    if not key or INDEX_CLOSE in key:
        raise InvalidPathSegmentError(path, part)

    close_at = part.find(INDEX_CLOSE, open_at + 1)
    if close_at == -1:
        raise InvalidPathSegmentError(path, part)

    index_text = part[open_at + 1 : close_at]
    if not index_text:
        raise EmptyArrayIndexError(path, part)
    if not _INDEX_PATTERN.match(index_text):
        raise InvalidArrayIndexError(path, part, index_text)

    index = int(index_text)
    if not -MAX_INDEX - 1 <= index <= MAX_INDEX:
        raise InvalidArrayIndexError(path, part, index_text)
    if index < 0:
        raise NegativeArrayIndexError(path, part, index)
    if part.count(INDEX_OPEN) > 1:
        raise MultipleArrayIndicesError(path, part)
    if close_at != len(part) - 1:
        raise InvalidPathSegmentError(path, part)

    return PathSegment(key, index)


def format_path(segments: list[PathSegment]) -> str:
    """Render parsed segments back into canonical path syntax."""
    return PATH_SEPARATOR.join(str(segment) for segment in segments)


def join_key(prefix: str, key: str) -> str:
    """Extend a path with an object key; a root-level key has no separator."""
    if not prefix:
        return key
    return f"{prefix}{PATH_SEPARATOR}{key}"


def join_index(prefix: str, index: int) -> str:
    """Extend a path with an array index."""
    return f"{prefix}{INDEX_OPEN}{index}{INDEX_CLOSE}"
