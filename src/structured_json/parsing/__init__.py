"""
structured-json path parsing.

This package turns path strings into typed segments and renders segments
back into path syntax.
"""

from structured_json.parsing.path_parser import (
    PATH_SEPARATOR,
    PathSegment,
    format_path,
    join_index,
    join_key,
    parse_path,
    parse_segment,
)

__all__ = [
    "PATH_SEPARATOR",
    "PathSegment",
    "parse_path",
    "parse_segment",
    "format_path",
    "join_key",
    "join_index",
]
