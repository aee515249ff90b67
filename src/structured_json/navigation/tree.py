"""
Tree navigation and mutation over the value model.

All four operations take the document root and an already parsed path. Every
segment addresses a key of an object; an array segment then addresses a slot
of the array stored under that key. Consequently the value reached between two
segments is always expected to be an object.

Reads fail closed: a missing key, an out of range index or a non-container in
the middle of the path resolves to ``None`` (absent), which is distinct from
an explicit ``NULL`` stored in the tree.
"""

import logging

from structured_json.core.values import JsonArray, JsonObject, Value
from structured_json.parsing.path_parser import PathSegment, format_path, join_key

logger = logging.getLogger(__name__)


def set_value(root: JsonObject, segments: list[PathSegment], value: Value) -> None:
    """
    Store a value at a path, creating intermediate containers as needed.

    A slot holding a value of the wrong kind for the path (scalar where an
    object is needed, object where an array is needed, and so on) is replaced
    wholesale by a fresh empty container. Arrays are padded with NULL up to
    the addressed index and never shrink.

    Params:
        root: Document root, mutated in place
        segments: Non-empty parsed path
        value: Value to store at the final segment
    """
    current = root
    last = len(segments) - 1

    for position, segment in enumerate(segments):
        is_last = position == last

        if segment.is_array_access:
            array = _ensure_array(current, segment.key, segments[:position])
            array.ensure_length(segment.index)
            if is_last:
                array.items[segment.index] = value
                return
            child = array.items[segment.index]
            if not isinstance(child, JsonObject):
                _log_replacement(child, format_path(segments[: position + 1]))
                child = JsonObject()
                array.items[segment.index] = child
            current = child
        else:
            if is_last:
                current.entries[segment.key] = value
                return
            child = current.entries.get(segment.key)
            if not isinstance(child, JsonObject):
                _log_replacement(child, format_path(segments[: position + 1]))
                child = JsonObject()
                current.entries[segment.key] = child
            current = child


def get_value(root: JsonObject, segments: list[PathSegment]) -> Value | None:
    """
    Resolve a path read-only.

    Returns:
        The value at the final segment (possibly NULL), or None when absent
    """
    current: Value = root
    for segment in segments:
        if not isinstance(current, JsonObject):
            return None
        if segment.key not in current.entries:
            return None
        current = current.entries[segment.key]

        if segment.is_array_access:
            if not isinstance(current, JsonArray):
                return None
            if segment.index >= len(current.items):
                return None
            current = current.items[segment.index]
    return current


def path_exists(root: JsonObject, segments: list[PathSegment]) -> bool:
    """Check presence at a path; an explicit NULL counts as present."""
    return get_value(root, segments) is not None


def remove_value(root: JsonObject, segments: list[PathSegment]) -> bool:
    """
    Remove the value at a path.

    The parent of the final segment is resolved with the read descent of
    ``get_value``. Removing an array slot shifts every later element down by
    one.

    Returns:
        True if something was removed, False if the path did not resolve
    """
    *parent_segments, target = segments
    parent = get_value(root, parent_segments) if parent_segments else root
    if not isinstance(parent, JsonObject):
        return False

    if not target.is_array_access:
        if target.key not in parent.entries:
            return False
        del parent.entries[target.key]
        return True

    array = parent.entries.get(target.key)
    if not isinstance(array, JsonArray) or target.index >= len(array.items):
        return False
    del array.items[target.index]
    return True


def _ensure_array(
    container: JsonObject, key: str, prefix: list[PathSegment]
) -> JsonArray:
    """Return the array under ``key``, replacing any other value with []."""
    existing = container.entries.get(key)
    if isinstance(existing, JsonArray):
        return existing
    _log_replacement(existing, join_key(format_path(prefix), key))
    array = JsonArray()
    container.entries[key] = array
    return array


def _log_replacement(existing: Value | None, location: str) -> None:
    if existing is not None:
        logger.debug(
            "Replacing %s value at '%s' with an empty container",
            existing.kind.value,
            location,
        )
