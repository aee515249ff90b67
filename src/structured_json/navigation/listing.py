"""
Flattened listing of every leaf in a document tree.

Paths are rebuilt in the same syntax the parser accepts. Scalars under an
object key are always listed, NULL included. Inside arrays only non-null
scalars are listed, so padding of sparse arrays stays out of the listing.
Containers themselves are never listed.
"""

from structured_json.core.values import JsonArray, JsonNull, JsonObject, Value
from structured_json.parsing.path_parser import join_index, join_key


def list_paths(root: JsonObject) -> dict[str, Value]:
    """
    Map every leaf path of the tree to its value, in depth-first order.

    Params:
        root: Document root

    Returns:
        Dict of path string to leaf Value
    """
    listing: dict[str, Value] = {}
    _walk_object(root, "", listing)
    return listing


def _walk_object(node: JsonObject, prefix: str, listing: dict[str, Value]) -> None:
    for key, child in node.entries.items():
        path = join_key(prefix, key)
        if isinstance(child, JsonObject):
            _walk_object(child, path, listing)
        elif isinstance(child, JsonArray):
            _walk_array(child, path, listing)
        else:
            listing[path] = child


def _walk_array(node: JsonArray, prefix: str, listing: dict[str, Value]) -> None:
    for index, child in enumerate(node.items):
        path = join_index(prefix, index)
        if isinstance(child, JsonObject):
            _walk_object(child, path, listing)
        elif isinstance(child, JsonArray):
            _walk_array(child, path, listing)
        elif not isinstance(child, JsonNull):
            listing[path] = child
