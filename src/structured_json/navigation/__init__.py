"""
structured-json tree navigation.

This package walks, builds and flattens document trees for parsed paths.
"""

from structured_json.navigation.listing import list_paths
from structured_json.navigation.tree import (
    get_value,
    path_exists,
    remove_value,
    set_value,
)

__all__ = [
    "set_value",
    "get_value",
    "path_exists",
    "remove_value",
    "list_paths",
]
