"""
Path-addressable JSON document.

``StructuredJson`` owns a single root object and exposes two tiers of
operations over it:

    throwing    set, get, get_value, get_as
                path grammar errors propagate as PathValidationError
    predicate   has_path, remove
                any path grammar error resolves to False

Example::

    doc = StructuredJson()
    doc.set("user:addresses[0]:city", "Ankara")
    doc.get("user:addresses[0]:city")  # "Ankara"
    doc.list_paths()                   # {"user:addresses[0]:city": "Ankara"}
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from structured_json.conversion.type_mapping import (
    MISSING,
    TypeConverter,
    TypeMappingConfig,
    create_type_mapping_config,
)
from structured_json.core.types import PathListing
from structured_json.core.values import JsonObject, Value, to_python, to_value
from structured_json.exceptions import PathValidationError
from structured_json.navigation import (
    get_value,
    list_paths,
    path_exists,
    remove_value,
    set_value,
)
from structured_json.parsing import PathSegment, parse_path
from structured_json.serialization import (
    SerializationOptions,
    dump_document,
    load_document,
)

T = TypeVar("T")


class StructuredJson:
    """Mutable JSON document addressed by ``key:key[index]`` paths.

    Not thread-safe: callers sharing a document across threads must serialize
    access themselves.
    """

    def __init__(
        self,
        json_text: str | bytes | None = None,
        type_mapping: TypeMappingConfig | dict | None = None,
    ):
        """
        Create a document, optionally populated from JSON text.

        Params:
            json_text: Serialized JSON object; None or blank text gives an empty document
            type_mapping: Options for ``get_as`` conversions

        Raises:
            InvalidDocumentError: If the text is not a valid JSON object
        """
        self._root: JsonObject = load_document(json_text)
        self._converter = TypeConverter(create_type_mapping_config(type_mapping))

    @classmethod
    def from_python(
        cls,
        data: Mapping[str, Any],
        type_mapping: TypeMappingConfig | dict | None = None,
    ) -> "StructuredJson":
        """Build a document from a mapping of plain Python data."""
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Document root must be a mapping, got {type(data).__name__}"
            )
        document = cls(type_mapping=type_mapping)
        document._root = to_value(data)
        return document

    # -- Throwing operations --------------------------------------------

    def set(self, path: str, value: Any) -> None:
        """
        Store a value at a path, creating or replacing containers on the way.

        Raises:
            PathValidationError: If the path is malformed
            UnsupportedValueError: If the value has no JSON representation
        """
        segments = parse_path(path)
        set_value(self._root, segments, to_value(value))

    def get(self, path: str) -> Any:
        """
        Read the value at a path as plain Python data.

        Returns:
            The stored value, or None when the path is absent or holds null

        Raises:
            PathValidationError: If the path is malformed
        """
        node = self.get_value(path)
        if node is None:
            return None
        return to_python(node)

    def get_value(self, path: str) -> Value | None:
        """Read the value node at a path; None means absent, NULL means null."""
        return get_value(self._root, parse_path(path))

    def get_as(self, path: str, target_type: type[T] | Any, default: Any = MISSING) -> T | Any:
        """
        Read the value at a path converted to ``target_type``.

        Conversion never raises: a failed conversion, an absent path or a
        null value all return ``default`` (the type's zero value when omitted).

        Raises:
            PathValidationError: If the path is malformed
        """
        return self._converter.convert_value(self.get(path), target_type, default)

    # -- Predicate operations -------------------------------------------

    def has_path(self, path: str) -> bool:
        """Check whether a path resolves; an explicit null counts as present."""
        segments = self._parse_or_none(path)
        if segments is None:
            return False
        return path_exists(self._root, segments)

    def remove(self, path: str) -> bool:
        """
        Remove the value at a path.

        Removing an array slot shifts later elements down by one.

        Returns:
            True if a value was removed, False otherwise (including malformed paths)
        """
        segments = self._parse_or_none(path)
        if segments is None:
            return False
        return remove_value(self._root, segments)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has_path(path)

    # -- Whole-document operations --------------------------------------

    def clear(self) -> None:
        """Remove all data from the document."""
        self._root.entries.clear()

    def list_paths(self) -> PathListing:
        """Map every leaf path to its value as plain Python data."""
        return {path: to_python(value) for path, value in list_paths(self._root).items()}

    def to_json(self, options: SerializationOptions | dict | None = None) -> str:
        """Serialize the document; pretty-printed unless options say otherwise."""
        return dump_document(self._root, options)

    def to_python(self) -> dict[str, Any]:
        """Return a deep copy of the document as plain Python data."""
        return to_python(self._root)

    @property
    def root(self) -> JsonObject:
        return self._root

    def __len__(self) -> int:
        return len(self._root)

    def __repr__(self) -> str:
        return f"StructuredJson({self.to_json(SerializationOptions.compact())})"

    def _parse_or_none(self, path: str) -> list[PathSegment] | None:
        try:
            return parse_path(path)
        except PathValidationError:
            return None
