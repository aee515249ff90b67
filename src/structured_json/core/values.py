"""
Value model for structured-json documents.

Every node of a document tree is one of six variants, tagged by ``ValueKind``:

    JsonNull    the JSON ``null`` literal (singleton ``NULL``)
    JsonBool    ``true`` / ``false``
    JsonNumber  integer or floating point number
    JsonString  text
    JsonArray   ordered list of values
    JsonObject  insertion-ordered mapping of key to value

Leaves and containers share the same ``Value`` type so the navigator and the
path lister can recurse uniformly. ``to_value`` and ``to_python`` convert
between plain Python data and the model.
"""

import copy
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from pydantic_core import PydanticSerializationError, to_jsonable_python

from structured_json.exceptions import UnsupportedValueError


class ValueKind(Enum):
    """Variant tag of a document value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class JsonNull:
    """Singleton for the JSON ``null`` literal."""

    kind: ClassVar[ValueKind] = ValueKind.NULL
    _instance: "JsonNull | None" = None

    def __new__(cls) -> "JsonNull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"


NULL = JsonNull()


@dataclass
class JsonBool:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOL


@dataclass
class JsonNumber:
    value: int | float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise TypeError("JsonNumber does not accept bool values, use JsonBool")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError(f"JsonNumber must be finite, got {self.value}")

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)


@dataclass
class JsonString:
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass
class JsonArray:
    items: list["Value"] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def ensure_length(self, index: int) -> None:
        """Grow the array with NULL padding until ``index`` is addressable.

        Arrays only ever grow here; a shorter request leaves the array as is.
        """
        while len(self.items) <= index:
            self.items.append(NULL)


@dataclass
class JsonObject:
    entries: dict[str, "Value"] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.entries)


Value = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

_VALUE_TYPES = (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject)


def is_value(obj: Any) -> bool:
    """Check whether ``obj`` is already a node of the value model."""
    return isinstance(obj, _VALUE_TYPES)


def _object_key(key: Any) -> str:
    """Stringify a mapping key the way JSON encoding does."""
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return str(key)
    raise UnsupportedValueError(key, "object keys must be str, int, float, bool or None")


def to_value(obj: Any) -> Value:
    """
    Convert plain Python data into the value model.

    Scalars already in the model are returned unchanged and containers are
    deep-copied, so a tree never shares nodes with its input. Objects outside the
    JSON data types (pydantic models, dataclasses, datetimes, enums, ...) are
    first reduced with pydantic's JSON-compatible encoder. Enum members are
    stored as their value, also for ``str`` and ``int`` mixins.

    Params:
        obj: Python object to convert

    Returns:
        The equivalent Value tree

    Raises:
        UnsupportedValueError: If the object has no JSON representation
    """
    if obj is None:
        return NULL
    if isinstance(obj, (JsonArray, JsonObject)):
        return copy.deepcopy(obj)
    if is_value(obj):
        return obj
    if isinstance(obj, Enum):
        return to_value(obj.value)
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, int):
        return JsonNumber(int(obj))
    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise UnsupportedValueError(
                obj, "NaN and infinity have no JSON representation"
            )
        return JsonNumber(float(obj))
    if isinstance(obj, str):
        return JsonString(str(obj))
    if isinstance(obj, Mapping):
        return JsonObject({_object_key(k): to_value(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return JsonArray([to_value(item) for item in obj])

    try:
        jsonable = to_jsonable_python(obj)
    except PydanticSerializationError as e:
        raise UnsupportedValueError(obj, str(e)) from e
    return to_value(jsonable)


def to_python(value: Value) -> Any:
    """
    Convert a value tree back into plain Python data.

    Containers are rebuilt, so the result never aliases the document tree.
    """
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.entries.items()}
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JsonNull):
        return None
    return value.value
