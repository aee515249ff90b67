"""
JSON text codec for structured-json documents.

Decoding delegates to the standard ``json`` module and converts the result
into the value model. The document root must be a JSON object. Integers that
do not fit a signed 64-bit range are stored as floating point numbers.
"""

import json
import logging
import math
from typing import Any

from structured_json.core.values import (
    NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
    Value,
    to_python,
)
from structured_json.exceptions import InvalidDocumentError
from structured_json.serialization.options import (
    SerializationOptions,
    create_serialization_options,
)

logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_BOM = "\ufeff"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant '{name}'")


def load_document(text: str | bytes | bytearray | None) -> JsonObject:
    """
    Decode JSON text into a document root.

    Bytes are decoded by the json module's UTF-8/16/32 detection. ``None`` or
    blank input yields an empty document.

    Params:
        text: Serialized document

    Returns:
        Root JsonObject

    Raises:
        InvalidDocumentError: If the text is not valid JSON or its root is not an object
    """
    if text is None:
        return JsonObject()
    if isinstance(text, str):
        text = text.lstrip(_BOM)
    if not text.strip():
        return JsonObject()

    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidDocumentError(str(e)) from e
    except RecursionError as e:
        raise InvalidDocumentError(f"nesting too deep: {e}") from e

    if not isinstance(decoded, dict):
        raise InvalidDocumentError(
            f"root must be a JSON object, got {type(decoded).__name__}"
        )

    try:
        root = decode_value(decoded)
    except RecursionError as e:
        raise InvalidDocumentError(f"nesting too deep: {e}") from e
    logger.debug("Loaded document with %d top-level keys", len(root))
    return root


def decode_value(decoded: Any) -> Value:
    """Convert ``json.loads`` output into the value model."""
    if isinstance(decoded, dict):
        return JsonObject({key: decode_value(item) for key, item in decoded.items()})
    if isinstance(decoded, list):
        return JsonArray([decode_value(item) for item in decoded])
    if isinstance(decoded, str):
        return JsonString(decoded)
    if isinstance(decoded, bool):
        return JsonBool(decoded)
    if isinstance(decoded, int):
        if _INT64_MIN <= decoded <= _INT64_MAX:
            return JsonNumber(decoded)
        try:
            return JsonNumber(float(decoded))
        except OverflowError as e:
            raise InvalidDocumentError(f"number out of range: {e}") from e
    if isinstance(decoded, float):
        if not math.isfinite(decoded):
            raise InvalidDocumentError(f"number out of range: {decoded}")
        return JsonNumber(decoded)
    return NULL


def dump_document(
    root: JsonObject, options: SerializationOptions | dict | None = None
) -> str:
    """
    Serialize a document root to JSON text.

    Params:
        root: Document root
        options: Formatting options, a dict of overrides, or None for pretty output

    Returns:
        JSON text
    """
    options = create_serialization_options(options)
    separators = None if options.is_pretty else (",", ":")
    return json.dumps(
        to_python(root),
        indent=options.indent,
        separators=separators,
        sort_keys=options.sort_keys,
        ensure_ascii=options.ensure_ascii,
    )
