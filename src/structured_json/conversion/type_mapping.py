"""
Typed retrieval for structured-json values.

Conversion is best effort: every failure resolves to a default value instead
of raising. Attempts run in a fixed order:

    1. the value already is an instance of the target type
    2. text -> number (int, float, Decimal) and strict text -> bool
    3. number -> text
    4. structural re-decode of the value's JSON form with a pydantic TypeAdapter
"""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, get_origin

from pydantic import PydanticUserError, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_NUMERIC_TYPES = (int, float, Decimal)

_ZERO_CONSTRUCTIBLE = (
    int,
    float,
    complex,
    bool,
    str,
    bytes,
    Decimal,
    list,
    dict,
    tuple,
    set,
    frozenset,
)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class TypeMappingConfig:
    """Configuration for typed retrieval behavior."""

    allow_string_parsing: bool = True
    strict_bool_parsing: bool = True  # Only "true"/"false"/"1"/"0"
    allow_structural_decode: bool = True

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "TypeMappingConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)


def zero_value(target_type: Any) -> Any:
    """
    Default returned when a conversion to ``target_type`` fails.

    Builtin scalars and collections get their empty value (``int`` -> 0,
    ``str`` -> "", ``list[int]`` -> []); every other type gets None.
    """
    origin = get_origin(target_type) or target_type
    if origin in _ZERO_CONSTRUCTIBLE:
        return origin()
    return None


class TypeConverter:
    """Converts stored document values into caller-requested Python types."""

    def __init__(self, config: TypeMappingConfig | None = None):
        self.config = config or TypeMappingConfig()

    def convert_value(self, value: Any, target_type: Any, default: Any = MISSING) -> Any:
        """
        Convert a plain Python value to ``target_type``.

        Params:
            value: Stored value as plain Python data; None means absent or null
            target_type: Requested type (class, generic alias, union, pydantic model, ...)
            default: Result on failure; the type's zero value when omitted

        Returns:
            Converted value, or the default when no conversion succeeds
        """
        fallback = zero_value(target_type) if default is MISSING else default
        if value is None:
            return fallback

        try:
            return self._convert(value, target_type)
        except (
            ValueError,
            TypeError,
            ArithmeticError,
            ValidationError,
            PydanticUserError,
        ) as e:
            logger.debug(
                "Cannot convert %s to %r, using default: %s",
                type(value).__name__,
                target_type,
                e,
            )
            return fallback

    def _convert(self, value: Any, target_type: Any) -> Any:
        if self._is_direct_match(value, target_type):
            return value

        if isinstance(value, str) and target_type in (*_NUMERIC_TYPES, bool):
            if not self.config.allow_string_parsing:
                raise ValueError(
                    f"String parsing disabled: cannot convert str to {target_type}"
                )
            if target_type is bool:
                return self._parse_bool_strict(value)
            return self._parse_number(value, target_type)

        if target_type is str and self._is_number(value):
            return str(value)

        if not self.config.allow_structural_decode:
            raise ValueError(
                f"Structural decoding disabled: cannot convert {type(value).__name__} to {target_type}"
            )
        return self._decode_structure(value, target_type)

    def _is_direct_match(self, value: Any, target_type: Any) -> bool:
        if get_origin(target_type) is not None or not isinstance(target_type, type):
            return False
        if isinstance(value, bool) and target_type is not bool:
            return target_type is object
        return isinstance(value, target_type)

    def _is_number(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def _parse_number(self, value: str, target_type: type) -> Any:
        """Parse text as a number; "12.5" is not a valid int."""
        return target_type(value.strip())

    def _parse_bool_strict(self, value: str) -> bool:
        """Parse bool from string with strict rules."""
        if not self.config.strict_bool_parsing:
            return bool(value)

        lower_val = value.lower()
        if lower_val in ("true", "false", "1", "0"):
            return lower_val in ("true", "1")
        else:
            raise ValueError(
                f"Cannot parse '{value}' as bool (only 'true'/'false'/'1'/'0' allowed)"
            )

    def _decode_structure(self, value: Any, target_type: Any) -> Any:
        """Re-decode the JSON form of the value into the target shape."""
        adapter = TypeAdapter(target_type)
        return adapter.validate_json(json.dumps(value))


def create_type_mapping_config(
    config: TypeMappingConfig | dict | None = None,
) -> TypeMappingConfig:
    """
    Factory function for creating TypeMappingConfig with flexible input types.

    Args:
        config: TypeMappingConfig instance, dict to override defaults, or None for defaults

    Returns:
        TypeMappingConfig instance
    """
    if isinstance(config, TypeMappingConfig):
        return config
    elif isinstance(config, dict):
        return TypeMappingConfig.from_dict(config)
    else:
        return TypeMappingConfig()
