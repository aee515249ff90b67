"""
structured-json typed retrieval.

This package converts stored values into caller-requested Python types.
"""

from structured_json.conversion.type_mapping import (
    MISSING,
    TypeConverter,
    TypeMappingConfig,
    create_type_mapping_config,
    zero_value,
)

__all__ = [
    "MISSING",
    "TypeConverter",
    "TypeMappingConfig",
    "create_type_mapping_config",
    "zero_value",
]
