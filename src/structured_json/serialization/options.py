"""
Formatting options for serializing documents to JSON text.
"""

from pydantic import BaseModel, ConfigDict, Field


class SerializationOptions(BaseModel):
    """Options accepted by ``StructuredJson.to_json``.

    ``indent=None`` selects compact output with no whitespace between tokens.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: int | None = Field(default=2, ge=0)
    sort_keys: bool = False
    ensure_ascii: bool = False

    @property
    def is_pretty(self) -> bool:
        return self.indent is not None

    @classmethod
    def pretty(cls, indent: int = 2) -> "SerializationOptions":
        return cls(indent=indent)

    @classmethod
    def compact(cls) -> "SerializationOptions":
        return cls(indent=None)


def create_serialization_options(
    options: SerializationOptions | dict | None = None,
) -> SerializationOptions:
    """
    Factory function for creating SerializationOptions with flexible input types.

    Params:
        options: SerializationOptions instance, dict to override defaults, or None for defaults

    Returns:
        SerializationOptions instance

    Raises:
        pydantic.ValidationError: If a dict holds unknown or invalid options
    """
    if isinstance(options, SerializationOptions):
        return options
    elif isinstance(options, dict):
        return SerializationOptions.model_validate(options)
    else:
        return SerializationOptions()
