"""
Unit tests for TypeConverter conversion logic.

Tests the ordered conversion chain and the default-on-failure contract.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from structured_json.conversion import (
    TypeConverter,
    TypeMappingConfig,
    create_type_mapping_config,
    zero_value,
)


class Address(BaseModel):
    city: str
    country: str


class TestTypeConverter:
    """Test TypeConverter conversion functionality."""

    def setup_method(self):
        """Create TypeConverter instances for testing."""
        self.config = TypeMappingConfig()
        self.converter = TypeConverter(self.config)

    def test_direct_match_no_conversion(self):
        """Test values already of the target type are returned unchanged."""
        assert self.converter.convert_value(42, int) == 42
        assert self.converter.convert_value("hello", str) == "hello"
        assert self.converter.convert_value(True, bool) is True
        data = {"a": 1}
        assert self.converter.convert_value(data, dict) is data

    def test_string_to_number(self):
        """Test numeric parsing of stored text."""
        assert self.converter.convert_value("123", int) == 123
        assert self.converter.convert_value("123.45", float) == 123.45
        assert self.converter.convert_value("1.10", Decimal) == Decimal("1.10")

    def test_invalid_numeric_text_returns_zero(self):
        """Test unparsable text yields the numeric zero value."""
        assert self.converter.convert_value("not a number", int) == 0
        assert self.converter.convert_value("not a number", float) == 0.0
        assert self.converter.convert_value("12.5", int) == 0
        assert self.converter.convert_value("abc", Decimal) == Decimal(0)

    def test_number_to_string(self):
        """Test stringification of stored numbers."""
        assert self.converter.convert_value(123, str) == "123"
        assert self.converter.convert_value(123.45, str) == "123.45"

    def test_bool_is_not_stringified_as_number(self):
        """Test bool never takes the number-to-text path."""
        assert self.converter.convert_value(True, str) == ""

    def test_strict_bool_parsing(self):
        """Test that bool parsing only accepts specific values."""
        valid_cases = [
            ("true", True),
            ("True", True),
            ("FALSE", False),
            ("1", True),
            ("0", False),
        ]

        for string_val, expected in valid_cases:
            assert self.converter.convert_value(string_val, bool) == expected

        for invalid_val in ["yes", "on", " true ", "2", ""]:
            assert self.converter.convert_value(invalid_val, bool) is False

    def test_lenient_bool_parsing(self):
        """Test non-strict bool parsing uses truthiness."""
        converter = TypeConverter(TypeMappingConfig(strict_bool_parsing=False))

        assert converter.convert_value("yes", bool) is True
        assert converter.convert_value("", bool) is False

    def test_string_parsing_disabled(self):
        """Test behavior when string parsing is disabled."""
        converter = TypeConverter(TypeMappingConfig(allow_string_parsing=False))

        assert converter.convert_value("42", int) == 0
        assert converter.convert_value("true", bool) is False

    def test_int_to_float(self):
        """Test integers widen to float through structural decoding."""
        result = self.converter.convert_value(3, float)

        assert result == 3.0
        assert isinstance(result, float)

    def test_structural_collections(self):
        """Test generic collection targets."""
        assert self.converter.convert_value([1, 2, 3], list[int]) == [1, 2, 3]
        assert self.converter.convert_value(["1", "2"], list[int]) == [1, 2]
        assert self.converter.convert_value({"a": 1}, dict[str, float]) == {"a": 1.0}

    def test_structural_model(self):
        """Test pydantic model targets."""
        result = self.converter.convert_value(
            {"city": "Ankara", "country": "Turkey"}, Address
        )

        assert result == Address(city="Ankara", country="Turkey")

    def test_structural_model_failure_returns_none(self):
        """Test a failing model conversion yields None."""
        assert self.converter.convert_value({"city": "Ankara"}, Address) is None

    def test_datetime_from_text(self):
        """Test ISO-8601 text decodes to datetime."""
        result = self.converter.convert_value("2024-01-31T12:30:00", datetime)
        assert result == datetime(2024, 1, 31, 12, 30, 0)

    def test_optional_target(self):
        """Test union targets go through structural decoding."""
        assert self.converter.convert_value(5, int | None) == 5

    def test_none_returns_default(self):
        """Test absent or null values yield the default."""
        assert self.converter.convert_value(None, int) == 0
        assert self.converter.convert_value(None, str) == ""
        assert self.converter.convert_value(None, list[str]) == []
        assert self.converter.convert_value(None, Address) is None

    def test_explicit_default(self):
        """Test an explicit default replaces the zero value."""
        assert self.converter.convert_value("x", int, default=-1) == -1
        assert self.converter.convert_value(None, str, default=None) is None

    def test_structural_decode_disabled(self):
        """Test disabling the structural step."""
        converter = TypeConverter(TypeMappingConfig(allow_structural_decode=False))

        assert converter.convert_value([1, 2], list[int]) == []
        assert converter.convert_value("7", int) == 7

    def test_unsupported_target_returns_default(self):
        """Test targets pydantic cannot build a schema for."""

        class Opaque:
            pass

        assert self.converter.convert_value({"a": 1}, Opaque) is None


class TestZeroValue:
    """Test default values per target type."""

    def test_builtin_zero_values(self):
        """Test builtin scalars and collections."""
        assert zero_value(int) == 0
        assert zero_value(float) == 0.0
        assert zero_value(bool) is False
        assert zero_value(str) == ""
        assert zero_value(dict[str, int]) == {}

    def test_other_types(self):
        """Test everything else defaults to None."""
        assert zero_value(datetime) is None
        assert zero_value(Address) is None
        assert zero_value(int | None) is None


class TestTypeMappingConfig:
    """Test configuration factory."""

    def test_defaults(self):
        """Test default configuration."""
        config = TypeMappingConfig()

        assert config.allow_string_parsing
        assert config.strict_bool_parsing
        assert config.allow_structural_decode

    def test_create_from_dict(self):
        """Test dict overrides."""
        config = create_type_mapping_config({"strict_bool_parsing": False})

        assert not config.strict_bool_parsing
        assert config.allow_string_parsing

    def test_create_passthrough_and_none(self):
        """Test instance passthrough and None defaults."""
        config = TypeMappingConfig(allow_string_parsing=False)

        assert create_type_mapping_config(config) is config
        assert create_type_mapping_config(None) == TypeMappingConfig()
