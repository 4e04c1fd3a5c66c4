"""
Unit Tests for Schema Validation

Tests for validate_definitions() against slots.schema.json.
"""

import pytest

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.schemas.validator import ValidationError, validate_definitions


class TestValidateDefinitions:
    """Tests for validate_definitions function."""

    @pytest.fixture
    def valid_definitions(self) -> dict:
        """Create valid definitions for testing."""
        return {
            "slots": {
                "hero": [
                    {
                        "min_width": 320,
                        "max_width": 600,
                        "aspect_ratio": "1:1",
                        "media_query": "(max-width: 600px)",
                        "viewport_width": 100,
                    },
                    {"min_width": 960, "aspect_ratio": "16/9", "aspect_ratio_tolerance": 0.02},
                ],
                "grid": [{"min_width": 300, "aspect_ratio": 1.5}],
            },
            "groups": {
                "listing": [
                    {"nth": [1], "slot": "hero"},
                    {"nth": "all", "slot": "grid"},
                ],
            },
        }

    def test_validate_when_valid_then_passes(self, valid_definitions):
        """Valid definitions should pass."""
        validate_definitions(valid_definitions)

    def test_validate_when_slots_missing_then_raises_error(self):
        """Missing slots key should raise ValidationError."""
        with pytest.raises(ValidationError, match="slots"):
            validate_definitions({"groups": {}})

    def test_validate_when_min_width_not_integer_then_reports_path(self, valid_definitions):
        """The error path points at the bad value."""
        valid_definitions["slots"]["grid"][0]["min_width"] = "300"

        with pytest.raises(ValidationError) as excinfo:
            validate_definitions(valid_definitions)

        assert excinfo.value.path == "slots.grid[0].min_width"
        assert excinfo.value.errors

    def test_validate_when_unknown_size_key_then_raises_error(self, valid_definitions):
        """Unknown keys are rejected."""
        valid_definitions["slots"]["grid"][0]["height"] = 200

        with pytest.raises(ValidationError):
            validate_definitions(valid_definitions)

    def test_validate_when_bad_ratio_string_then_raises_error(self, valid_definitions):
        """Ratio strings must look like W/H or W:H."""
        valid_definitions["slots"]["grid"][0]["aspect_ratio"] = "wide"

        with pytest.raises(ValidationError):
            validate_definitions(valid_definitions)

    def test_validate_when_nth_zero_then_raises_error(self, valid_definitions):
        """Indexes are 1-based."""
        valid_definitions["groups"]["listing"][0]["nth"] = 0

        with pytest.raises(ValidationError):
            validate_definitions(valid_definitions)

    def test_validation_error_is_configuration_error(self):
        """Callers can catch every definition problem as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            validate_definitions([])
