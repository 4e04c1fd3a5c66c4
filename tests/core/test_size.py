"""
Unit Tests for Size Model

Tests for the Size dataclass: validation, aspect ratio matching and
`sizes` attribute rendering.
"""

import pytest

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.models.size import Size


class TestSize:
    """Tests for Size dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_only_min_width_then_max_width_equals_min(self):
        """A single declared width is used for both ends of the window."""
        s = Size(320, 16 / 9)
        assert s.min_width == 320
        assert s.max_width == 320
        assert s.aspect_ratio_tolerance == 0
        assert s.media_query is None
        assert s.viewport_width is None

    def test_init_when_max_less_than_min_then_raises_error(self):
        """max_width < min_width should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="max_width must be >= min_width"):
            Size(320, 1.5, max_width=300)

    def test_init_when_non_positive_ratio_then_raises_error(self):
        """aspect_ratio <= 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="aspect_ratio must be positive"):
            Size(320, 0)

    def test_init_when_negative_tolerance_then_raises_error(self):
        """Negative tolerance should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="aspect_ratio_tolerance"):
            Size(320, 1.5, aspect_ratio_tolerance=-0.1)

    def test_init_when_non_positive_min_width_then_raises_error(self):
        """min_width <= 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="min_width must be positive"):
            Size(0, 1.5)

    def test_init_when_empty_media_query_then_raises_error(self):
        """An empty media query is ambiguous and rejected."""
        with pytest.raises(ConfigurationError, match="media_query"):
            Size(320, 1.5, media_query="  ")

    @pytest.mark.parametrize("kwargs,field", [
        ({"min_width": "320", "aspect_ratio": 1.5}, "min_width"),
        ({"min_width": 320.0, "aspect_ratio": 1.5}, "min_width"),
        ({"min_width": 320, "aspect_ratio": 1.5, "max_width": "640"}, "max_width"),
        ({"min_width": 320, "aspect_ratio": "16/9"}, "aspect_ratio"),
        ({"min_width": 320, "aspect_ratio": True}, "aspect_ratio"),
        ({"min_width": 320, "aspect_ratio": 1.5, "aspect_ratio_tolerance": None}, "aspect_ratio_tolerance"),
        ({"min_width": 320, "aspect_ratio": 1.5, "viewport_width": "100"}, "viewport_width"),
        ({"min_width": 320, "aspect_ratio": 1.5, "media_query": 600}, "media_query"),
    ])
    def test_init_when_wrong_type_then_raises_configuration_error(self, kwargs, field):
        """Wrongly typed values are configuration errors, not TypeErrors."""
        with pytest.raises(ConfigurationError, match=field):
            Size(**kwargs)

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Size(320, -1)

    def test_size_is_immutable(self):
        """Sizes are frozen."""
        s = Size(320, 1.5)
        with pytest.raises(AttributeError):
            s.min_width = 640

    # ─────────────────────────────────────────────────────────────────────────
    # Aspect Ratio Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_matches_aspect_ratio_when_zero_tolerance_then_reflexive(self):
        """A size always matches its own ratio."""
        s = Size(320, 16 / 9)
        assert s.matches_aspect_ratio(16 / 9) is True
        assert s.matches_aspect_ratio(1.78) is False

    @pytest.mark.parametrize("offset", [0.0, 0.05, 0.1])
    def test_matches_aspect_ratio_when_within_band_then_symmetric(self, offset):
        """Ratios inside the band match on both sides."""
        s = Size(320, 1.5, aspect_ratio_tolerance=0.1)
        assert s.matches_aspect_ratio(1.5 + offset) is True
        assert s.matches_aspect_ratio(1.5 - offset) is True

    def test_matches_aspect_ratio_when_outside_band_then_false(self):
        """Ratios outside the band do not match on either side."""
        s = Size(320, 1.5, aspect_ratio_tolerance=0.1)
        assert s.matches_aspect_ratio(1.65) is False
        assert s.matches_aspect_ratio(1.35) is False

    def test_density_headroom_width_when_default_then_double_max(self):
        """Headroom scales the max width."""
        s = Size(320, 1.5, max_width=400)
        assert s.density_headroom_width(2) == 800

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_render_width_only_when_no_viewport_width_then_min_width_px(self):
        """Without vw, the min width is rendered in px."""
        assert Size(320, 1.5, max_width=640).render_width_only() == "320px"

    def test_render_width_only_when_viewport_width_then_vw(self):
        """Whole vw values render without a decimal part."""
        assert Size(320, 1.5, viewport_width=100.0).render_width_only() == "100vw"
        assert Size(320, 1.5, viewport_width=33.5).render_width_only() == "33.5vw"

    def test_render_when_media_query_then_prefixed(self):
        """The condition precedes the width."""
        s = Size(320, 1.5, media_query="(max-width: 600px)", viewport_width=100)
        assert s.render() == "(max-width: 600px) 100vw"
        assert str(s) == "(max-width: 600px) 100vw"

    def test_render_when_no_media_query_then_width_only(self):
        """Without a condition only the width is rendered."""
        assert Size(320, 1.5).render() == "320px"
