"""
Module: size

Purpose:
    Provides the Size dataclass - one condition of a `sizes` attribute along
    with the image dimensions expected when that condition is met.

Key Functions:
    - Size.matches_aspect_ratio(ratio): Tolerance-band aspect ratio test
    - Size.render_width_only(): Width portion of a `sizes` entry
    - Size.render(): Full `sizes` entry with condition

Dependencies:
    - dataclasses (std)
    - core.errors: ConfigurationError

Used By:
    - selection.selector: Variant selection per size
    - generators: srcset generation per size
    - markup.source / markup.slot: `sizes` attribute and grouping

See:
    https://developer.mozilla.org/en-US/docs/Web/HTML/Element/img#attr-sizes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..errors import ConfigurationError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Union[int, float]) -> str:
    """Render 100.0 as "100" and 33.5 as "33.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Size:
    """
    A viewport condition plus the rendered width window and aspect ratio.

    Widths are in pixels at a 1:1 density. When only min_width is given,
    max_width takes the same value.

    Attributes:
        min_width: Narrowest width the image takes under this condition
        aspect_ratio: Target width / height ratio (pass fractions like 16/9)
        max_width: Widest width the image takes (defaults to min_width)
        media_query: Condition including parentheses, None = always applies
        viewport_width: Width in `vw` units for the `sizes` value, None = px
        aspect_ratio_tolerance: Added to and subtracted from aspect_ratio
            to get the acceptable ratio band

    Invariants:
        - min_width > 0
        - max_width >= min_width
        - aspect_ratio > 0
        - aspect_ratio_tolerance >= 0

    Example:
        >>> size = Size(320, 16 / 9, media_query="(max-width: 600px)", viewport_width=100)
        >>> size.render()
        '(max-width: 600px) 100vw'
        >>> size.render_width_only()
        '100vw'
    """

    min_width: int
    aspect_ratio: float
    max_width: Optional[int] = None
    media_query: Optional[str] = None
    viewport_width: Optional[float] = None
    aspect_ratio_tolerance: float = 0.0

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.max_width is None:
            object.__setattr__(self, "max_width", self.min_width)
        for name in ("min_width", "max_width"):
            if not _is_int(getattr(self, name)):
                raise ConfigurationError(f"{name} must be an integer: {getattr(self, name)!r}")
        for name in ("aspect_ratio", "aspect_ratio_tolerance"):
            if not _is_number(getattr(self, name)):
                raise ConfigurationError(f"{name} must be a number: {getattr(self, name)!r}")
        if self.viewport_width is not None and not _is_number(self.viewport_width):
            raise ConfigurationError(f"viewport_width must be a number: {self.viewport_width!r}")
        if self.media_query is not None and not isinstance(self.media_query, str):
            raise ConfigurationError(f"media_query must be a string: {self.media_query!r}")
        if self.min_width <= 0:
            raise ConfigurationError(f"min_width must be positive: {self.min_width}")
        if self.max_width < self.min_width:
            raise ConfigurationError(
                f"max_width must be >= min_width: {self.max_width} < {self.min_width}"
            )
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive: {self.aspect_ratio}")
        if self.aspect_ratio_tolerance < 0:
            raise ConfigurationError(
                f"aspect_ratio_tolerance must be non-negative: {self.aspect_ratio_tolerance}"
            )
        if self.viewport_width is not None and self.viewport_width <= 0:
            raise ConfigurationError(f"viewport_width must be positive: {self.viewport_width}")
        if self.media_query is not None and not self.media_query.strip():
            raise ConfigurationError("media_query must not be empty; use None instead")

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def aspect_ratio_range(self) -> tuple[float, float]:
        """(min, max) aspect ratios accepted by this size."""
        return (
            self.aspect_ratio - self.aspect_ratio_tolerance,
            self.aspect_ratio + self.aspect_ratio_tolerance,
        )

    def matches_aspect_ratio(self, aspect_ratio: float) -> bool:
        """
        Check whether a ratio is close enough to this size's aspect ratio.

        Args:
            aspect_ratio: Width / height ratio to test

        Returns:
            True if within [aspect_ratio - tolerance, aspect_ratio + tolerance]
        """
        low, high = self.aspect_ratio_range
        return low <= aspect_ratio <= high

    def density_headroom_width(self, headroom: float) -> float:
        """Widest useful variant width when serving displays up to `headroom`x."""
        return self.max_width * headroom

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render_width_only(self) -> str:
        """Width the image is expected to take, in `vw` or `px` units."""
        if self.viewport_width is not None:
            return f"{_format_number(self.viewport_width)}vw"
        return f"{self.min_width}px"

    def render(self) -> str:
        """One comma-separated entry of a `sizes` attribute."""
        if self.media_query is not None:
            return f"{self.media_query} {self.render_width_only()}"
        return self.render_width_only()

    def __str__(self) -> str:
        return self.render()
