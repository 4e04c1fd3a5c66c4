"""
Module: generators.resize_service

Purpose:
    srcset generator for an on-the-fly resizing service: instead of picking
    from pre-rendered variants, it asks the service for exactly the widths
    each density needs.

Key Classes:
    - ResizeServiceConfig: URL template and densities
    - ResizeServiceSrcsetGenerator: Service-backed SrcsetGenerator

Dependencies:
    - catalog.dimensions: DimensionsLookup (upscale cap)
    - core.templates: Placeholder validation

Used By:
    - markup: Source / Slot rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from responsive_slots.catalog.dimensions import DimensionsLookup
from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.models import Size, Src
from responsive_slots.core.templates import check_url_template

from .base import SrcsetGenerator

# Placeholders available to url_template.
URL_FIELDS = frozenset({"image", "width", "height"})


@dataclass(frozen=True)
class ResizeServiceConfig:
    """
    Configuration for a resizing service (immutable).

    Attributes:
        url_template: Formatted with `image`, `width` and `height`
        densities: Pixel densities to cover, e.g. (1.0, 2.0)

    Example:
        >>> config = ResizeServiceConfig("https://img.example.com/{image}?w={width}&h={height}")
        >>> config.densities
        (1.0, 2.0)
    """

    url_template: str
    densities: Tuple[float, ...] = (1.0, 2.0)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        check_url_template(
            "url_template", self.url_template, URL_FIELDS, required=("width",)
        )
        if not self.densities:
            raise ConfigurationError("densities must not be empty")
        if any(d <= 0 for d in self.densities):
            raise ConfigurationError(f"densities must be positive: {self.densities}")


class ResizeServiceSrcsetGenerator(SrcsetGenerator):
    """
    Generator that builds resizing-service URLs per density.

    Widths are max_width x density, capped at the original's width when
    dimensions are known so the service is never asked to upscale.
    """

    def __init__(
        self,
        config: ResizeServiceConfig,
        dimensions: Optional[DimensionsLookup] = None,
    ) -> None:
        self._config = config
        self._dimensions = dimensions

    def _widths_for(self, image: str, size: Size) -> List[int]:
        natural = self._dimensions.lookup(image) if self._dimensions else None
        widths = set()
        for density in self._config.densities:
            width = int(round(size.max_width * density))
            if natural is not None:
                width = min(width, natural[0])
            widths.add(width)
        return sorted(widths)

    def list_for(self, image: str, size: Size) -> List[Src]:
        srcs = []
        for width in self._widths_for(image, size):
            height = int(round(width / size.aspect_ratio))
            url = self._config.url_template.format(image=image, width=width, height=height)
            srcs.append(Src(url, width=width))
        return srcs
