"""
Module: catalog.provider

Purpose:
    Abstract interface for a variant catalog: the set of pre-rendered image
    variants available for every image, their URLs, and the natural size of
    the original asset.

Key Classes:
    - VariantCatalogProvider: Abstract base class for catalogs
    - StaticCatalogProvider: Fixed candidate list with URL templates

Dependencies:
    - core.models: VariantCandidate
    - catalog.dimensions: DimensionsLookup
    - catalog.styles: Image style effect chains
    - core.templates: Placeholder validation

Used By:
    - generators.catalog: CatalogSrcsetGenerator
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, Tuple

from responsive_slots.core.models import VariantCandidate
from responsive_slots.core.templates import check_url_template

from .dimensions import DimensionsLookup
from .styles import ImageStyle, candidates_from_styles

logger = logging.getLogger(__name__)

# Placeholders available to the URL templates.
STYLE_URL_FIELDS = frozenset({"style", "image"})
ORIGINAL_URL_FIELDS = frozenset({"image"})


class VariantCatalogProvider(ABC):
    """
    Abstract interface for a variant catalog.

    Implementations may cache their listing; they must be safe for
    concurrent reads if renders run concurrently. Errors raised here
    propagate to the renderer's caller unchanged.
    """

    @abstractmethod
    def list_variants(self) -> Sequence[VariantCandidate]:
        """
        Get all available variants.

        Returns:
            Candidates ordered ascending by width
        """

    @abstractmethod
    def resolve_url(self, candidate: VariantCandidate, image: str) -> str:
        """
        Get the URL of a variant of an image.

        Args:
            candidate: Selected candidate (may be the synthetic original)
            image: Image reference as passed to the renderer

        Returns:
            URL string
        """

    @abstractmethod
    def natural_dimensions(self, image: str) -> Optional[Tuple[int, int]]:
        """
        Get (width, height) of the original image.

        Returns:
            Tuple of (width, height) in pixels, or None if unknown
        """


class StaticCatalogProvider(VariantCatalogProvider):
    """
    Catalog with a fixed list of candidates and template-built URLs.

    Templates are formatted with `style` (the candidate identifier) and
    `image` (the image reference). Other placeholders raise
    ConfigurationError at construction.

    Example:
        >>> provider = StaticCatalogProvider(
        ...     [VariantCandidate("wide_640", 640, 360)],
        ...     style_url_template="/media/styles/{style}/{image}",
        ...     original_url_template="/media/{image}",
        ... )
        >>> provider.resolve_url(provider.list_variants()[0], "cat.jpg")
        '/media/styles/wide_640/cat.jpg'
    """

    def __init__(
        self,
        candidates: Iterable[VariantCandidate],
        style_url_template: str,
        original_url_template: str = "{image}",
        dimensions: Optional[DimensionsLookup] = None,
    ) -> None:
        check_url_template("style_url_template", style_url_template, STYLE_URL_FIELDS)
        check_url_template("original_url_template", original_url_template, ORIGINAL_URL_FIELDS)
        self._candidates = tuple(sorted(candidates, key=lambda c: c.width or 0))
        self._style_url_template = style_url_template
        self._original_url_template = original_url_template
        self._dimensions = dimensions

    @classmethod
    def from_styles(
        cls,
        styles: Iterable[ImageStyle],
        style_url_template: str,
        original_url_template: str = "{image}",
        dimensions: Optional[DimensionsLookup] = None,
    ) -> StaticCatalogProvider:
        """Build a catalog from image style definitions."""
        candidates = candidates_from_styles(styles)
        logger.debug("Catalog built with %d usable styles", len(candidates))
        return cls(candidates, style_url_template, original_url_template, dimensions)

    def list_variants(self) -> Sequence[VariantCandidate]:
        return self._candidates

    def resolve_url(self, candidate: VariantCandidate, image: str) -> str:
        if candidate.is_original or candidate.identifier is None:
            return self._original_url_template.format(image=image)
        return self._style_url_template.format(style=candidate.identifier, image=image)

    def natural_dimensions(self, image: str) -> Optional[Tuple[int, int]]:
        if self._dimensions is None:
            return None
        return self._dimensions.lookup(image)
