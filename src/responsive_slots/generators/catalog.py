"""
Module: generators.catalog

Purpose:
    srcset generator backed by a variant catalog. Runs the variant selector
    against the catalog and resolves the selected variants to URLs.

Key Classes:
    - CatalogSrcsetGenerator: Catalog-backed SrcsetGenerator

Dependencies:
    - catalog.provider: VariantCatalogProvider
    - selection: select_variants, SelectorConfig

Used By:
    - markup: Source / Slot rendering
"""

from __future__ import annotations

import logging
from typing import List, Optional

from responsive_slots.catalog.provider import VariantCatalogProvider
from responsive_slots.core.models import Size, Src
from responsive_slots.selection import SelectorConfig, select_variants

from .base import SrcsetGenerator

logger = logging.getLogger(__name__)


class CatalogSrcsetGenerator(SrcsetGenerator):
    """
    Generator that picks pre-rendered variants from a catalog.

    URLs are resolved only for the variants that survive selection.
    Provider errors are not caught.

    Example:
        >>> generator = CatalogSrcsetGenerator(provider)
        >>> [str(src) for src in generator.list_for("cat.jpg", Size(320, 16 / 9))]
        ['/styles/wide_320/cat.jpg 320w', '/styles/wide_960/cat.jpg 960w']
    """

    def __init__(
        self,
        provider: VariantCatalogProvider,
        config: Optional[SelectorConfig] = None,
    ) -> None:
        self._provider = provider
        self._config = config or SelectorConfig()

    @property
    def provider(self) -> VariantCatalogProvider:
        return self._provider

    def list_for(self, image: str, size: Size) -> List[Src]:
        selected = select_variants(
            size,
            self._provider.list_variants(),
            self._provider.natural_dimensions(image),
            self._config,
        )
        logger.debug("Selected widths %s for %s at %s", [c.width for c in selected], image, size)
        return [
            Src(self._provider.resolve_url(candidate, image), width=candidate.width)
            for candidate in selected
        ]
