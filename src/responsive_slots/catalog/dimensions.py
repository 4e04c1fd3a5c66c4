"""
Module: catalog.dimensions

Purpose:
    Natural (unscaled) dimension lookup for original image assets.
    Used to avoid offering variants wider than the original.

Key Classes:
    - DimensionsLookup: Abstract base class for dimension lookups
    - PillowDimensionsLookup: Reads image headers from disk with Pillow
    - MappingDimensionsLookup: In-memory metadata

Dependencies:
    - PIL: Image header parsing

Used By:
    - catalog.provider: StaticCatalogProvider.natural_dimensions()
    - generators.resize_service: Upscale cap
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, Tuple

from PIL import Image


class DimensionsLookup(ABC):
    """
    Abstract interface for natural image dimensions.

    Returning None means the dimensions are unknown; callers then skip
    upscale avoidance. Lookup failures other than "not found" propagate.
    """

    @abstractmethod
    def lookup(self, image: str) -> Optional[Tuple[int, int]]:
        """
        Get (width, height) of the original image.

        Args:
            image: Image reference as passed to the renderer

        Returns:
            Tuple of (width, height) in pixels, or None if unknown
        """


class PillowDimensionsLookup(DimensionsLookup):
    """
    Lookup that reads image headers below a root directory.

    Only the header is parsed; pixel data is never decoded.

    Example:
        >>> lookup = PillowDimensionsLookup(Path("media"))
        >>> lookup.lookup("photos/cat.jpg")
        (1600, 900)
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def lookup(self, image: str) -> Optional[Tuple[int, int]]:
        """Get image size, None when the file does not exist."""
        path = self._root / image
        if not path.is_file():
            return None
        # Unreadable files raise PIL.UnidentifiedImageError to the caller.
        with Image.open(path) as img:
            return img.size


class MappingDimensionsLookup(DimensionsLookup):
    """Lookup backed by an in-memory mapping of image -> (width, height)."""

    def __init__(self, dimensions: Mapping[str, Tuple[int, int]]) -> None:
        self._dimensions = dict(dimensions)

    def lookup(self, image: str) -> Optional[Tuple[int, int]]:
        return self._dimensions.get(image)
