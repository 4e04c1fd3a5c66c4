"""
Module: generators.base

Purpose:
    Abstract interface for producing `srcset` entries for an image at one
    Size. Backends (variant catalog, resizing service, ...) are swapped
    without touching Size, Source or Slot.

Key Classes:
    - SrcsetGenerator: Abstract base class for srcset generation

Used By:
    - markup.source: Source.render()
    - markup.slot: Slot.render()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from responsive_slots.core.models import Size, Src


class SrcsetGenerator(ABC):
    """Generates `srcset` entries for an image at a given size."""

    @abstractmethod
    def list_for(self, image: str, size: Size) -> List[Src]:
        """
        Generate `srcset` entries for an image.

        Args:
            image: Image reference (path, URI or URL understood by the backend)
            size: Size the entries should cover

        Returns:
            List of Src entries, possibly empty
        """
