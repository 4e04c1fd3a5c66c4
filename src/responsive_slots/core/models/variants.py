"""
Module: variants

Purpose:
    Value types describing available image variants and the rendered
    `srcset` entries built from them.

Key Classes:
    - VariantCandidate: One pre-rendered variant offered by a catalog
    - Src: One `srcset` entry (URL plus width or density descriptor)

Dependencies:
    - dataclasses (std)

Used By:
    - catalog: Providers produce VariantCandidates
    - selection.selector: Filters and orders VariantCandidates
    - generators / markup.source: Build and render Src entries

See:
    https://developer.mozilla.org/en-US/docs/Web/HTML/Element/img#attr-srcset
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class VariantCandidate:
    """
    An available pre-rendered image variant (immutable).

    Attributes:
        identifier: Catalog name of the variant (None for the original asset)
        width: Final width in pixels, None if unknown
        height: Final height in pixels, None if unknown
        firm: True if width/height are guaranteed. Otherwise they are only
            upper bounds (resize without a guaranteed crop).
        is_original: True for the synthetic entry standing for the
            unscaled original asset

    Example:
        >>> VariantCandidate("thumb_16x9", 320, 180, firm=True).aspect_ratio
        1.7777777777777777
    """

    identifier: Optional[str]
    width: Optional[int]
    height: Optional[int]
    firm: bool = True
    is_original: bool = False

    @classmethod
    def original(cls, width: int, height: int) -> VariantCandidate:
        """Synthetic candidate for the original asset at its natural size."""
        return cls(identifier=None, width=width, height=height, firm=False, is_original=True)

    @property
    def aspect_ratio(self) -> Optional[float]:
        """Width / height, or None when either dimension is unknown."""
        if not self.width or not self.height:
            return None
        return self.width / self.height


@dataclass(frozen=True)
class Src:
    """
    A single `srcset` entry.

    Attributes:
        url: URL of the image
        width: Width descriptor in pixels (rendered as "Nw")
        multiplier: Pixel density descriptor, used only when width is None
            (rendered as "Mx")

    Example:
        >>> Src("/a.jpg", width=320).render()
        '/a.jpg 320w'
        >>> Src("/a.jpg", multiplier=2).render()
        '/a.jpg 2x'
    """

    url: str
    width: Optional[int] = None
    multiplier: Optional[float] = None

    @property
    def sort_key(self) -> float:
        """Width, falling back to the density multiplier, falling back to 0."""
        if self.width:
            return self.width
        return self.multiplier or 0

    def render(self) -> str:
        """Render as a `srcset` candidate string."""
        if self.width is not None:
            return f"{self.url} {self.width}w"
        if self.multiplier is not None:
            multiplier = self.multiplier
            if isinstance(multiplier, float) and multiplier.is_integer():
                multiplier = int(multiplier)
            return f"{self.url} {multiplier}x"
        return self.url

    def __str__(self) -> str:
        return self.render()
