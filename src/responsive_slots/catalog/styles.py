"""
Module: catalog.styles

Purpose:
    Image style definitions (named chains of resize/crop effects) and the
    calculation of the dimensions a style produces. Turns a CMS-style list
    of image styles into VariantCandidates.

Key Functions:
    - final_dimensions(): Dimensions after applying a style's effects
    - candidates_from_styles(): Usable styles as VariantCandidates

Key Classes:
    - StyleEffect: One effect of a style
    - ImageStyle: Named chain of effects
    - StyleDimensions: Resulting width/height and whether they are firm

Dependencies:
    - core.models: VariantCandidate

Used By:
    - catalog.provider: StaticCatalogProvider.from_styles()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from responsive_slots.core.models import VariantCandidate

logger = logging.getLogger(__name__)


SCALE_AND_CROP = "scale_and_crop"
RESIZE = "resize"
CROP = "crop"
SCALE = "scale"

# Any other effect could change the output in ways we can't predict.
SUPPORTED_EFFECTS = frozenset({SCALE_AND_CROP, RESIZE, CROP, SCALE})


@dataclass(frozen=True)
class StyleEffect:
    """
    One effect in an image style.

    Attributes:
        name: Effect name (see SUPPORTED_EFFECTS)
        width: Target width, None or 0 when not constrained
        height: Target height, None or 0 when not constrained
        upscale: Whether `scale` may enlarge the image
    """

    name: str
    width: Optional[int] = None
    height: Optional[int] = None
    upscale: bool = False


@dataclass(frozen=True)
class ImageStyle:
    """A named chain of effects producing one variant."""

    name: str
    effects: Tuple[StyleEffect, ...] = ()

    @property
    def is_supported(self) -> bool:
        """True if every effect has predictable output dimensions."""
        return all(effect.name in SUPPORTED_EFFECTS for effect in self.effects)


@dataclass(frozen=True)
class StyleDimensions:
    """
    Dimensions an image will have after a style is applied.

    Attributes:
        width: Final width, None if unknown
        height: Final height, None if unknown
        firm: True if guaranteed, False if only maximums
    """

    width: Optional[int] = None
    height: Optional[int] = None
    firm: bool = False


def _scale_within(
    width: int,
    height: int,
    target_width: Optional[int],
    target_height: Optional[int],
    upscale: bool,
) -> Tuple[int, int]:
    """Scale (width, height) to fit the target box, keeping the ratio."""
    if not target_width and not target_height:
        return width, height

    aspect = height / width
    if target_width and (not target_height or aspect < target_height / target_width):
        new_width, new_height = target_width, int(round(target_width * aspect))
    else:
        new_width, new_height = int(round(target_height / aspect)), target_height

    if not upscale and (new_width >= width or new_height >= height):
        return width, height
    return new_width, new_height


def final_dimensions(style: ImageStyle) -> StyleDimensions:
    """
    Calculate the dimensions a style produces.

    Every supported effect except `scale` sets an exact width and height.
    `scale` keeps the ratio of whatever it receives, so on its own it only
    gives upper bounds; after a firm effect the result stays firm.

    Args:
        style: Style to evaluate

    Returns:
        StyleDimensions for the style's output

    Example:
        >>> final_dimensions(ImageStyle("wide", (StyleEffect("scale_and_crop", 640, 360),)))
        StyleDimensions(width=640, height=360, firm=True)
    """
    dims = StyleDimensions()
    for effect in style.effects:
        width = effect.width or None
        height = effect.height or None

        if effect.name != SCALE:
            dims = StyleDimensions(width, height, firm=True)
        elif dims.width and dims.height:
            new_width, new_height = _scale_within(
                dims.width, dims.height, width, height, effect.upscale
            )
            dims = StyleDimensions(new_width, new_height, dims.firm)
        else:
            dims = StyleDimensions(width or dims.width, height or dims.height, firm=False)
    return dims


def candidates_from_styles(styles: Iterable[ImageStyle]) -> List[VariantCandidate]:
    """
    Convert usable styles into candidates ordered ascending by width.

    Styles using any effect outside SUPPORTED_EFFECTS are dropped.

    Args:
        styles: Style definitions

    Returns:
        List of VariantCandidates, one per supported style
    """
    candidates: List[VariantCandidate] = []
    for style in styles:
        if not style.is_supported:
            logger.debug("Skipping style %s: unsupported effects", style.name)
            continue
        dims = final_dimensions(style)
        candidates.append(VariantCandidate(style.name, dims.width, dims.height, dims.firm))
    candidates.sort(key=lambda c: c.width or 0)
    return candidates
