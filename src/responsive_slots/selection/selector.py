"""
Module: selection.selector

Purpose:
    Variant selection algorithm. Picks which pre-rendered variants of a
    catalog should appear in the `srcset` for one Size.

Key Functions:
    - select_variants(): Main entry point for selection

Key Classes:
    - WidthBuckets: Matching candidates split around a size's width window

Algorithm:
    1. Keep firm candidates whose aspect ratio matches the size
    2. Bucket by width: less / within / greater (max_width x headroom)
    3. Cover the top of the range with the smallest "greater" candidate
    4. Fall back to the largest "less" candidate when nothing is within
    5. De-duplicate by width
    6. Swap in the original asset rather than an upscaled variant

Dependencies:
    - core.models: Size, VariantCandidate
    - selection.config: SelectorConfig

Used By:
    - generators.catalog: Catalog-backed srcset generator
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from responsive_slots.core.models import Size, VariantCandidate

from .config import SelectorConfig

logger = logging.getLogger(__name__)


@dataclass
class WidthBuckets:
    """
    Candidates grouped by width relative to a size's window.

    Attributes:
        less: Narrower than min_width
        within: Between min_width and max_width x headroom (inclusive)
        greater: Wider than max_width x headroom
    """

    less: List[VariantCandidate] = field(default_factory=list)
    within: List[VariantCandidate] = field(default_factory=list)
    greater: List[VariantCandidate] = field(default_factory=list)


def _matching_candidates(
    size: Size,
    candidates: Iterable[VariantCandidate],
) -> List[VariantCandidate]:
    """Firm candidates with known dimensions whose ratio fits the size."""
    # Non-firm dimensions are upper bounds, so their real ratio is unknown.
    return [
        c for c in candidates
        if c.firm and c.aspect_ratio is not None and size.matches_aspect_ratio(c.aspect_ratio)
    ]


def bucket_by_width(
    size: Size,
    candidates: Iterable[VariantCandidate],
    headroom: float,
) -> WidthBuckets:
    """
    Split candidates around the size's width window.

    Args:
        size: Size whose window is used
        candidates: Candidates ordered ascending by width
        headroom: Density multiplier applied to max_width

    Returns:
        WidthBuckets preserving input order within each bucket
    """
    upper = size.density_headroom_width(headroom)
    buckets = WidthBuckets()
    for candidate in candidates:
        if candidate.width < size.min_width:
            buckets.less.append(candidate)
        elif candidate.width > upper:
            buckets.greater.append(candidate)
        else:
            buckets.within.append(candidate)
    return buckets


def _unique_by_width(candidates: Iterable[VariantCandidate]) -> List[VariantCandidate]:
    """Keep the first candidate of each width, ascending by width."""
    unique: dict[int, VariantCandidate] = {}
    for candidate in sorted(candidates, key=lambda c: c.width):
        if candidate.width not in unique:
            unique[candidate.width] = candidate
    return list(unique.values())


def _avoid_upscaling(
    size: Size,
    selected: List[VariantCandidate],
    natural: Tuple[int, int],
    headroom: float,
) -> List[VariantCandidate]:
    """
    Replace variants wider than the original asset.

    Variants wider than the original are upscaled and add no detail. Offer at
    most one of them, or the original itself when its ratio fits and it is
    either a different width from that variant or within the size's window.
    """
    natural_width, natural_height = natural
    smaller = [c for c in selected if c.width < natural_width]
    larger = [c for c in selected if c.width >= natural_width]

    original_matches = (
        natural_height > 0 and size.matches_aspect_ratio(natural_width / natural_height)
    )
    differs_from_next = bool(larger) and larger[0].width != natural_width
    within_window = natural_width <= size.density_headroom_width(headroom)

    if original_matches and (differs_from_next or within_window):
        logger.debug(
            "Using original asset (%dx%d) in place of %d larger variant(s)",
            natural_width, natural_height, len(larger),
        )
        return smaller + [VariantCandidate.original(natural_width, natural_height)]
    if larger:
        return smaller + [larger[0]]
    return smaller


def select_variants(
    size: Size,
    candidates: Sequence[VariantCandidate],
    natural_dimensions: Optional[Tuple[int, int]] = None,
    config: Optional[SelectorConfig] = None,
) -> List[VariantCandidate]:
    """
    Select the variants to offer in a `srcset` for one size.

    Main entry point for the selection algorithm.

    Args:
        size: Size being served
        candidates: Catalog variants, ordered ascending by width
        natural_dimensions: (width, height) of the original asset, if known
        config: Selection tunables (defaults to SelectorConfig())

    Returns:
        Candidates ascending by width. Empty when nothing usable exists.

    Invariants:
        - No two results share a width or an identifier
        - Results from the catalog are firm and match the size's ratio
        - At most one result is wider than max_width x headroom

    Example:
        >>> size = Size(320, 16 / 9)
        >>> catalog = [VariantCandidate("s", 160, 90), VariantCandidate("m", 320, 180),
        ...            VariantCandidate("l", 960, 540)]
        >>> [c.width for c in select_variants(size, catalog)]
        [320, 960]
    """
    config = config or SelectorConfig()
    headroom = config.density_headroom

    matching = sorted(_matching_candidates(size, candidates), key=lambda c: c.width)
    buckets = bucket_by_width(size, matching, headroom)
    logger.debug(
        "Size %s: %d matching, buckets less=%d within=%d greater=%d",
        size, len(matching), len(buckets.less), len(buckets.within), len(buckets.greater),
    )

    selected = list(buckets.within)
    if buckets.greater:
        # Make sure the end of the range is covered.
        selected.append(buckets.greater[0])

    if not selected and buckets.less:
        # Better to have something too small than nothing.
        selected = [buckets.less[-1]]

    selected = _unique_by_width(selected)

    if natural_dimensions is not None:
        selected = _avoid_upscaling(size, selected, natural_dimensions, headroom)

    if not selected:
        logger.warning("No usable variant for size %s", size)
    return selected
