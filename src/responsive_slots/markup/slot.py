"""
Module: markup.slot

Purpose:
    A layout position whose image adapts to viewport conditions. Groups its
    sizes into Sources by aspect ratio and renders a bare `<img>` or a
    `<picture>`.

Key Classes:
    - Slot: Ordered sizes plus the Sources derived from them

Dependencies:
    - markup.source: Source
    - generators.base: SrcsetGenerator

Used By:
    - markup.slot_group: SlotGroup
    - loading.parser: Declarative definitions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.models import Size
from responsive_slots.generators.base import SrcsetGenerator

from .source import Source

logger = logging.getLogger(__name__)


SIZE_RECORD_KEYS = frozenset({
    "min_width",
    "max_width",
    "aspect_ratio",
    "media_query",
    "viewport_width",
    "aspect_ratio_tolerance",
})


def group_sizes_into_sources(sizes: Iterable[Size]) -> Tuple[Source, ...]:
    """
    Partition sizes into Sources wherever the aspect ratio changes.

    Images in one `srcset` should be the same picture at different scales.
    When the picture has to change more than scale (a different crop), it
    needs its own `<source>`. Ratios are compared exactly; tolerance only
    applies when matching variants. The last Source renders as `<img>`.

    Args:
        sizes: Sizes in evaluation order

    Returns:
        Tuple of Sources in the same order
    """
    groups: List[List[Size]] = []
    for size in sizes:
        if groups and groups[-1][-1].aspect_ratio == size.aspect_ratio:
            groups[-1].append(size)
        else:
            groups.append([size])

    if not groups:
        raise ConfigurationError("Slot needs at least one size")

    last_index = len(groups) - 1
    return tuple(
        Source(tuple(group), as_image=(index == last_index))
        for index, group in enumerate(groups)
    )


@dataclass(frozen=True)
class Slot:
    """
    Image position defined by sizes in browser evaluation order (immutable).

    `<source>` elements are evaluated in document order, stopping at the
    first matching `media`, and `sizes` entries left to right. The sizes
    given here must already be in that order; they are never reordered.

    Attributes:
        sizes: Sizes in evaluation order
        sources: Sources derived from sizes at construction

    Example:
        >>> slot = Slot((Size(320, 1.0, media_query="(max-width: 600px)"), Size(640, 16 / 9)))
        >>> len(slot.sources)
        2
        >>> slot.is_picture
        True
    """

    sizes: Tuple[Size, ...]
    sources: Tuple[Source, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Group sizes into sources once; rendering reuses them."""
        object.__setattr__(self, "sizes", tuple(self.sizes))
        object.__setattr__(self, "sources", group_sizes_into_sources(self.sizes))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> Slot:
        """
        Build a slot from size records.

        Args:
            records: Mappings with keys from SIZE_RECORD_KEYS; min_width and
                aspect_ratio are required, aspect_ratio must be numeric

        Raises:
            ConfigurationError: On unknown or missing keys, wrong value
                types or invalid values
        """
        sizes = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise ConfigurationError(f"Size {index}: expected a mapping, got {record!r}")
            unknown = set(record) - SIZE_RECORD_KEYS
            if unknown:
                raise ConfigurationError(f"Size {index}: unknown keys {sorted(unknown)}")
            missing = {"min_width", "aspect_ratio"} - set(record)
            if missing:
                raise ConfigurationError(f"Size {index}: missing keys {sorted(missing)}")
            try:
                sizes.append(Size(**record))
            except ConfigurationError as e:
                raise ConfigurationError(f"Size {index}: {e}") from e
            except TypeError as e:
                raise ConfigurationError(f"Size {index}: invalid record: {e}") from e
        return cls(tuple(sizes))

    @property
    def is_picture(self) -> bool:
        """True if rendering needs a `<picture>` wrapper."""
        return len(self.sources) > 1

    def render(
        self,
        generator: SrcsetGenerator,
        image: str,
        alt: Optional[str] = None,
    ) -> str:
        """
        Generate the HTML for an image in this slot.

        A bare `<img>` is used whenever a single aspect ratio covers every
        size, so `<picture>` polyfills are only needed when unavoidable.

        Args:
            generator: Produces `srcset` entries per size
            image: Image reference passed through to the generator
            alt: Alt text for the `<img>`

        Returns:
            `<img>` markup, or `<picture>` wrapping every source
        """
        if not self.is_picture:
            return self.sources[0].render(generator, image, alt)

        logger.debug("Rendering %s as <picture> with %d sources", image, len(self.sources))
        body = "".join(
            f"\n  {source.render(generator, image, alt)}" for source in self.sources
        )
        return f"<picture>{body}\n</picture>"
