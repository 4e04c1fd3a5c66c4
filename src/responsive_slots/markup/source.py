"""
Module: markup.source

Purpose:
    One negotiable markup unit: a `<source>` inside a `<picture>`, or the
    final `<img>`, covering sizes that share one aspect ratio.

Key Classes:
    - Source: Sizes of one aspect ratio rendered as one element

Dependencies:
    - html (std): alt text escaping
    - core.models: Size, Src
    - generators.base: SrcsetGenerator

Used By:
    - markup.slot: Slot groups sizes into Sources

See:
    https://developer.mozilla.org/en-US/docs/Web/HTML/Element/source
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Optional, Tuple

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.models import Size, Src
from responsive_slots.generators.base import SrcsetGenerator


def _descriptor(src: Src) -> tuple:
    """Descriptor as a browser reads it; a bare URL means 1x."""
    if src.width is not None:
        return ("w", src.width)
    return ("x", src.multiplier if src.multiplier is not None else 1)


@dataclass(frozen=True)
class Source:
    """
    A `<source>` (or the final `<img>`) of a picture element (immutable).

    Browsers evaluate `sizes` conditions left to right and stop at the first
    match, so sizes are kept in declared order. Only the last size may lack
    a media query.

    Attributes:
        sizes: Sizes in evaluation order, all with the same aspect ratio
        as_image: Render as `<img>` (last element of a picture) instead of
            a conditional `<source>`

    Invariants:
        - sizes is non-empty
        - every size has the same aspect_ratio
        - only the last size may have media_query None
        - if not as_image, the last size has a media query

    Example:
        >>> source = Source((Size(320, 1.5, media_query="(max-width: 600px)"),
        ...                  Size(640, 1.5)), as_image=True)
        >>> source.render_sizes()
        '(max-width: 600px) 320px, 640px'
    """

    sizes: Tuple[Size, ...]
    as_image: bool = False

    def __post_init__(self) -> None:
        """Validate source on construction."""
        object.__setattr__(self, "sizes", tuple(self.sizes))
        if not self.sizes:
            raise ConfigurationError("Source needs at least one size")

        ratio = self.sizes[0].aspect_ratio
        if any(size.aspect_ratio != ratio for size in self.sizes):
            raise ConfigurationError(
                f"All sizes of a source must share one aspect ratio: "
                f"{[size.aspect_ratio for size in self.sizes]}"
            )
        for size in self.sizes[:-1]:
            if size.media_query is None:
                raise ConfigurationError(
                    f"Size {size} has no media query but is not the last of its source"
                )
        if not self.as_image and self.last.media_query is None:
            raise ConfigurationError(
                f"Size {self.last} closes a <source> and needs a media query"
            )

    @property
    def last(self) -> Size:
        """Last size; its condition becomes the `media` attribute."""
        return self.sizes[-1]

    @property
    def aspect_ratio(self) -> float:
        return self.sizes[0].aspect_ratio

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def collect_srcset(self, generator: SrcsetGenerator, image: str) -> List[Src]:
        """
        Gather `srcset` entries for every size, unique by URL and descriptor.

        A variant may serve more than one size; the first occurrence wins.
        Browsers drop repeated descriptors, so an entry whose width (or
        density) is already offered under another URL is skipped too, e.g.
        the original asset and a firm variant of the same width.
        Entries are ordered by width (or density) for readable output.
        """
        seen_urls: set[str] = set()
        seen_descriptors: set[tuple] = set()
        srcs: List[Src] = []
        for size in self.sizes:
            for src in generator.list_for(image, size):
                descriptor = _descriptor(src)
                if src.url in seen_urls or descriptor in seen_descriptors:
                    continue
                seen_urls.add(src.url)
                seen_descriptors.add(descriptor)
                srcs.append(src)
        srcs.sort(key=lambda src: src.sort_key)
        return srcs

    def render_sizes(self) -> str:
        """`sizes` attribute value; the last entry carries no condition."""
        entries = [size.render() for size in self.sizes[:-1]]
        entries.append(self.last.render_width_only())
        return ", ".join(entries)

    def render(
        self,
        generator: SrcsetGenerator,
        image: str,
        alt: Optional[str] = None,
    ) -> str:
        """
        Generate the `<source>` or `<img>` element.

        Args:
            generator: Produces `srcset` entries per size
            image: Image reference passed through to the generator
            alt: Alt text for the `<img>`; ignored for `<source>`

        Returns:
            HTML for one element. An empty srcset is rendered as-is.
        """
        srcset = ", ".join(src.render() for src in self.collect_srcset(generator, image))
        attributes = f'srcset="{srcset}" sizes="{self.render_sizes()}"'

        if not self.as_image:
            return f'<source {attributes} media="{self.last.media_query}">'
        if alt is not None:
            attributes += f' alt="{html.escape(alt, quote=True)}"'
        return f"<img {attributes}>"
