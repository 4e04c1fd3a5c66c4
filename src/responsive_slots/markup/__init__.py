"""
Module: markup

Purpose:
    Markup composition: groups sizes into `<source>`/`<img>` elements and
    renders `srcset`, `sizes` and `<picture>` markup.

Key Classes:
    - Source: One `<source>` or the final `<img>`
    - Slot: Sizes of one layout position
    - SlotGroup: Slot per item index in a listing

Dependencies:
    - generators.base: SrcsetGenerator
"""

from .source import Source
from .slot import Slot, group_sizes_into_sources
from .slot_group import ALWAYS, SlotGroup, SlotNotFoundError

__all__ = [
    "Source",
    "Slot",
    "group_sizes_into_sources",
    "ALWAYS",
    "SlotGroup",
    "SlotNotFoundError",
]
