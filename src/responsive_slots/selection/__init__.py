"""
Module: selection

Purpose:
    Variant selection: decides which catalog variants cover a Size's width
    window at its aspect ratio without upscaling past the original asset.

Key Functions:
    - select_variants(): Main entry point for selection
    - bucket_by_width(): Split candidates around a size's window

Key Classes:
    - SelectorConfig: Selection tunables
    - WidthBuckets: less / within / greater buckets

Used By:
    - generators.catalog: Catalog-backed srcset generator
"""

from .config import DEFAULT_DENSITY_HEADROOM, SelectorConfig
from .selector import WidthBuckets, bucket_by_width, select_variants

__all__ = [
    "DEFAULT_DENSITY_HEADROOM",
    "SelectorConfig",
    "WidthBuckets",
    "bucket_by_width",
    "select_variants",
]
