"""
Module: generators

Purpose:
    srcset generators: turn an image reference and a Size into `srcset`
    entries. Markup composition only depends on the SrcsetGenerator
    interface.

Key Classes:
    - SrcsetGenerator: Abstract interface
    - CatalogSrcsetGenerator: Picks pre-rendered variants from a catalog
    - ResizeServiceSrcsetGenerator: Builds on-the-fly resizing URLs
    - ResizeServiceConfig: Resizing service configuration

Used By:
    - markup: Source / Slot rendering
"""

from .base import SrcsetGenerator
from .catalog import CatalogSrcsetGenerator
from .resize_service import ResizeServiceConfig, ResizeServiceSrcsetGenerator

__all__ = [
    "SrcsetGenerator",
    "CatalogSrcsetGenerator",
    "ResizeServiceConfig",
    "ResizeServiceSrcsetGenerator",
]
