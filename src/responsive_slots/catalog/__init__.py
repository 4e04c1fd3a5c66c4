"""
Module: catalog

Purpose:
    Variant catalog collaborators: where the available pre-rendered variants,
    their URLs and the natural size of originals come from.

Key Classes:
    - VariantCatalogProvider: Abstract catalog interface
    - StaticCatalogProvider: Fixed candidates with URL templates
    - ImageStyle / StyleEffect: Style effect chains
    - DimensionsLookup: Abstract natural-dimension lookup
    - PillowDimensionsLookup: Reads image headers with Pillow
    - MappingDimensionsLookup: In-memory dimensions

Key Functions:
    - candidates_from_styles(): Usable styles as VariantCandidates
    - final_dimensions(): Dimensions produced by a style

Dependencies:
    - PIL: Image header parsing

Used By:
    - generators: srcset generation
"""

from .dimensions import DimensionsLookup, MappingDimensionsLookup, PillowDimensionsLookup
from .provider import StaticCatalogProvider, VariantCatalogProvider
from .styles import (
    SUPPORTED_EFFECTS,
    ImageStyle,
    StyleDimensions,
    StyleEffect,
    candidates_from_styles,
    final_dimensions,
)

__all__ = [
    "DimensionsLookup",
    "MappingDimensionsLookup",
    "PillowDimensionsLookup",
    "StaticCatalogProvider",
    "VariantCatalogProvider",
    "SUPPORTED_EFFECTS",
    "ImageStyle",
    "StyleDimensions",
    "StyleEffect",
    "candidates_from_styles",
    "final_dimensions",
]
