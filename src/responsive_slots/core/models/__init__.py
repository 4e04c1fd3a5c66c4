"""
Core data models: immutable value types shared by every subpackage.
"""

from .size import Size
from .variants import Src, VariantCandidate

__all__ = [
    "Size",
    "Src",
    "VariantCandidate",
]
