"""
Responsive Slots Core Package

Shared value types and errors used by every other subpackage.

1. **Immutable Data Models**
   - Size, VariantCandidate and Src are frozen dataclasses
   - Validation happens once, at construction

2. **Fail Fast**
   - Malformed definitions raise ConfigurationError when built,
     never while rendering
"""

from .errors import ConfigurationError
from .models import Size, Src, VariantCandidate

__all__ = [
    "ConfigurationError",
    "Size",
    "Src",
    "VariantCandidate",
]
