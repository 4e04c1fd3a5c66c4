"""Top-level package for responsive image slots.

Provides subpackages:
- responsive_slots.core – Size, VariantCandidate and Src value types
- responsive_slots.selection – variant selection algorithm
- responsive_slots.catalog – variant catalog providers and dimension lookups
- responsive_slots.generators – srcset generators
- responsive_slots.markup – Source, Slot and SlotGroup markup composition
- responsive_slots.loading – declarative slot definitions
"""

from .core import ConfigurationError, Size, Src, VariantCandidate
from .markup import ALWAYS, Slot, SlotGroup, SlotNotFoundError, Source


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or fall back to 0.0.0."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("responsive-slots")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "ConfigurationError",
    "Size",
    "Src",
    "VariantCandidate",
    "ALWAYS",
    "Slot",
    "SlotGroup",
    "SlotNotFoundError",
    "Source",
]
