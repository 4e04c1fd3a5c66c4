"""
Module: core.errors

Purpose:
    Exception raised when slot, size or generator definitions are malformed.
    Raised at construction time, never while rendering.

Used By:
    - core.models.size: Size validation
    - markup: Source, Slot and SlotGroup validation
    - core.schemas.validator / loading.parser: definition errors
"""


class ConfigurationError(ValueError):
    """Malformed slot, size or generator configuration."""
    pass
