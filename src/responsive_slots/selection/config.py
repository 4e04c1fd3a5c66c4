"""
Module: selection.config

Purpose:
    Configuration dataclass for the variant selection algorithm.
    Immutable configuration with validation on construction.

Key Classes:
    - SelectorConfig: Tunables for select_variants()

Dependencies:
    - dataclasses (std)

Used By:
    - selection.selector: Main selector
    - generators.catalog: Catalog-backed srcset generator
"""

from __future__ import annotations

from dataclasses import dataclass

from responsive_slots.core.errors import ConfigurationError


# Covers 2x density displays
DEFAULT_DENSITY_HEADROOM = 2.0


@dataclass(frozen=True)
class SelectorConfig:
    """
    Configuration for variant selection (immutable).

    Attributes:
        density_headroom: Multiplier applied to a size's max_width to get the
            widest variant still worth offering

    Invariants:
        - density_headroom > 0

    Example:
        >>> config = SelectorConfig()
        >>> config.density_headroom
        2.0
    """

    density_headroom: float = DEFAULT_DENSITY_HEADROOM

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.density_headroom <= 0:
            raise ConfigurationError(
                f"density_headroom must be positive: {self.density_headroom}"
            )
