"""
Module: core.templates

Purpose:
    Checks `str.format` URL templates when a provider or generator is
    configured, so an unknown placeholder fails at construction instead of
    raising KeyError while rendering.

Key Functions:
    - template_fields(): Placeholder names used by a template
    - check_url_template(): Validate placeholders against an allowed set

Dependencies:
    - string (std): Formatter.parse
    - core.errors: ConfigurationError

Used By:
    - catalog.provider: StaticCatalogProvider URL templates
    - generators.resize_service: ResizeServiceConfig.url_template
"""

from __future__ import annotations

import re
from string import Formatter
from typing import FrozenSet, Iterable

from .errors import ConfigurationError

# "image.name" and "image[0]" both use the "image" argument.
_FIELD_BASE = re.compile(r"^[^.\[]*")


def template_fields(template: str) -> FrozenSet[str]:
    """
    Get the placeholder names of a format template.

    Example:
        >>> sorted(template_fields("/styles/{style}/{image}"))
        ['image', 'style']

    Raises:
        ConfigurationError: If the template is not a valid format string
    """
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise ConfigurationError(f"Malformed URL template {template!r}: {e}") from e
    return frozenset(
        _FIELD_BASE.match(field_name).group(0)
        for _, field_name, _, _ in parsed
        if field_name is not None
    )


def check_url_template(
    name: str,
    template: str,
    allowed: Iterable[str],
    required: Iterable[str] = (),
) -> None:
    """
    Validate the placeholders of a URL template.

    Args:
        name: Setting name used in error messages
        template: Template passed to `str.format` with keyword arguments
        allowed: Placeholder names that will be supplied
        required: Placeholder names that must appear

    Raises:
        ConfigurationError: On malformed templates, unknown or positional
            placeholders, or missing required ones
    """
    fields = template_fields(template)
    unknown = fields - set(allowed)
    if unknown:
        raise ConfigurationError(
            f"{name} uses unknown placeholders {sorted(unknown)}: {template!r}"
        )
    missing = set(required) - fields
    if missing:
        placeholders = ", ".join(f"{{{field}}}" for field in sorted(missing))
        raise ConfigurationError(f"{name} must contain {placeholders}: {template!r}")
