"""
Schema Validation Utilities

Validates declarative slot definitions against `slots.schema.json`.

Structural problems (wrong types, missing keys, unknown keys) are reported
here with the path of the offending value. Semantic problems that need more
than one value to detect (max_width < min_width, unknown slot references)
are left to Size construction and loading.parser.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ConfigurationError


SLOTS_SCHEMA_NAME = "slots"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(ConfigurationError):
    """Raised when definitions fail schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _format_path(parts) -> str:
    """Render a jsonschema path deque as `slots.hero[0].min_width`."""
    rendered = ""
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered


def validate_definitions(data: Any) -> None:
    """
    Validate slot definitions against the slots schema.

    Args:
        data: Decoded JSON document

    Raises:
        ValidationError: If data does not conform. `errors` lists every
            violation, the message and `path` describe the first one.

    Example:
        >>> validate_definitions({"slots": {"hero": [{"min_width": 320, "aspect_ratio": "16/9"}]}})
    """
    schema = _load_schema(SLOTS_SCHEMA_NAME)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)

    violations = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    if not violations:
        return

    first = violations[0]
    path = _format_path(first.absolute_path)
    raise ValidationError(
        f"Schema validation failed at {path or '<root>'}: {first.message}",
        path=path,
        errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in violations],
    )
