"""
JSON Schema definitions and validation for declarative slot definitions.
"""

from .validator import ValidationError, validate_definitions

__all__ = [
    "ValidationError",
    "validate_definitions",
]
