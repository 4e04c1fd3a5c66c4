"""
Module: loading

Purpose:
    Declarative slot definitions: JSON documents describing named slots and
    slot groups, validated and turned into Slot / SlotGroup objects.

Key Functions:
    - load_definitions(): Read and parse a definitions file
    - parse_definitions(): Parse already-decoded data
    - parse_aspect_ratio(): "16/9" style ratios

Key Classes:
    - Definitions: Named slots and groups
    - ParseError: Definitions could not be parsed
"""

from .parser import (
    Definitions,
    IndexPredicate,
    ParseError,
    load_definitions,
    parse_aspect_ratio,
    parse_definitions,
)

__all__ = [
    "Definitions",
    "IndexPredicate",
    "ParseError",
    "load_definitions",
    "parse_aspect_ratio",
    "parse_definitions",
]
