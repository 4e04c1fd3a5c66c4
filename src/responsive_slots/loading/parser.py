"""
Module: loading.parser

Purpose:
    Parse declarative slot definitions (JSON) into Slot and SlotGroup
    objects. Validates structure against the slots schema first, then
    builds and validates the value objects.

Key Functions:
    - parse_definitions(): Build definitions from decoded JSON data
    - load_definitions(): Read and parse a definitions file
    - parse_aspect_ratio(): Number or "W/H" / "W:H" string to float

Key Classes:
    - Definitions: Named slots and slot groups
    - IndexPredicate: Predicate accepting a fixed set of indexes
    - ParseError: Exception for inconsistent or unreadable definitions

Dependencies:
    - json (std)
    - core.schemas.validator: Schema validation

Used By:
    - Application code building slots from configuration
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Union

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.schemas.validator import validate_definitions
from responsive_slots.markup import ALWAYS, Slot, SlotGroup
from responsive_slots.markup.slot_group import Predicate

logger = logging.getLogger(__name__)


_RATIO_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[/:]\s*(\d+(?:\.\d+)?)\s*$")


class ParseError(ConfigurationError):
    """Error parsing slot definitions."""
    pass


@dataclass(frozen=True)
class IndexPredicate:
    """
    Accepts a fixed set of 1-based indexes.

    Example:
        >>> IndexPredicate(frozenset({1, 3}))(3)
        True
    """

    indexes: FrozenSet[int]

    def __call__(self, nth: int) -> bool:
        return nth in self.indexes


@dataclass(frozen=True)
class Definitions:
    """
    Parsed slot definitions.

    Attributes:
        slots: Slots by name
        groups: Slot groups by name
    """

    slots: Dict[str, Slot] = field(default_factory=dict)
    groups: Dict[str, SlotGroup] = field(default_factory=dict)

    def slot(self, name: str) -> Slot:
        """Get a slot by name (KeyError if unknown)."""
        return self.slots[name]

    def group(self, name: str) -> SlotGroup:
        """Get a slot group by name (KeyError if unknown)."""
        return self.groups[name]


def parse_aspect_ratio(value: Union[int, float, str]) -> float:
    """
    Convert an aspect ratio definition to a float.

    Args:
        value: Positive number, or "16/9" / "16:9" style string

    Returns:
        Width / height as float

    Raises:
        ParseError: If the value is malformed or not positive
    """
    if isinstance(value, bool):
        raise ParseError(f"Invalid aspect ratio: {value!r}")
    if isinstance(value, (int, float)):
        ratio = float(value)
    else:
        match = _RATIO_PATTERN.match(value)
        if match is None:
            raise ParseError(f"Invalid aspect ratio: {value!r}")
        width, height = float(match.group(1)), float(match.group(2))
        if height == 0:
            raise ParseError(f"Aspect ratio has zero height: {value!r}")
        ratio = width / height
    if ratio <= 0:
        raise ParseError(f"Aspect ratio must be positive: {value!r}")
    return ratio


def _parse_slot(name: str, records: Iterable[Mapping[str, Any]]) -> Slot:
    """Build one slot, attaching the slot name to any error."""
    try:
        converted = []
        for record in records:
            record = dict(record)
            record["aspect_ratio"] = parse_aspect_ratio(record["aspect_ratio"])
            converted.append(record)
        return Slot.from_records(converted)
    except ConfigurationError as e:
        raise ParseError(f"Slot {name!r}: {e}") from e


def _parse_predicate(nth: Union[str, int, list]) -> Predicate:
    """Convert an `nth` definition into a SlotGroup predicate."""
    if nth == ALWAYS:
        return ALWAYS
    if isinstance(nth, (int, float)):
        return IndexPredicate(frozenset({int(nth)}))
    return IndexPredicate(frozenset(nth))


def _parse_group(
    name: str,
    entries: Iterable[Mapping[str, Any]],
    slots: Mapping[str, Slot],
) -> SlotGroup:
    """Build one slot group, resolving slot references by name."""
    pairs = []
    for entry in entries:
        slot_name = entry["slot"]
        if slot_name not in slots:
            raise ParseError(f"Group {name!r} references unknown slot {slot_name!r}")
        pairs.append((_parse_predicate(entry["nth"]), slots[slot_name]))
    return SlotGroup(tuple(pairs))


def parse_definitions(data: Any) -> Definitions:
    """
    Parse decoded slot definitions.

    Validates:
    - Document structure (JSON Schema)
    - Size values (Size construction)
    - Source grouping rules (Slot construction)
    - Slot references in groups

    Args:
        data: Decoded JSON document

    Returns:
        Definitions with every slot and group built

    Raises:
        ValidationError: If the structure is invalid
        ParseError: If values are inconsistent

    Example:
        >>> defs = parse_definitions({"slots": {"thumb": [{"min_width": 150, "aspect_ratio": 1}]}})
        >>> defs.slot("thumb").sizes[0].min_width
        150
    """
    validate_definitions(data)

    slots = {name: _parse_slot(name, records) for name, records in data["slots"].items()}
    groups = {
        name: _parse_group(name, entries, slots)
        for name, entries in data.get("groups", {}).items()
    }
    return Definitions(slots=slots, groups=groups)


def load_definitions(path: Path) -> Definitions:
    """
    Load slot definitions from a JSON file.

    Args:
        path: Path to the definitions file (UTF-8 JSON)

    Returns:
        Parsed Definitions

    Raises:
        ParseError: If the file is missing or not valid UTF-8 JSON
        ValidationError: If the structure is invalid
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"Definitions file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e

    definitions = parse_definitions(data)
    logger.info(
        "Loaded %d slots and %d groups from %s",
        len(definitions.slots), len(definitions.groups), path,
    )
    return definitions
