"""
Module: markup.slot_group

Purpose:
    Picks the slot for the nth item of a repeated listing, e.g. a hero slot
    for the first teaser and a grid slot for the rest.

Key Classes:
    - SlotGroup: Ordered (predicate, Slot) pairs
    - SlotNotFoundError: No predicate accepted the index

Used By:
    - loading.parser: Declarative group definitions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple, Union

from responsive_slots.core.errors import ConfigurationError

from .slot import Slot


# Predicate marker accepting every index.
ALWAYS = "all"

Predicate = Union[Callable[[int], bool], str]


class SlotNotFoundError(LookupError):
    """No slot in the group applies to the requested index."""
    pass


@dataclass(frozen=True)
class SlotGroup:
    """
    Slots selectable by 1-based item index (immutable).

    Entries are checked in order; the first whose predicate accepts the
    index wins. There is no implicit default: add an ALWAYS entry last for
    blanket coverage.

    Attributes:
        entries: (predicate, slot) pairs; predicate is a callable taking the
            1-based index, or ALWAYS

    Example:
        >>> group = SlotGroup(((lambda n: n == 1, hero), (ALWAYS, grid)))
        >>> group.slot_for_nth(1) is hero
        True
        >>> group.slot_for_nth(5) is grid
        True
    """

    entries: Tuple[Tuple[Predicate, Slot], ...]

    def __post_init__(self) -> None:
        """Validate entries on construction."""
        entries = tuple((predicate, slot) for predicate, slot in self.entries)
        if not entries:
            raise ConfigurationError("SlotGroup needs at least one entry")
        for predicate, slot in entries:
            if predicate != ALWAYS and not callable(predicate):
                raise ConfigurationError(
                    f"Predicate must be callable or {ALWAYS!r}: {predicate!r}"
                )
            if not isinstance(slot, Slot):
                raise ConfigurationError(f"Expected a Slot, got {type(slot).__name__}")
        object.__setattr__(self, "entries", entries)

    @classmethod
    def of(cls, entries: Iterable[Tuple[Predicate, Slot]]) -> SlotGroup:
        """Build a group from any iterable of pairs."""
        return cls(tuple(entries))

    def slot_for_nth(self, nth: int) -> Slot:
        """
        Find the first slot that applies to an index.

        Args:
            nth: 1-based index of the item in the listing

        Returns:
            The matching Slot

        Raises:
            ValueError: If nth < 1
            SlotNotFoundError: If no predicate accepts nth
        """
        if nth < 1:
            raise ValueError(f"nth is 1-based: {nth}")
        for predicate, slot in self.entries:
            if predicate == ALWAYS or predicate(nth):
                return slot
        raise SlotNotFoundError(f"No slot applies to item {nth}")
