"""Slot Allocation — destination indices for a batch of new records.

Invariants:
    - All functions are PURE: they read the collection, never write it
    - Overwrite mode: contiguous range from start, clipped to the collection length
    - Fill mode: every empty slot at or after start, ascending, through the end
      (no early stop at count; the caller checks capacity)
    - A slot is empty when its species is below 1

Design Decisions:
    - Return the full candidate list, not a bool: the importer consumes it in order
    - check_capacity returns BatchStatus or None, mirroring the gate-check functions
"""

from collections.abc import Sequence

from automod.core.collaborator_protocols import RecordLike
from automod.core.domain_types import BatchStatus, EMPTY_SPECIES, SlotIndex
from automod.core.errors import SlotRangeError


def is_empty_slot(record: RecordLike) -> bool:
    return record.species <= EMPTY_SPECIES


def find_empty_slots(
    collection: Sequence[RecordLike], start: int,
) -> list[SlotIndex]:
    """All indices >= start whose slot holds no species."""
    if start < 0:
        raise SlotRangeError(start)
    return [
        SlotIndex(i) for i in range(start, len(collection))
        if is_empty_slot(collection[i])
    ]


def find_slots(
    collection: Sequence[RecordLike], start: int, count: int, overwrite: bool,
) -> list[SlotIndex]:
    """Candidate destination indices for count new records."""
    if start < 0:
        raise SlotRangeError(start)
    if overwrite:
        return [
            SlotIndex(i) for i in range(start, start + count)
            if i < len(collection)
        ]
    return find_empty_slots(collection, start)


def check_capacity(slots: list[SlotIndex], count: int) -> BatchStatus | None:
    """Rule: a batch only starts when every template has a slot."""
    if len(slots) < count:
        return BatchStatus.NOT_ENOUGH_SPACE
    return None
