"""Slot Collection — list-backed fixed-length box with its owner's trainer.

Invariants:
    - Length is fixed at construction; writes outside it raise IndexError
    - Holds no legalization logic: allocation lives in slot_allocation

Design Decisions:
    - Minimal BoxCollection implementation for embedding apps without a save-file type
"""

from collections.abc import Iterator

from automod.core.collaborator_protocols import RecordLike, TrainerInfo


class SlotCollection:
    """Fixed-length sequence of records owned by one trainer."""

    def __init__(self, trainer: TrainerInfo, slots: list[RecordLike]):
        self.trainer = trainer
        self._slots = list(slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> RecordLike:
        return self._slots[index]

    def __setitem__(self, index: int, record: RecordLike) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} outside box of {len(self._slots)}")
        self._slots[index] = record

    def __iter__(self) -> Iterator[RecordLike]:
        return iter(self._slots)
