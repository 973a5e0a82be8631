"""Batch Report — terminal status plus observability details of one import.

Invariants:
    - status is final once the report leaves the importer
    - written lists slot indices in the order templates were placed
    - brute_forced never affects status; it exists for logging only
    - generated == len(written)

Design Decisions:
    - Dataclass, not dict: the importer builds it incrementally, callers read attributes
    - raise_for_status() is opt-in: callers decide whether a non-OK batch is fatal
"""

from dataclasses import dataclass, field

from automod.core.domain_types import BatchStatus, SlotIndex
from automod.core.errors import (
    ErrorContext, InvalidTemplateError, NotEnoughSpaceError,
)
from automod.core.templates import RegenTemplate


@dataclass
class BatchReport:
    """Outcome of importing a list of templates into a box."""

    status: BatchStatus = BatchStatus.OK
    requested: int = 0
    available: int = 0
    written: list[SlotIndex] = field(default_factory=list)
    brute_forced: list[RegenTemplate] = field(default_factory=list)
    rejected: RegenTemplate | None = None
    rejected_position: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == BatchStatus.OK

    @property
    def generated(self) -> int:
        return len(self.written)

    @property
    def api_generated(self) -> int:
        """Templates placed without needing brute force."""
        return self.generated - len(self.brute_forced)

    def summary(self) -> str:
        """Human-readable digest: API ratio, then each brute-forced template's text."""
        lines = [
            f"API generated sets: {self.api_generated}/{self.generated}, "
            f"{len(self.brute_forced)} were not."
        ]
        lines += [t.text or t.display_name for t in self.brute_forced]
        return "\n".join(lines)

    def raise_for_status(self) -> None:
        if self.status == BatchStatus.NOT_ENOUGH_SPACE:
            raise NotEnoughSpaceError(self.requested, self.available)
        if self.status == BatchStatus.INVALID_LINES and self.rejected is not None:
            raise InvalidTemplateError(
                list(self.rejected.invalid_lines),
                ErrorContext(
                    species=self.rejected.species,
                    debug_info={"position": self.rejected_position},
                ),
            )
