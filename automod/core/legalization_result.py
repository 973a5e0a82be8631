"""Legalization Result — tagged outcome of a single resolution.

Invariants:
    - Exactly one variant per resolution; the variant is never swapped afterwards
    - Every variant carries a record: Failed holds the unsatisfied API candidate
      or the untouched blank, so callers can inspect partial progress
    - outcome is derived from the variant type, never stored separately

Design Decisions:
    - Three frozen dataclasses + a Union over a (record, flag) pair: a caller
      cannot reach the record without going through a variant
    - unwrap() is opt-in: the caller decides whether Failed is fatal
"""

from dataclasses import dataclass
from typing import Union

from automod.core.collaborator_protocols import RecordLike
from automod.core.domain_types import LegalizationOutcome
from automod.core.errors import ErrorContext, LegalizationFailedError


@dataclass(frozen=True)
class Regenerated:
    """API strategy fully satisfied the template."""
    record: RecordLike
    outcome = LegalizationOutcome.REGENERATED

    def unwrap(self) -> RecordLike:
        return self.record


@dataclass(frozen=True)
class BruteForced:
    """Brute-force strategy ran and produced a record."""
    record: RecordLike
    outcome = LegalizationOutcome.BRUTE_FORCE

    def unwrap(self) -> RecordLike:
        return self.record


@dataclass(frozen=True)
class Failed:
    """No permitted strategy produced a satisfying record."""
    record: RecordLike
    outcome = LegalizationOutcome.FAILED

    def unwrap(self) -> RecordLike:
        raise LegalizationFailedError(
            ErrorContext(species=getattr(self.record, "species", None)),
        )


LegalizationResult = Union[Regenerated, BruteForced, Failed]
