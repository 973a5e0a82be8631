"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Species 0 is the empty-slot sentinel ("no kind present")
    - LegalizationOutcome has exactly three values, one per resolution
    - BatchStatus has exactly three values, one per import call
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (log extras, to_response)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Species = NewType("Species", int)
Form = NewType("Form", int)
SlotIndex = NewType("SlotIndex", int)


# ─── Constants ───────────────────────────────────────────────────

EMPTY_SPECIES: int = 0


# ─── Enums ───────────────────────────────────────────────────────

class Shiny(str, Enum):
    """Requested shininess of a template."""
    NEVER = "never"
    ALWAYS_STAR = "always_star"
    ALWAYS_SQUARE = "always_square"


class LegalizationOutcome(str, Enum):
    """How (or whether) a single resolution succeeded."""
    REGENERATED = "regenerated"
    BRUTE_FORCE = "brute_force"
    FAILED = "failed"


class BatchStatus(str, Enum):
    """Terminal classification of one batch import."""
    OK = "ok"
    NOT_ENOUGH_SPACE = "not_enough_space"
    INVALID_LINES = "invalid_lines"
