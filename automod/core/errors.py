"""Error Hierarchy — typed, categorized exceptions for AutoMod failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Normal failures travel as LegalizationResult / BatchStatus values, not exceptions
    - Exceptions mark boundary misuse, or a caller opting in via unwrap()/raise_for_status()
    - to_response() produces a flat, JSON-serializable envelope

Design Decisions:
    - Single hierarchy with AutoModError base: embedding apps catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from automod.core.domain_types import SlotIndex, Species


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    CAPACITY = "capacity"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    species: Species | None = None
    slot_index: SlotIndex | None = None
    debug_info: dict[str, Any] | None = None


class AutoModError(Exception):
    """Base exception for all AutoMod errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "species": self.context.species,
                    "slot_index": self.context.slot_index,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidTemplateError(AutoModError):
    """Template still carries lines the parser could not understand."""
    def __init__(self, invalid_lines: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Template has {len(invalid_lines)} invalid line(s): "
            f"{', '.join(invalid_lines)}",
            "INVALID_LINES", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.invalid_lines = invalid_lines


class SlotRangeError(AutoModError):
    """Slot search started outside the collection."""
    def __init__(self, start: int, context: ErrorContext | None = None):
        super().__init__(
            f"Slot search cannot start at negative index {start}",
            "SLOT_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.start = start


# ─── Business Rule Errors ───────────────────────────────────────

class NotEnoughSpaceError(AutoModError):
    """Destination collection cannot hold every template of the batch."""
    def __init__(
        self, requested: int, available: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Batch needs {requested} slot(s) but only {available} are available",
            "NOT_ENOUGH_SPACE", ErrorCategory.CAPACITY,
            ErrorSeverity.WARNING, context,
        )
        self.requested = requested
        self.available = available


class LegalizationFailedError(AutoModError):
    """Neither strategy was permitted to, or did, produce a legal record."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Template could not be legalized with the enabled strategies",
            "LEGALIZATION_FAILED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context,
        )
