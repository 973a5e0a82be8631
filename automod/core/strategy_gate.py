"""Strategy Gate — which legalization strategies a resolution may run.

Invariants:
    - Two independent switches, both default True; no cross-validation (both may be False)
    - Frozen: a gate value never changes, callers swap in a new one instead
    - Read on every resolution, never cached by the resolver

Design Decisions:
    - Injected value, not module globals: tests run several policies side by side
      without leaking toggles between them
    - from_settings takes the settings object as a parameter; config is imported
      for type checking only
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from automod.config import Settings


@dataclass(frozen=True)
class StrategyGate:
    """Feature flags for the API and brute-force strategies."""

    allow_api: bool = True
    allow_brute_force: bool = True

    @classmethod
    def from_settings(cls, settings: "Settings") -> "StrategyGate":
        return cls(
            allow_api=settings.allow_api,
            allow_brute_force=settings.allow_brute_force,
        )
