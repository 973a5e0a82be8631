"""Boundary Protocols — contracts between the legalizer core and its collaborators.

Invariants:
    - Core NEVER imports a concrete strategy, record format, or save-file type
    - Strategies must not touch the destination collection
    - BruteForceStrategy always returns some record (not re-validated here)
    - Implementations provided by the embedding application via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy;
      record types come from outside this package
    - Synchronous methods: strategies return or they don't; a timeout wrapper,
      when needed, belongs to the strategy implementation
"""

from typing import Protocol, TYPE_CHECKING

from automod.core.domain_types import Form
if TYPE_CHECKING:
    from automod.core.templates import RegenTemplate


class TrainerInfo(Protocol):
    """Structural contract for the identity stamped onto produced records."""
    ot_name: str
    language: int
    generation: int
    game: int


class RecordLike(Protocol):
    """Structural contract for a concrete record produced by a strategy."""
    species: int
    form: int
    ball: int
    format: int

    @property
    def is_shiny(self) -> bool: ...

    @property
    def shiny_xor(self) -> int: ...


class BoxCollection(Protocol):
    """Fixed-length slot sequence with its owner's identity embedded."""
    trainer: TrainerInfo

    def __len__(self) -> int: ...
    def __getitem__(self, index: int) -> RecordLike: ...
    def __setitem__(self, index: int, record: RecordLike) -> None: ...


class ApiStrategy(Protocol):
    """Contract for the fast, constraint-matching ("API") strategy.

    `blank` is the starting record and is reused by the brute-force fallback
    when the result is unsatisfied, so implementations must not mutate it;
    clone it when a working copy is needed.
    """
    def get_legal_from_template(
        self, trainer: TrainerInfo, template: "RegenTemplate", blank: RecordLike,
    ) -> tuple[RecordLike, bool]: ...


class BruteForceStrategy(Protocol):
    """Contract for the exhaustive/heuristic fallback strategy."""
    def apply_details(
        self,
        blank: RecordLike,
        template: "RegenTemplate",
        reset_form: bool,
        trainer: TrainerInfo,
    ) -> RecordLike: ...


class FormValidity(Protocol):
    """Contract for the form-index validity check (is-invalid predicate)."""
    def is_invalid_form(self, form: Form) -> bool: ...


class IdentityProvider(Protocol):
    """Contract for saved trainer lookup and stamping, implemented by the app."""
    def saved_for_format(self, format: int) -> TrainerInfo: ...
    def saved_for_game(self, generation: int, game: int) -> TrainerInfo: ...
    def saved_for_record(
        self, record: RecordLike, fallback: TrainerInfo,
    ) -> TrainerInfo: ...
    def stamp(self, record: RecordLike, trainer: TrainerInfo) -> None: ...


class BlankRecordFactory(Protocol):
    """Contract for materializing an empty record of a given generation/game."""
    def get_blank(self, generation: int, game: int) -> RecordLike: ...


class DetailsApplier(Protocol):
    """Contract for copying template details onto a blank record in place."""
    def apply_set_details(
        self, record: RecordLike, template: "RegenTemplate",
    ) -> None: ...


class RecordNormalizer(Protocol):
    """Contract for idempotent cleanup before a record is written to a box."""
    def prepare_for_box(self, record: RecordLike) -> RecordLike: ...
