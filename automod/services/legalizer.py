"""Legalizer — dual-strategy resolution of one template into a record.

Invariants:
    - Gate read on every call (self.gate may be replaced between calls)
    - API satisfied -> Regenerated; brute force is never consulted afterwards
    - API unsatisfied + brute force disallowed -> Failed(candidate), not Failed(blank)
    - Neither strategy permitted -> Failed(starting record)
    - Brute force invoked at most once per call; its record is always stamped
    - Templates with invalid lines never reach a strategy (InvalidTemplateError)

Design Decisions:
    - Collaborators injected as one bundle: one constructor argument, every
      boundary visible in one place
    - legalize(record) and resolve(template, trainer) stay separate entry points:
      the first derives its trainer from saved settings, the second is handed one
    - Fallback is a single escalation, never a retry loop
    - One starting record per call: resolve derives a blank once, legalize_with
      starts from the caller's record; strategies must not mutate it
"""

import logging
from dataclasses import dataclass

from automod.config import Settings, get_settings
from automod.core.collaborator_protocols import (
    ApiStrategy,
    BlankRecordFactory,
    BruteForceStrategy,
    DetailsApplier,
    FormValidity,
    IdentityProvider,
    RecordLike,
    RecordNormalizer,
    TrainerInfo,
)
from automod.core.errors import ErrorContext, InvalidTemplateError
from automod.core.legalization_result import (
    BruteForced, Failed, LegalizationResult, Regenerated,
)
from automod.core.strategy_gate import StrategyGate
from automod.core.templates import RegenTemplate

logger = logging.getLogger(__name__)


@dataclass
class Collaborators:
    """External implementations the legalizer orchestrates."""
    api: ApiStrategy
    brute_force: BruteForceStrategy
    form_validity: FormValidity
    identity: IdentityProvider
    blank_factory: BlankRecordFactory
    normalizer: RecordNormalizer
    details_applier: DetailsApplier | None = None


class Legalizer:
    """Sequences the API and brute-force strategies under a StrategyGate."""

    def __init__(self, collaborators: Collaborators, gate: StrategyGate | None = None):
        self.collaborators = collaborators
        self.gate = gate or StrategyGate()

    # --- Entry points ---------------------------------------------------------

    def legalize(self, record: RecordLike) -> LegalizationResult:
        """Legalize an existing record using the saved trainer for its format."""
        trainer = self.collaborators.identity.saved_for_format(record.format)
        return self.legalize_with(trainer, record)

    def legalize_with(
        self, trainer: TrainerInfo, record: RecordLike,
    ) -> LegalizationResult:
        """Legalize an existing record on behalf of the given trainer.

        The record itself is the starting point for both strategies; no blank
        is derived.
        """
        return self._dispatch(RegenTemplate.from_record(record), trainer, record)

    def resolve_for_game(
        self, template: RegenTemplate, generation: int, game: int,
    ) -> LegalizationResult:
        """Resolve with the default trainer saved for a generation/game pair."""
        trainer = self.collaborators.identity.saved_for_game(generation, game)
        return self.resolve(template, trainer)

    def resolve(
        self, template: RegenTemplate, trainer: TrainerInfo,
    ) -> LegalizationResult:
        """Main method: API first, brute force as the single fallback."""
        if template.has_invalid_lines:
            raise InvalidTemplateError(
                list(template.invalid_lines),
                ErrorContext(species=template.species),
            )
        return self._dispatch(template, trainer, self._blank_for(template, trainer))

    # --- Strategy plumbing ----------------------------------------------------

    def _dispatch(
        self, template: RegenTemplate, trainer: TrainerInfo, start: RecordLike,
    ) -> LegalizationResult:
        """Run the gated strategies from one starting record, shared by both."""
        gate = self.gate

        if gate.allow_api:
            candidate, satisfied = self.collaborators.api.get_legal_from_template(
                trainer, template, start,
            )
            if satisfied:
                self._stamp(candidate, trainer)
                return self._log(template, Regenerated(candidate))
            if not gate.allow_brute_force:
                return self._log(template, Failed(candidate))

        if not gate.allow_brute_force:
            return self._log(template, Failed(start))

        record = self._brute_force(template, start, trainer)
        return self._log(template, BruteForced(record))

    def _blank_for(self, template: RegenTemplate, trainer: TrainerInfo) -> RecordLike:
        """Fresh blank of the trainer's generation/game, with template details if configured."""
        blank = self.collaborators.blank_factory.get_blank(
            trainer.generation, trainer.game,
        )
        applier = self.collaborators.details_applier
        if applier is not None:
            applier.apply_set_details(blank, template)
        return blank

    def _stamp(self, record: RecordLike, fallback: TrainerInfo) -> None:
        """Stamp with the saved trainer for the record, falling back to the caller's."""
        identity = self.collaborators.identity
        identity.stamp(record, identity.saved_for_record(record, fallback))

    def _brute_force(
        self, template: RegenTemplate, blank: RecordLike, trainer: TrainerInfo,
    ) -> RecordLike:
        # invalid form index -> search from the base form
        reset_form = self.collaborators.form_validity.is_invalid_form(template.form)
        identity = self.collaborators.identity
        saved = identity.saved_for_record(blank, trainer)
        record = self.collaborators.brute_force.apply_details(
            blank, template, reset_form, saved,
        )
        identity.stamp(record, saved)
        return record

    def _log(
        self, template: RegenTemplate, result: LegalizationResult,
    ) -> LegalizationResult:
        logger.debug(
            f"Legalized {template.display_name}: {result.outcome.value}",
            extra={"species": template.species, "outcome": result.outcome.value},
        )
        return result


def create_legalizer(
    collaborators: Collaborators, settings: Settings | None = None,
) -> Legalizer:
    """Legalizer whose gate is seeded from environment settings."""
    settings = settings or get_settings()
    return Legalizer(collaborators, StrategyGate.from_settings(settings))
