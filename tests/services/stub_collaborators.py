"""Stub Collaborators — deterministic stand-ins for strategies, factories and providers.

Invariants:
    - Every stub records its calls so tests can assert on dispatch order and count
    - StubApi returns a fresh record per call; satisfied flag is configurable
    - StubBruteForce always returns a record (its contract), form zeroed when reset_form
    - StubBlankFactory blanks equal each other for the same generation (dataclass eq)

Design Decisions:
    - Flat stub classes (no inheritance): simple, explicit, easy to debug
    - FakeRecord is a plain dataclass: equality by value, attributes mutable for stamping
"""

from dataclasses import dataclass, field

from automod.core.slot_collection import SlotCollection
from automod.services.legalizer import Collaborators, Legalizer
from automod.core.strategy_gate import StrategyGate


# -- Records and trainers ------------------------------------------------------


@dataclass
class FakeRecord:
    species: int = 0
    form: int = 0
    ball: int = 0
    format: int = 8
    shiny_xor: int = 1
    is_shiny: bool = False
    origin: str = "blank"
    trainer: object = None
    party_reset: bool = False


@dataclass(frozen=True)
class FakeTrainer:
    ot_name: str = "Ash"
    language: int = 2
    generation: int = 8
    game: int = 44


SAVED_TRAINER = FakeTrainer(ot_name="Saved", language=1)


# -- Strategies ---------------------------------------------------------------


class StubApi:
    def __init__(self, satisfied: bool = True):
        self.satisfied = satisfied
        self.calls = []

    def get_legal_from_template(self, trainer, template, blank):
        self.calls.append({"trainer": trainer, "template": template, "blank": blank})
        record = FakeRecord(
            species=template.species, form=template.form,
            format=blank.format, origin="api",
        )
        return record, self.satisfied


class StubBruteForce:
    def __init__(self):
        self.calls = []

    def apply_details(self, blank, template, reset_form, trainer):
        self.calls.append({
            "blank": blank, "template": template,
            "reset_form": reset_form, "trainer": trainer,
        })
        return FakeRecord(
            species=template.species,
            form=0 if reset_form else template.form,
            format=blank.format,
            origin="brute_force",
        )


class StubFormValidity:
    def __init__(self, invalid_forms: set[int] | None = None):
        self.invalid_forms = invalid_forms or set()
        self.calls = []

    def is_invalid_form(self, form: int) -> bool:
        self.calls.append(form)
        return form in self.invalid_forms


# -- Identity, factories, normalization ----------------------------------------


class StubIdentity:
    """saved=None means no saved trainer: the fallback is used as-is."""

    def __init__(self, saved=None):
        self.saved = saved
        self.format_lookups = []
        self.stamped = []

    def saved_for_format(self, format: int):
        self.format_lookups.append(format)
        return FakeTrainer(ot_name="Default", generation=format)

    def saved_for_game(self, generation: int, game: int):
        return FakeTrainer(ot_name="Default", generation=generation, game=game)

    def saved_for_record(self, record, fallback):
        return self.saved or fallback

    def stamp(self, record, trainer) -> None:
        record.trainer = trainer
        self.stamped.append(record)


class StubBlankFactory:
    def __init__(self):
        self.calls = []

    def get_blank(self, generation: int, game: int):
        self.calls.append((generation, game))
        return FakeRecord(format=generation)


class StubDetailsApplier:
    def apply_set_details(self, record, template) -> None:
        record.species = template.species
        record.form = template.form
        record.ball = template.ball


class StubNormalizer:
    def __init__(self):
        self.calls = 0

    def prepare_for_box(self, record):
        self.calls += 1
        record.party_reset = True
        return record


# -- Builders -----------------------------------------------------------------


def make_collaborators(**overrides) -> Collaborators:
    parts = {
        "api": StubApi(),
        "brute_force": StubBruteForce(),
        "form_validity": StubFormValidity(),
        "identity": StubIdentity(),
        "blank_factory": StubBlankFactory(),
        "normalizer": StubNormalizer(),
    }
    parts.update(overrides)
    return Collaborators(**parts)


def make_legalizer(
    allow_api: bool = True, allow_brute_force: bool = True, **overrides,
) -> Legalizer:
    return Legalizer(
        make_collaborators(**overrides),
        StrategyGate(allow_api=allow_api, allow_brute_force=allow_brute_force),
    )


def make_box(
    occupied: list[bool], trainer: FakeTrainer | None = None,
) -> SlotCollection:
    """Box where occupied[i] decides whether slot i holds a species."""
    slots = [
        FakeRecord(species=999, origin="existing") if filled else FakeRecord()
        for filled in occupied
    ]
    return SlotCollection(trainer or FakeTrainer(), slots)
