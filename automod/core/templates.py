"""Regeneration Templates — validated description of the record a caller wants.

Invariants:
    - Templates are frozen: strategies receive them read-only
    - species/form/ball are non-negative; ball 0 means "unspecified"
    - has_invalid_lines is the single gate checked before any strategy dispatch
    - from_record derives shininess from the record: xor 0 -> square, shiny -> star, else never

Design Decisions:
    - Pydantic model at the boundary: field-level validation, no hand-rolled checks
    - Parsing of showdown text stays outside: invalid_lines arrives pre-computed
      and is kept exactly as the parser reported it
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from automod.core.collaborator_protocols import RecordLike
from automod.core.domain_types import Form, Shiny, Species


def shiny_type_for(record: RecordLike) -> Shiny:
    """Classify a record's shininess into the template's tri-state."""
    if record.shiny_xor == 0:
        return Shiny.ALWAYS_SQUARE
    if record.is_shiny:
        return Shiny.ALWAYS_STAR
    return Shiny.NEVER


class RegenTemplate(BaseModel):
    """Abstract description of a desired record, possibly not yet legal."""

    model_config = ConfigDict(frozen=True)

    species: Species = Field(ge=0)
    form: Form = Field(0, ge=0)
    ball: int = Field(0, ge=0)
    shiny_type: Shiny = Shiny.NEVER
    invalid_lines: tuple[str, ...] = ()
    text: str = ""
    species_name: str | None = None

    @field_validator("invalid_lines", mode="before")
    @classmethod
    def reject_bare_string(cls, v):
        """A single string would otherwise be split into one entry per character."""
        if isinstance(v, str):
            raise ValueError("invalid_lines must be a sequence of lines, not a string")
        return v

    @property
    def has_invalid_lines(self) -> bool:
        return len(self.invalid_lines) > 0

    @property
    def display_name(self) -> str:
        return self.species_name or f"#{self.species}"

    @classmethod
    def from_record(cls, record: RecordLike) -> "RegenTemplate":
        """Template that asks for the record as it already is."""
        return cls(
            species=record.species,
            form=record.form,
            ball=record.ball,
            shiny_type=shiny_type_for(record),
        )
