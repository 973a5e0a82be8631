"""Batch Import — places many legalized templates into one box collection.

Invariants:
    - Capacity checked once, before any write: NOT_ENOUGH_SPACE leaves the box untouched
    - Templates consume slots strictly in input order
    - An invalid template stops the batch; slots written before it stay written
    - Brute-forced templates are reported, never change the status
    - Identity comes from the collection's embedded trainer

Design Decisions:
    - No rollback on INVALID_LINES: best-effort import, earlier records are
      already legal and useful (pinned by tests)
    - Normalization delegated to the RecordNormalizer collaborator (party stats, box form)
    - Summary logged once per batch, not per template
"""

import logging

from automod.core.batch_report import BatchReport
from automod.core.collaborator_protocols import BoxCollection
from automod.core.domain_types import BatchStatus, LegalizationOutcome
from automod.core.slot_allocation import check_capacity, find_slots
from automod.core.templates import RegenTemplate
from automod.services.legalizer import Legalizer

logger = logging.getLogger(__name__)


def import_to_existing(
    legalizer: Legalizer,
    templates: list[RegenTemplate],
    collection: BoxCollection,
    start: int = 0,
    overwrite: bool = True,
) -> BatchReport:
    """Import templates into collection starting at start. Returns BatchReport."""
    slots = find_slots(collection, start, len(templates), overwrite)
    report = BatchReport(requested=len(templates), available=len(slots))

    status = check_capacity(slots, len(templates))
    if status:
        logger.warning(
            f"Not enough space: {len(templates)} set(s), {len(slots)} slot(s)",
            extra={"batch_size": len(templates), "error_code": status.value},
        )
        report.status = status
        return report

    trainer = collection.trainer
    normalizer = legalizer.collaborators.normalizer
    for position, template in enumerate(templates):
        if template.has_invalid_lines:
            logger.warning(
                f"Set {position} has invalid lines, aborting batch",
                extra={"species": template.species, "error_code": "invalid_lines"},
            )
            report.status = BatchStatus.INVALID_LINES
            report.rejected = template
            report.rejected_position = position
            return report

        logger.debug(
            f"Generating set: {template.display_name}",
            extra={"species": template.species},
        )
        result = legalizer.resolve(template, trainer)
        record = normalizer.prepare_for_box(result.record)
        if result.outcome == LegalizationOutcome.BRUTE_FORCE:
            report.brute_forced.append(template)

        index = slots[position]
        collection[index] = record
        report.written.append(index)
        logger.debug(
            f"Placed {template.display_name} in slot {index}",
            extra={"slot_index": index, "outcome": result.outcome.value},
        )

    logger.info(
        report.summary(),
        extra={"batch_size": len(templates)},
    )
    return report
