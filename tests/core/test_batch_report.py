"""Tests for BatchReport — counters, summary text, raise_for_status."""

import pytest

from automod.core.batch_report import BatchReport
from automod.core.domain_types import BatchStatus
from automod.core.errors import InvalidTemplateError, NotEnoughSpaceError
from automod.core.templates import RegenTemplate


def test_default_report_is_ok_and_empty():
    report = BatchReport()
    assert report.ok
    assert report.generated == 0
    assert report.api_generated == 0


def test_api_generated_excludes_brute_forced():
    report = BatchReport(
        written=[0, 1, 2],
        brute_forced=[RegenTemplate(species=5)],
    )
    assert report.generated == 3
    assert report.api_generated == 2


def test_summary_lists_brute_forced_text():
    report = BatchReport(
        written=[0, 1],
        brute_forced=[
            RegenTemplate(species=5, text="Charmeleon @ Leftovers"),
            RegenTemplate(species=7, species_name="Squirtle"),
        ],
    )
    lines = report.summary().splitlines()
    assert lines[0] == "API generated sets: 0/2, 2 were not."
    assert lines[1] == "Charmeleon @ Leftovers"
    assert lines[2] == "Squirtle"


def test_raise_for_status_ok_is_silent():
    BatchReport().raise_for_status()


def test_raise_for_status_not_enough_space():
    report = BatchReport(
        status=BatchStatus.NOT_ENOUGH_SPACE, requested=5, available=3,
    )
    with pytest.raises(NotEnoughSpaceError) as exc_info:
        report.raise_for_status()
    assert exc_info.value.requested == 5
    assert exc_info.value.available == 3


def test_raise_for_status_invalid_lines():
    rejected = RegenTemplate(species=9, invalid_lines=["Bogus"])
    report = BatchReport(
        status=BatchStatus.INVALID_LINES, rejected=rejected, rejected_position=2,
    )
    with pytest.raises(InvalidTemplateError) as exc_info:
        report.raise_for_status()
    assert exc_info.value.context.debug_info == {"position": 2}
