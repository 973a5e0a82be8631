"""Tests for StrategyGate — defaults, independence, settings seeding."""

import dataclasses
from typing import get_type_hints

import pytest

from automod.config import Settings
from automod.core.strategy_gate import StrategyGate


def test_both_strategies_allowed_by_default():
    gate = StrategyGate()
    assert gate.allow_api
    assert gate.allow_brute_force


def test_both_may_be_disabled():
    gate = StrategyGate(allow_api=False, allow_brute_force=False)
    assert (gate.allow_api, gate.allow_brute_force) == (False, False)


def test_gate_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        StrategyGate().allow_api = False


def test_from_settings_copies_flags():
    settings = Settings(allow_api=True, allow_brute_force=False)
    assert StrategyGate.from_settings(settings) == StrategyGate(True, False)


def test_from_settings_annotated_with_settings():
    hints = get_type_hints(
        StrategyGate.from_settings, localns={"Settings": Settings},
    )
    assert hints["settings"] is Settings
    assert hints["return"] is StrategyGate


def test_from_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("AUTOMOD_ALLOW_API", "false")
    gate = StrategyGate.from_settings(Settings())
    assert gate.allow_api is False
    assert gate.allow_brute_force is True
