"""Service test fixtures — stub collaborator bundle + legalizer.

Invariants:
    - Every test gets fresh stubs (call logs never shared between tests)
    - Default gate allows both strategies, matching the production default

Design Decisions:
    - Fixtures return the bundle too, so tests can reach into stub call logs
"""

import pytest

from automod.core.strategy_gate import StrategyGate
from automod.services.legalizer import Legalizer
from tests.services.stub_collaborators import make_collaborators


@pytest.fixture
def collaborators():
    return make_collaborators()


@pytest.fixture
def legalizer(collaborators):
    return Legalizer(collaborators, StrategyGate())
