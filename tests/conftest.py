"""
Shared fixtures for playback engine tests.
"""

import pytest

from backend.core.sequence_compiler import compile_routine
from domain.models import CompiledSequence, Routine
from tests.fakes.routines import make_routine


@pytest.fixture
def sample_routine() -> Routine:
    return make_routine()


@pytest.fixture
def sample_sequence(sample_routine) -> CompiledSequence:
    return compile_routine(sample_routine)
