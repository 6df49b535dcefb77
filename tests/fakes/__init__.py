"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the port interfaces
for fast, isolated testing. No database, audio device or timer thread required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation

Usage:
    from tests.fakes import FakeCompletionRepository, ManualScheduler

    scheduler = ManualScheduler()
    player = WorkoutPlayer(sequence, scheduler=scheduler)
    player.start()
    scheduler.fire()
"""

from tests.fakes.completion_repository import FakeCompletionRepository
from tests.fakes.completed_routines_repository import FakeCompletedRoutinesRepository
from tests.fakes.routines import SAMPLE_TOTAL_SECONDS, make_routine, make_steps
from tests.fakes.playback import (
    FakeNavigator,
    ManualHandle,
    ManualScheduler,
    RecordingCuePlayer,
)

__all__ = [
    "FakeCompletionRepository",
    "FakeCompletedRoutinesRepository",
    "FakeNavigator",
    "ManualHandle",
    "ManualScheduler",
    "RecordingCuePlayer",
    "make_routine",
    "make_steps",
    "SAMPLE_TOTAL_SECONDS",
]
