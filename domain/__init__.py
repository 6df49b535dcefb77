"""
Domain layer for the workout playback engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    AptitudeVector,
    Block,
    BlockExercise,
    CompiledSequence,
    CompletedRoutine,
    ExecutionType,
    ExerciseRef,
    ProgramCustomization,
    Routine,
    ScoringPeriod,
    Step,
    StepType,
)

__all__ = [
    "AptitudeVector",
    "Block",
    "BlockExercise",
    "CompiledSequence",
    "CompletedRoutine",
    "ExecutionType",
    "ExerciseRef",
    "ProgramCustomization",
    "Routine",
    "ScoringPeriod",
    "Step",
    "StepType",
]
