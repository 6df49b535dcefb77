"""
Domain models for the workout playback engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Routine: The aggregate root containing blocks of exercises
- Block: A group of exercises repeated for one or more series
- BlockExercise: A timed or rep-based exercise slot
- Step: One unit of the compiled playback timeline
- AptitudeVector: The eight-dimension aptitude profile

Usage:
    >>> from domain.models import Routine, Block, BlockExercise, ExerciseRef

    >>> routine = Routine(
    ...     name="Core",
    ...     blocks=[
    ...         Block(
    ...             name="Bloque 1",
    ...             exercises=[
    ...                 BlockExercise(
    ...                     exercise=ExerciseRef(name="Plancha"),
    ...                     execution_type="time",
    ...                     time_seconds=30,
    ...                 )
    ...             ],
    ...         )
    ...     ],
    ... )

    >>> # Deserialize from JSON
    >>> routine = Routine.model_validate_json(routine.model_dump_json())
"""

from domain.models.aptitude import (
    APTITUDE_KEYS,
    AptitudeVector,
    CompletedRoutine,
    ScoringPeriod,
)
from domain.models.block import Block
from domain.models.cue import LOW_COUNTDOWN_VALUES, CueSignal, CueType
from domain.models.exercise import BlockExercise, ExecutionType, ExerciseRef
from domain.models.routine import (
    BlockCustomization,
    ExerciseOverride,
    ProgramCustomization,
    Routine,
)
from domain.models.step import CompiledSequence, Step, StepType

__all__ = [
    # Main entities
    "Routine",
    "Block",
    "BlockExercise",
    "ExerciseRef",
    "Step",
    "CompiledSequence",
    "AptitudeVector",
    "CompletedRoutine",
    "CueSignal",
    # Program customization
    "ProgramCustomization",
    "BlockCustomization",
    "ExerciseOverride",
    # Enums and constants
    "ExecutionType",
    "StepType",
    "ScoringPeriod",
    "CueType",
    "APTITUDE_KEYS",
    "LOW_COUNTDOWN_VALUES",
]
