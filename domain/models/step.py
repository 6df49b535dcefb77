"""
Compiled playback steps.

A step is one timed unit of the flat playback timeline produced by the
sequence compiler. Steps are immutable once produced.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.exercise import ExecutionType, ExerciseRef


class StepType(str, Enum):
    """
    Kinds of playback steps.

    - COUNTDOWN: the single preamble before the first exercise
    - EXERCISE: work interval
    - REST_EXERCISE: rest between exercises of the same series
    - REST_SERIES: rest between two series of a block
    - REST_BLOCK: rest between two blocks
    - COMPLETE: terminal step, duration 0
    """

    COUNTDOWN = "countdown"
    EXERCISE = "exercise"
    REST_EXERCISE = "rest-exercise"
    REST_SERIES = "rest-series"
    REST_BLOCK = "rest-block"
    COMPLETE = "complete"

    @property
    def is_rest(self) -> bool:
        return self.value.startswith("rest")


class Step(BaseModel):
    """
    One compiled, ordered unit of playback.

    Positional fields describe where the step sits in the routine. For
    rest steps they describe the position of the upcoming exercise, so a
    rest-block step carries the next block's index, name and series total.
    """

    type: StepType
    block_index: int = 0
    block_name: str = ""
    series_index: int = Field(default=1, description="Current series (1-based)")
    total_series: int = 1
    exercise_index: int = 0
    total_exercises: int = 0
    duration_seconds: int = 0

    exercise: Optional[ExerciseRef] = Field(
        default=None, description="Exercise being performed (exercise, countdown)"
    )
    next_exercise: Optional[ExerciseRef] = Field(
        default=None, description="Upcoming exercise shown during rests"
    )
    execution_type: Optional[ExecutionType] = None
    rep_count: Optional[int] = None
    comment: Optional[str] = Field(
        default=None, description="Program comment for this exercise"
    )

    @property
    def is_exercise(self) -> bool:
        return self.type == StepType.EXERCISE

    @property
    def is_rest(self) -> bool:
        return self.type.is_rest

    @property
    def preview(self) -> Optional[ExerciseRef]:
        """Exercise to show on screen: the current one, or the next one during rests."""
        return self.exercise or self.next_exercise

    model_config = {"frozen": True}


class CompiledSequence(BaseModel):
    """
    Output of the sequence compiler.

    ``exercise_steps_per_block`` and ``total_exercise_steps`` drive the
    progress dots and are computed once at compile time.
    """

    steps: List[Step]
    total_exercise_steps: int = 0
    exercise_steps_per_block: List[int] = Field(default_factory=list)

    model_config = {"frozen": True}
