"""
Sequence Compiler for routine playback.

Flattens a nested routine (blocks -> series -> exercises) into an ordered
list of timed steps:
- One countdown preamble before the first exercise
- Exercise steps, with rep-based exercises paced by a fixed per-rep estimate
- Rests between exercises, between series and between blocks
- One terminal complete step

Also computes the progress-dot metadata once, at compile time.

The compiler is a pure function: no state, no clock, no I/O.
"""
from typing import Callable, List, Optional, Tuple
import logging

from domain.models import (
    Block,
    BlockExercise,
    CompiledSequence,
    ExecutionType,
    ExerciseRef,
    ProgramCustomization,
    Routine,
    Step,
    StepType,
)

logger = logging.getLogger(__name__)


# Preamble before the first exercise of the routine
COUNTDOWN_SECONDS = 5

# Pacing estimate for rep-based exercises. The timer runs on this estimate;
# actual repetitions are not sensed.
SECONDS_PER_REP = 3


RepDurationEstimator = Callable[[int], int]


def fixed_rep_duration(rep_count: int, seconds_per_rep: int = SECONDS_PER_REP) -> int:
    """
    Estimate the duration of a rep-based exercise.

    Args:
        rep_count: Number of repetitions
        seconds_per_rep: Seconds allotted to each repetition

    Returns:
        Duration in seconds, never negative
    """
    return _non_negative(rep_count) * seconds_per_rep


def per_rep_estimator(seconds_per_rep: int) -> RepDurationEstimator:
    """Build a rep estimator with a custom per-repetition time."""
    return lambda rep_count: fixed_rep_duration(rep_count, seconds_per_rep)


# =============================================================================
# Helpers
# =============================================================================


def _non_negative(value: Optional[int]) -> int:
    """Normalize a missing or negative duration to 0."""
    if value is None or value < 0:
        return 0
    return int(value)


def _resolve_prescription(
    block: Block,
    block_exercise: BlockExercise,
    customization: Optional[ProgramCustomization],
) -> Tuple[Optional[int], Optional[int], Optional[str]]:
    """Apply program overrides to an exercise's time, reps and comment."""
    time_seconds = block_exercise.time_seconds
    rep_count = block_exercise.rep_count
    comment = None

    if customization is not None:
        override = customization.override_for(block.id, block_exercise.id)
        if override is not None:
            if override.time_seconds is not None:
                time_seconds = override.time_seconds
            if override.rep_count is not None:
                rep_count = override.rep_count
            comment = override.comment or None

    return time_seconds, rep_count, comment


def _first_exercise(block: Optional[Block]) -> Optional[ExerciseRef]:
    if block is None or not block.exercises:
        return None
    return block.exercises[0].exercise


# =============================================================================
# Progress dots
# =============================================================================


def calculate_progress_dots(routine: Routine) -> Tuple[int, List[int]]:
    """
    Count exercise steps per block and in total.

    Each block contributes one dot per exercise per effective series.

    Returns:
        Tuple of (total, per-block list)
    """
    by_block = [block.exercise_count * block.effective_series for block in routine.blocks]
    return sum(by_block), by_block


def current_dot_index(steps: List[Step], step_index: int) -> int:
    """
    Return the 0-based dot index for the step at ``step_index``.

    The index advances only on exercise steps, so rests keep showing the
    dot of the exercise just finished. Before the first exercise it is -1.
    """
    dots = 0
    for step in steps[: step_index + 1]:
        if step.type == StepType.EXERCISE:
            dots += 1
    return dots - 1


# =============================================================================
# Compiler
# =============================================================================


def compile_routine(
    routine: Routine,
    customization: Optional[ProgramCustomization] = None,
    *,
    countdown_seconds: int = COUNTDOWN_SECONDS,
    rep_duration: RepDurationEstimator = fixed_rep_duration,
) -> CompiledSequence:
    """
    Compile a routine into its flat playback timeline.

    Args:
        routine: Routine to compile
        customization: Optional program overrides (time, reps, comment)
        countdown_seconds: Length of the preamble countdown
        rep_duration: Strategy mapping a rep count to seconds

    Returns:
        CompiledSequence with steps and progress metadata
    """
    steps: List[Step] = []
    blocks = routine.blocks
    countdown_emitted = False

    for block_index, block in enumerate(blocks):
        exercises = block.exercises
        total_series = block.effective_series
        total_exercises = len(exercises)
        is_last_block = block_index == len(blocks) - 1

        position = {
            "block_index": block_index,
            "block_name": block.name,
            "total_series": total_series,
            "total_exercises": total_exercises,
        }

        for series_index in range(1, total_series + 1):
            for exercise_index, block_exercise in enumerate(exercises):
                is_last_exercise = exercise_index == total_exercises - 1
                time_seconds, rep_count, comment = _resolve_prescription(
                    block, block_exercise, customization
                )

                if not countdown_emitted:
                    steps.append(Step(
                        type=StepType.COUNTDOWN,
                        series_index=series_index,
                        exercise_index=exercise_index,
                        exercise=block_exercise.exercise,
                        duration_seconds=_non_negative(countdown_seconds),
                        comment=comment,
                        **position,
                    ))
                    countdown_emitted = True

                if block_exercise.execution_type == ExecutionType.TIME:
                    duration = _non_negative(time_seconds)
                else:
                    duration = _non_negative(rep_duration(_non_negative(rep_count)))

                steps.append(Step(
                    type=StepType.EXERCISE,
                    series_index=series_index,
                    exercise_index=exercise_index,
                    exercise=block_exercise.exercise,
                    duration_seconds=duration,
                    execution_type=block_exercise.execution_type,
                    rep_count=rep_count,
                    comment=comment,
                    **position,
                ))

                if not is_last_exercise:
                    steps.append(Step(
                        type=StepType.REST_EXERCISE,
                        series_index=series_index,
                        exercise_index=exercise_index + 1,
                        next_exercise=exercises[exercise_index + 1].exercise,
                        duration_seconds=_non_negative(block.rest_between_exercises_seconds),
                        **position,
                    ))
                elif series_index < total_series:
                    steps.append(Step(
                        type=StepType.REST_SERIES,
                        series_index=series_index + 1,
                        exercise_index=0,
                        next_exercise=exercises[0].exercise,
                        duration_seconds=_non_negative(block.series_rest_seconds),
                        **position,
                    ))

        if not is_last_block:
            next_block = blocks[block_index + 1]
            steps.append(Step(
                type=StepType.REST_BLOCK,
                block_index=block_index + 1,
                block_name=next_block.name,
                series_index=1,
                total_series=next_block.effective_series,
                exercise_index=0,
                total_exercises=next_block.exercise_count,
                next_exercise=_first_exercise(next_block),
                duration_seconds=_non_negative(routine.rest_between_blocks_seconds),
            ))

    steps.append(Step(
        type=StepType.COMPLETE,
        block_index=max(len(blocks) - 1, 0),
        duration_seconds=0,
    ))

    total, by_block = calculate_progress_dots(routine)

    logger.debug(
        "Compiled routine '%s': %d steps, %d exercise steps across %d blocks",
        routine.name,
        len(steps),
        total,
        len(blocks),
    )

    return CompiledSequence(
        steps=steps,
        total_exercise_steps=total,
        exercise_steps_per_block=by_block,
    )
