"""
Block value object for routine structure.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import BlockExercise


class Block(BaseModel):
    """
    Value object representing a block of exercises within a routine.

    A block is played once per series. When ``repeat_block`` is False the
    block runs a single time regardless of ``series``.

    Examples:
        >>> block = Block(
        ...     name="Bloque principal",
        ...     series=3,
        ...     repeat_block=True,
        ...     rest_between_exercises_seconds=15,
        ...     rest_between_series_seconds=60,
        ...     exercises=[
        ...         BlockExercise(execution_type="reps", rep_count=10),
        ...         BlockExercise(execution_type="time", time_seconds=30),
        ...     ],
        ... )
        >>> block.effective_series
        3
        >>> block.series_rest_seconds
        60
    """

    id: Optional[str] = Field(default=None, description="Block ID")
    name: str = Field(default="", description="Block name (e.g., 'Calentamiento')")
    order: int = Field(default=0, description="Display order within the routine")
    series: int = Field(
        default=1, description="Number of series when the block repeats"
    )
    repeat_block: bool = Field(
        default=False,
        description="Whether the block repeats for `series` passes",
    )
    rest_between_exercises_seconds: int = Field(
        default=0, description="Rest between consecutive exercises in seconds"
    )
    rest_between_series_seconds: int = Field(
        default=0, description="Rest between series in seconds"
    )
    use_same_rest_for_series: bool = Field(
        default=False,
        description="Use the between-exercises rest between series as well",
    )
    exercises: List[BlockExercise] = Field(
        default_factory=list, description="Exercises in play order"
    )

    @field_validator("series", mode="before")
    @classmethod
    def normalize_series(cls, v) -> int:
        """A block always runs at least one series."""
        if v is None:
            return 1
        return max(1, int(v))

    @property
    def effective_series(self) -> int:
        """Number of passes the block actually makes."""
        return self.series if self.repeat_block else 1

    @property
    def series_rest_seconds(self) -> int:
        """Rest used between two series of this block."""
        if self.use_same_rest_for_series:
            return self.rest_between_exercises_seconds
        return self.rest_between_series_seconds

    @property
    def exercise_count(self) -> int:
        """Number of exercises in one series."""
        return len(self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        """Exercise names in order."""
        return [ex.name for ex in self.exercises]

    def __str__(self) -> str:
        """Human-readable string representation."""
        parts = [self.name or "Block"]
        if self.effective_series > 1:
            parts.append(f"x{self.effective_series} series")

        exercise_str = ", ".join(self.exercise_names[:3])
        if len(self.exercises) > 3:
            exercise_str += f" (+{len(self.exercises) - 3} more)"
        parts.append(f"[{exercise_str}]")

        return " ".join(parts)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Bloque A",
                    "series": 3,
                    "repeat_block": True,
                    "rest_between_exercises_seconds": 15,
                    "rest_between_series_seconds": 45,
                    "exercises": [
                        {
                            "exercise": {"name": "Burpees"},
                            "execution_type": "reps",
                            "rep_count": 10,
                        },
                    ],
                },
            ]
        },
    }
