"""
Exercise value objects for routine blocks.

An exercise inside a block is prescribed either by time or by repetitions.
The referenced library exercise (name, media, tips) is opaque to the
playback engine and is only carried through to steps for preview.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ExecutionType(str, Enum):
    """
    How a block exercise is prescribed.

    - TIME: performed for a fixed number of seconds
    - REPS: performed for a number of repetitions
    """

    TIME = "time"
    REPS = "reps"


class ExerciseRef(BaseModel):
    """
    Reference to a library exercise.

    Examples:
        >>> ref = ExerciseRef(id="ex-1", name="Sentadilla")
        >>> ref.has_media
        False
    """

    id: Optional[str] = Field(default=None, description="Library exercise ID")
    name: str = Field(default="", description="Exercise display name")
    video_url: Optional[str] = Field(default=None, description="Demo video URL")
    thumbnail_url: Optional[str] = Field(default=None, description="Thumbnail image URL")
    tips: Optional[str] = Field(default=None, description="Coaching tips")

    @property
    def has_media(self) -> bool:
        """Check if a video or thumbnail is available for preview."""
        return bool(self.video_url or self.thumbnail_url)

    model_config = {"frozen": True}


class BlockExercise(BaseModel):
    """
    Value object representing one exercise slot within a block.

    Durations are stored as authored. Negative or missing values are not
    rejected here; the sequence compiler clamps them to zero so that a
    badly authored routine can still be played to completion.

    Examples:
        >>> plank = BlockExercise(
        ...     exercise=ExerciseRef(name="Plancha"),
        ...     execution_type=ExecutionType.TIME,
        ...     time_seconds=30,
        ... )
        >>> plank.is_timed
        True

        >>> squat = BlockExercise(
        ...     exercise=ExerciseRef(name="Sentadilla"),
        ...     execution_type=ExecutionType.REPS,
        ...     rep_count=12,
        ... )
        >>> squat.is_rep_based
        True
    """

    id: Optional[str] = Field(default=None, description="Block-exercise slot ID")
    exercise: Optional[ExerciseRef] = Field(
        default=None, description="Referenced library exercise"
    )
    execution_type: ExecutionType = Field(
        default=ExecutionType.TIME,
        description="Whether the exercise is timed or counted in repetitions",
    )
    time_seconds: Optional[int] = Field(
        default=None, description="Work time in seconds (time execution)"
    )
    rep_count: Optional[int] = Field(
        default=None, description="Repetitions (reps execution)"
    )

    @property
    def is_timed(self) -> bool:
        """Check if this is a time-based exercise."""
        return self.execution_type == ExecutionType.TIME

    @property
    def is_rep_based(self) -> bool:
        """Check if this is a rep-based exercise."""
        return self.execution_type == ExecutionType.REPS

    @property
    def name(self) -> str:
        """Display name of the referenced exercise, empty if unset."""
        return self.exercise.name if self.exercise else ""

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.is_rep_based:
            return f"{self.name} x{self.rep_count or 0}"
        return f"{self.name} {self.time_seconds or 0}s"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "exercise": {"id": "ex-1", "name": "Plancha"},
                    "execution_type": "time",
                    "time_seconds": 30,
                },
                {
                    "exercise": {"id": "ex-2", "name": "Sentadilla"},
                    "execution_type": "reps",
                    "rep_count": 12,
                },
            ]
        },
    }
