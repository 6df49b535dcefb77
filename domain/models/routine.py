"""
Routine aggregate root.

A routine is an ordered list of blocks plus the rest between blocks.
Program customization lets a coach override time, reps and add a comment
per exercise when the routine is played as part of a program.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models.aptitude import AptitudeVector
from domain.models.block import Block


class Routine(BaseModel):
    """
    Aggregate root representing a playable routine.

    Examples:
        >>> from domain.models import Block, BlockExercise, ExerciseRef

        >>> routine = Routine(
        ...     name="Full body",
        ...     category="Funcional",
        ...     rest_between_blocks_seconds=60,
        ...     blocks=[
        ...         Block(
        ...             name="Bloque A",
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
        >>> routine.total_exercises
        1
    """

    id: Optional[str] = Field(default=None, description="Routine ID")
    name: str = Field(default="", description="Routine name")
    category: Optional[str] = Field(
        default=None,
        description="Category tag (e.g., 'Funcional', 'Kinesiología', 'Activación')",
    )
    rest_between_blocks_seconds: int = Field(
        default=0, description="Rest between consecutive blocks in seconds"
    )
    blocks: List[Block] = Field(default_factory=list, description="Blocks in play order")
    objective: Optional[AptitudeVector] = Field(
        default=None, description="Authored aptitude profile (1-10 per dimension)"
    )
    times_played: int = Field(default=0, description="Play counter")

    @property
    def total_exercises(self) -> int:
        """Count exercise slots across all blocks (one series each)."""
        return sum(block.exercise_count for block in self.blocks)

    @property
    def first_exercise_name(self) -> Optional[str]:
        """Name of the exercise shown on the pre-start screen."""
        if self.blocks and self.blocks[0].exercises:
            return self.blocks[0].exercises[0].name
        return None

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.name or 'Routine'} ({len(self.blocks)} blocks)"

    model_config = {"frozen": True}


class ExerciseOverride(BaseModel):
    """Per-exercise overrides applied when a routine is played in a program."""

    time_seconds: Optional[int] = None
    rep_count: Optional[int] = None
    comment: Optional[str] = None

    model_config = {"frozen": True}


class BlockCustomization(BaseModel):
    """Overrides for the exercises of one block, keyed by block-exercise ID."""

    exercises: Dict[str, ExerciseOverride] = Field(default_factory=dict)

    model_config = {"frozen": True}


class ProgramCustomization(BaseModel):
    """
    Program-level overrides keyed by block ID.

    Examples:
        >>> custom = ProgramCustomization(
        ...     blocks={"b1": {"exercises": {"be1": {"rep_count": 15}}}}
        ... )
        >>> custom.override_for("b1", "be1").rep_count
        15
    """

    blocks: Dict[str, BlockCustomization] = Field(default_factory=dict)

    def override_for(
        self, block_id: Optional[str], block_exercise_id: Optional[str]
    ) -> Optional[ExerciseOverride]:
        """Look up the override for an exercise slot, if any."""
        if block_id is None or block_exercise_id is None:
            return None
        block = self.blocks.get(block_id)
        if block is None:
            return None
        return block.exercises.get(block_exercise_id)

    model_config = {"frozen": True}
