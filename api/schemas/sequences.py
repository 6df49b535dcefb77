"""
Schemas for the sequence compilation endpoint.

- CompileSequenceRequest: Request body for POST /sequences/compile
- CompileSequenceResponse: Compiled steps plus progress-dot metadata
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import ProgramCustomization, Routine, Step


class CompileSequenceRequest(BaseModel):
    """Request body for POST /sequences/compile."""
    routine: Routine = Field(..., description="Routine to compile")
    customization: Optional[ProgramCustomization] = Field(
        default=None,
        description="Program overrides (time, reps, comment) keyed by block and block-exercise ID",
    )


class CompileSequenceResponse(BaseModel):
    """Flat playback timeline."""
    steps: List[Step]
    total_steps: int
    total_exercise_steps: int
    exercise_steps_per_block: List[int]
    total_duration_seconds: int = Field(
        ..., description="Sum of step durations, countdown and rests included"
    )
