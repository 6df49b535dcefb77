"""
Sequences router for routine compilation.

This router contains endpoints for:
- /sequences/compile - Flatten a routine into its playback timeline

Compilation is pure and needs no database, so this endpoint stays
available when Supabase is not configured.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_settings
from api.schemas import CompileSequenceRequest, CompileSequenceResponse
from backend.core.sequence_compiler import compile_routine, per_rep_estimator
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sequences",
    tags=["Sequences"],
)


@router.post("/compile", response_model=CompileSequenceResponse)
def compile_sequence_endpoint(
    request: CompileSequenceRequest,
    user_id: str = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    """
    Compile a routine into countdown, exercise, rest and complete steps.

    Args:
        request: Routine and optional program customization
        user_id: Authenticated user ID (from API key)

    Returns:
        Steps plus progress-dot totals
    """
    sequence = compile_routine(
        request.routine,
        request.customization,
        countdown_seconds=settings.countdown_seconds,
        rep_duration=per_rep_estimator(settings.seconds_per_rep),
    )

    logger.info(
        f"Compiled routine {request.routine.id or request.routine.name!r} for {user_id}: "
        f"{len(sequence.steps)} steps"
    )

    return CompileSequenceResponse(
        steps=sequence.steps,
        total_steps=len(sequence.steps),
        total_exercise_steps=sequence.total_exercise_steps,
        exercise_steps_per_block=sequence.exercise_steps_per_block,
        total_duration_seconds=sum(step.duration_seconds for step in sequence.steps),
    )
