"""
Completions router for finished routines.

This router contains endpoints for:
- /routines/{routine_id}/completions - Record a completed routine and bump its play count
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_completion_repo, get_current_user
from api.schemas import RecordCompletionRequest, RecordCompletionResponse
from application.ports import CompletionRepository
from application.use_cases import RecordCompletionUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Completions"],
)


@router.post("/routines/{routine_id}/completions", response_model=RecordCompletionResponse)
def record_routine_completion_endpoint(
    routine_id: str,
    request: RecordCompletionRequest,
    user_id: str = Depends(get_current_user),
    completion_repo: CompletionRepository = Depends(get_completion_repo),
):
    """
    Record that the authenticated user finished a routine.

    The path id wins over any id in the body. Persistence failures are
    reported in the body with success=False, not as an HTTP error.

    Returns:
        What was persisted and an error message when nothing was
    """
    routine = request.routine.model_copy(update={"id": routine_id})

    use_case = RecordCompletionUseCase(completion_repo=completion_repo)
    result = use_case.execute(user_id, routine, completed_on=request.completed_on)

    if not result.success:
        logger.warning(f"Completion of routine {routine_id} not recorded: {result.error}")

    return RecordCompletionResponse(
        success=result.success,
        routine_id=routine_id,
        completion_recorded=result.completion_recorded,
        play_count_incremented=result.play_count_incremented,
        message=result.error,
    )
