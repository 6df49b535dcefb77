"""
Aptitudes router for the aptitude radar.

This router contains endpoints for:
- /aptitudes - Display scores for the current week or month
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_completed_routines_repo, get_current_user, get_settings
from api.schemas import AptitudeScoresResponse
from application.ports import CompletedRoutinesRepository
from application.use_cases import ScoreAptitudesUseCase
from backend.settings import Settings
from domain.models import ScoringPeriod

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Aptitudes"],
)


@router.get("/aptitudes", response_model=AptitudeScoresResponse)
def get_aptitudes_endpoint(
    period: ScoringPeriod = Query(ScoringPeriod.WEEK, description="week or month"),
    weekly_goal: Optional[int] = Query(
        None, ge=0, description="Weekly routine goal; defaults to the configured goal"
    ),
    user_id: str = Depends(get_current_user),
    completed_repo: CompletedRoutinesRepository = Depends(get_completed_routines_repo),
    settings: Settings = Depends(get_settings),
):
    """
    Score the authenticated user's aptitudes for the current period.

    A weekly goal of 0 is treated as 1 by the scoring engine.

    Returns:
        Period bounds, counted completions and the eight display scores
    """
    goal = settings.default_weekly_goal if weekly_goal is None else weekly_goal

    use_case = ScoreAptitudesUseCase(
        completed_repo=completed_repo,
        categories=settings.aptitude_categories_list,
    )
    result = use_case.execute(user_id, weekly_goal=goal, period=period)

    return AptitudeScoresResponse(
        period=result.period,
        start=result.start,
        end=result.end,
        weekly_goal=goal,
        completed_count=result.completed_count,
        scores=result.scores,
    )
