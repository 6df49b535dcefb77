"""
ScoreAptitudes Use Case.

Reads a user's completed routines for the current week or month and turns
them into aptitude display scores.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

from application.ports import CompletedRoutinesRepository
from backend.core.aptitude_scoring import (
    DEFAULT_APTITUDE_CATEGORIES,
    apply_display_transform,
    calculate_raw_scores,
    filter_scoring_routines,
    goal_for_period,
    period_bounds,
)
from domain.models import AptitudeVector, ScoringPeriod

logger = logging.getLogger(__name__)


@dataclass
class ScoreAptitudesResult:
    """Result of the ScoreAptitudes use case execution."""

    period: ScoringPeriod
    start: date
    end: date
    scores: AptitudeVector
    completed_count: int = 0


class ScoreAptitudesUseCase:
    """
    Use case for the aptitude radar.

    Usage:
        >>> use_case = ScoreAptitudesUseCase(completed_repo=repo)
        >>> result = use_case.execute("user-123", weekly_goal=4, period=ScoringPeriod.MONTH)
        >>> result.scores.strength
    """

    def __init__(
        self,
        completed_repo: CompletedRoutinesRepository,
        *,
        categories: Sequence[str] = DEFAULT_APTITUDE_CATEGORIES,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._completed_repo = completed_repo
        self._categories = tuple(categories)
        self._today = today

    def execute(
        self,
        user_id: str,
        *,
        weekly_goal: int,
        period: ScoringPeriod = ScoringPeriod.WEEK,
        reference_date: Optional[date] = None,
    ) -> ScoreAptitudesResult:
        """
        Execute the scoring workflow.

        Args:
            user_id: User whose completions are scored
            weekly_goal: User's weekly routine goal
            period: WEEK or MONTH
            reference_date: Day inside the period (defaults to today)

        Returns:
            ScoreAptitudesResult with display scores and completion count
        """
        reference_date = reference_date or self._today()
        start, end = period_bounds(period, reference_date)

        completed = self._completed_repo.get_completed_routines(
            user_id, start=start, end=end
        )
        counted = filter_scoring_routines(completed, self._categories)

        goal = goal_for_period(weekly_goal, period, reference_date)
        scores = apply_display_transform(calculate_raw_scores(counted), goal)

        logger.info(
            f"Scored aptitudes for {user_id} ({period.value} {start}..{end}): "
            f"{len(counted)} of {len(completed)} completions counted"
        )

        return ScoreAptitudesResult(
            period=period,
            start=start,
            end=end,
            scores=scores,
            completed_count=len(counted),
        )
