"""
RecordCompletion Use Case.

Persists a finished workout: writes a completion record and bumps the
routine's play counter. Runs as the playback completion callback, so it
reports failures in its result instead of raising.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from application.ports import CompletionRepository
from domain.models import Routine

logger = logging.getLogger(__name__)


@dataclass
class RecordCompletionResult:
    """Result of the RecordCompletion use case execution."""

    success: bool
    completion_recorded: bool = False
    play_count_incremented: bool = False
    error: Optional[str] = None


class RecordCompletionUseCase:
    """
    Use case for recording a completed workout.

    Orchestrates the following workflow:
    1. Write the completion record (user, routine, date)
    2. Increment the routine's play counter

    Usage:
        >>> use_case = RecordCompletionUseCase(completion_repo=completion_repo)
        >>> player = WorkoutPlayer(
        ...     sequence,
        ...     scheduler=scheduler,
        ...     on_complete=use_case.as_callback("user-123", routine),
        ... )
    """

    def __init__(
        self,
        completion_repo: CompletionRepository,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            completion_repo: Repository for completion records
            today: Clock used to date the completion
        """
        self._completion_repo = completion_repo
        self._today = today

    def execute(
        self,
        user_id: Optional[str],
        routine: Routine,
        *,
        completed_on: Optional[date] = None,
    ) -> RecordCompletionResult:
        """
        Execute the record completion workflow.

        Args:
            user_id: User who finished the routine (None for anonymous play)
            routine: Routine that was played
            completed_on: Completion date (defaults to today)

        Returns:
            RecordCompletionResult with what was persisted
        """
        if not user_id or not routine.id:
            logger.info("Skipping completion record: missing user or routine id")
            return RecordCompletionResult(
                success=False,
                error="User and routine id are required to record a completion",
            )

        completed_on = completed_on or self._today()

        try:
            recorded = self._completion_repo.record_completion(
                user_id, routine, completed_on=completed_on
            )
            incremented = False
            if recorded:
                incremented = self._completion_repo.increment_play_count(
                    routine.id, current_count=routine.times_played
                )
        except Exception as e:
            logger.exception(f"Error saving workout completion for routine {routine.id}")
            return RecordCompletionResult(success=False, error=str(e))

        if not recorded:
            return RecordCompletionResult(
                success=False, error="Failed to save workout completion"
            )

        logger.info(f"Recorded completion of routine {routine.id} for user {user_id}")
        return RecordCompletionResult(
            success=True,
            completion_recorded=True,
            play_count_incremented=incremented,
        )

    def as_callback(self, user_id: Optional[str], routine: Routine) -> Callable[[], None]:
        """Bind user and routine into a zero-argument completion callback."""

        def _on_complete() -> None:
            self.execute(user_id, routine)

        return _on_complete
