"""
Completed Routines Repository Interface (Port).

Read-only source of completed workouts used by aptitude scoring.
"""
from typing import Protocol, List
from datetime import date

from domain.models import CompletedRoutine


class CompletedRoutinesRepository(Protocol):
    """
    Abstract interface for querying completed routines with their objectives.
    """

    def get_completed_routines(
        self,
        user_id: str,
        *,
        start: date,
        end: date,
    ) -> List[CompletedRoutine]:
        """
        Get the routines a user completed within a date range.

        A routine completed several times appears once per completion.

        Args:
            user_id: User ID
            start: First day of the range (inclusive)
            end: Last day of the range (inclusive)

        Returns:
            Completed routines with category and objective vector
        """
        ...
