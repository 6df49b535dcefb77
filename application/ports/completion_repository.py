"""
Completion Repository Interface (Port).

This module defines the abstract interface for recording finished workouts.
It is invoked once from the playback completion callback.
"""
from typing import Protocol
from datetime import date

from domain.models import Routine


class CompletionRepository(Protocol):
    """
    Abstract interface for workout completion persistence.

    Implementations log their own failures and report them through the
    return value; they must not raise into the playback engine.
    """

    def record_completion(
        self,
        user_id: str,
        routine: Routine,
        *,
        completed_on: date,
    ) -> bool:
        """
        Record that a user finished a routine.

        Args:
            user_id: User who completed the routine
            routine: The routine that was played
            completed_on: Calendar date of completion

        Returns:
            True if the record was stored
        """
        ...

    def increment_play_count(
        self,
        routine_id: str,
        *,
        current_count: int = 0,
    ) -> bool:
        """
        Increment a routine's play counter.

        Args:
            routine_id: Routine ID
            current_count: Counter value known to the caller

        Returns:
            True if the counter was updated
        """
        ...
