"""
Fake Completion Repository for testing.

This module provides an in-memory implementation of CompletionRepository
for fast, isolated testing without database dependencies.
"""
from datetime import date
from typing import Any, Dict, List

from domain.models import Routine


class FakeCompletionRepository:
    """
    In-memory fake implementation of CompletionRepository for testing.

    Usage:
        repo = FakeCompletionRepository()
        repo.record_completion("user1", routine, completed_on=date.today())
        assert repo.get_all()[0]["routine_id"] == routine.id
    """

    def __init__(self, *, fail_record: bool = False, raise_on_record: bool = False):
        """
        Initialize with empty storage.

        Args:
            fail_record: record_completion returns False (simulates a DB error)
            raise_on_record: record_completion raises RuntimeError
        """
        self._completions: List[Dict[str, Any]] = []
        self._play_counts: Dict[str, int] = {}
        self.fail_record = fail_record
        self.raise_on_record = raise_on_record

    def reset(self) -> None:
        """Clear all stored completions and play counts."""
        self._completions.clear()
        self._play_counts.clear()

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored completions (test helper)."""
        return list(self._completions)

    def play_count(self, routine_id: str) -> int:
        """Get the stored play count for a routine (test helper)."""
        return self._play_counts.get(routine_id, 0)

    # =========================================================================
    # CompletionRepository Protocol Methods
    # =========================================================================

    def record_completion(
        self,
        user_id: str,
        routine: Routine,
        *,
        completed_on: date,
    ) -> bool:
        if self.raise_on_record:
            raise RuntimeError("database unavailable")
        if self.fail_record:
            return False
        self._completions.append({
            "user_id": user_id,
            "routine_id": routine.id,
            "routine_name": routine.name,
            "routine_category": routine.category,
            "completed_on": completed_on,
        })
        return True

    def increment_play_count(
        self,
        routine_id: str,
        *,
        current_count: int = 0,
    ) -> bool:
        self._play_counts[routine_id] = (current_count or 0) + 1
        return True
