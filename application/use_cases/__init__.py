"""
Application Use Cases for the workout playback engine.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import (
        RecordCompletionUseCase,
        ScoreAptitudesUseCase,
    )

    # Record a finished workout from the player's completion callback
    record = RecordCompletionUseCase(completion_repo=completion_repo)
    on_complete = record.as_callback(user_id="user-123", routine=routine)

    # Score the aptitude radar for the current month
    scoring = ScoreAptitudesUseCase(completed_repo=completed_repo)
    result = scoring.execute("user-123", weekly_goal=4, period=ScoringPeriod.MONTH)
"""

from application.use_cases.record_completion import (
    RecordCompletionResult,
    RecordCompletionUseCase,
)
from application.use_cases.score_aptitudes import (
    ScoreAptitudesResult,
    ScoreAptitudesUseCase,
)

__all__ = [
    "RecordCompletionUseCase",
    "RecordCompletionResult",
    "ScoreAptitudesUseCase",
    "ScoreAptitudesResult",
]
