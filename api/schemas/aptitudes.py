"""
Schemas for the aptitude radar endpoint.
"""

from datetime import date

from pydantic import BaseModel, Field

from domain.models import AptitudeVector, ScoringPeriod


class AptitudeScoresResponse(BaseModel):
    """Response body for GET /aptitudes."""
    period: ScoringPeriod
    start: date
    end: date
    weekly_goal: int
    completed_count: int = Field(
        ..., description="Completed routines in the period that counted toward scores"
    )
    scores: AptitudeVector
