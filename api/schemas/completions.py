"""
Schemas for the routine completion endpoint.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from domain.models import Routine


class RecordCompletionRequest(BaseModel):
    """Request body for POST /routines/{routine_id}/completions."""
    routine: Routine
    completed_on: Optional[date] = Field(
        None, description="Completion date; defaults to today"
    )


class RecordCompletionResponse(BaseModel):
    """Response body for POST /routines/{routine_id}/completions."""
    success: bool
    routine_id: str
    completion_recorded: bool = False
    play_count_incremented: bool = False
    message: Optional[str] = None
