"""
Supabase Completion Repository Implementation.

This module implements the CompletionRepository protocol using Supabase as
the backend. A completion is stored as a completed training event in
``user_events``; the play counter lives on the ``routines`` row.
"""
from datetime import date
from typing import Optional, Dict, Any
from supabase import Client
import logging

from domain.models import Routine

logger = logging.getLogger(__name__)

EVENTS_TABLE = "user_events"
ROUTINES_TABLE = "routines"

TRAINING_EVENT_TYPE = "entrenamiento"
COMPLETED_STATUS = "completed"

# Input validation limits
MAX_STRING_LENGTH = 1000


# ============================================================================
# Helper Functions (stateless utilities)
# ============================================================================

def validate_string_field(value: Optional[str], field_name: str) -> Optional[str]:
    """Validate and truncate string field to max length."""
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning(f"{field_name} must be a string, got {type(value)}")
        return None
    if len(value) > MAX_STRING_LENGTH:
        logger.warning(f"{field_name} exceeds {MAX_STRING_LENGTH} chars, truncating")
        return value[:MAX_STRING_LENGTH]
    return value


def build_completion_event(user_id: str, routine: Routine, completed_on: date) -> Dict[str, Any]:
    """Build the ``user_events`` row for a completed routine."""
    return {
        "user_id": user_id,
        "type": TRAINING_EVENT_TYPE,
        "event_date": completed_on.isoformat(),
        "status": COMPLETED_STATUS,
        "title": validate_string_field(routine.name, "title"),
        "metadata": {
            "routine_id": routine.id,
            "routine_name": validate_string_field(routine.name, "routine_name"),
            "routine_category": validate_string_field(routine.category, "routine_category"),
        },
    }


# ============================================================================
# Repository
# ============================================================================

class SupabaseCompletionRepository:
    """
    Supabase implementation of CompletionRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def record_completion(
        self,
        user_id: str,
        routine: Routine,
        *,
        completed_on: date,
    ) -> bool:
        """Insert a completed training event for the routine."""
        try:
            data = build_completion_event(user_id, routine, completed_on)
            result = self._client.table(EVENTS_TABLE).insert(data).execute()

            if result.data:
                logger.info(f"Completion saved for routine {routine.id} (user {user_id})")
                return True
            logger.error(f"Completion insert for routine {routine.id} returned no data")
            return False
        except Exception as e:
            logger.error(f"Error saving workout completion for routine {routine.id}: {e}")
            return False

    def increment_play_count(
        self,
        routine_id: str,
        *,
        current_count: int = 0,
    ) -> bool:
        """Set the routine's play counter to ``current_count + 1``."""
        try:
            result = self._client.table(ROUTINES_TABLE) \
                .update({"veces_realizada": (current_count or 0) + 1}) \
                .eq("id", routine_id) \
                .execute()

            if result.data:
                logger.info(f"Routine {routine_id} play count updated to {(current_count or 0) + 1}")
                return True
            return False
        except Exception as e:
            logger.error(f"Failed to increment play count for routine {routine_id}: {e}")
            return False
