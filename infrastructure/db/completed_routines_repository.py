"""
Supabase implementation of CompletedRoutinesRepository.

Completed training events are read from ``user_events``; each event's
routine is then looked up in ``routines`` for its category and objective
vector. One CompletedRoutine is returned per event, so a routine completed
twice counts twice.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from supabase import Client

from domain.models import AptitudeVector, CompletedRoutine

logger = logging.getLogger(__name__)

EVENTS_TABLE = "user_events"
ROUTINES_TABLE = "routines"

# Stored objective keys -> AptitudeVector fields
OBJECTIVE_FIELD_MAP = {
    "fuerza": "strength",
    "potencia": "power",
    "agilidad": "agility",
    "coordinacion": "coordination",
    "estabilidad": "stability",
    "velocidad": "speed",
    "resistencia": "endurance",
    "movilidad": "mobility",
}


def objective_from_row(objective: Optional[Dict[str, Any]]) -> Optional[AptitudeVector]:
    """Convert a stored ``objetivo`` JSON object to an AptitudeVector."""
    if not objective or not isinstance(objective, dict):
        return None
    values = {}
    for stored_key, field_name in OBJECTIVE_FIELD_MAP.items():
        value = objective.get(stored_key, objective.get(field_name))
        try:
            values[field_name] = float(value) if value is not None else 0.0
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric objective value {stored_key}={value!r}")
            values[field_name] = 0.0
    return AptitudeVector(**values)


class SupabaseCompletedRoutinesRepository:
    """
    Supabase implementation of CompletedRoutinesRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_completed_routines(
        self,
        user_id: str,
        *,
        start: date,
        end: date,
    ) -> List[CompletedRoutine]:
        """Get completed routines in [start, end] with category and objective."""
        try:
            events_result = self._client.table(EVENTS_TABLE) \
                .select("id, event_date, metadata") \
                .eq("user_id", user_id) \
                .eq("type", "entrenamiento") \
                .eq("status", "completed") \
                .gte("event_date", start.isoformat()) \
                .lte("event_date", end.isoformat()) \
                .execute()

            events = events_result.data or []
            routine_ids = list(dict.fromkeys(
                (e.get("metadata") or {}).get("routine_id")
                for e in events
                if (e.get("metadata") or {}).get("routine_id")
            ))
            if not routine_ids:
                return []

            routines_result = self._client.table(ROUTINES_TABLE) \
                .select("id, objetivo, categoria") \
                .in_("id", routine_ids) \
                .execute()

            routines = {r["id"]: r for r in (routines_result.data or [])}

            completed = []
            for event in events:
                routine_id = (event.get("metadata") or {}).get("routine_id")
                routine = routines.get(routine_id)
                if routine is None:
                    continue
                event_date = event.get("event_date")
                completed.append(CompletedRoutine(
                    routine_id=routine_id,
                    category=routine.get("categoria"),
                    objective=objective_from_row(routine.get("objetivo")),
                    completed_on=date.fromisoformat(event_date[:10]) if event_date else None,
                ))

            return completed
        except Exception as e:
            logger.error(f"Failed to get completed routines for {user_id}: {e}")
            return []
