"""
Aptitude value objects.

Every routine is authored with an objective profile: eight physical
aptitudes each scored 1-10. The same shape carries the bounded display
scores produced by the aptitude scoring engine.
"""

from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field


APTITUDE_KEYS: Tuple[str, ...] = (
    "strength",
    "power",
    "agility",
    "coordination",
    "stability",
    "speed",
    "endurance",
    "mobility",
)


class ScoringPeriod(str, Enum):
    """Time window used for goal normalization."""

    WEEK = "week"
    MONTH = "month"


class AptitudeVector(BaseModel):
    """
    Eight-dimension aptitude profile.

    Used both for authored objectives (1-10 per dimension) and for
    display scores (bounded to [sqrt(0.15), 1]), so values are floats
    and carry no range constraint here.

    Examples:
        >>> vec = AptitudeVector(strength=8, endurance=6)
        >>> vec.as_dict()["strength"]
        8.0
    """

    strength: float = 0.0
    power: float = 0.0
    agility: float = 0.0
    coordination: float = 0.0
    stability: float = 0.0
    speed: float = 0.0
    endurance: float = 0.0
    mobility: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "AptitudeVector":
        """Build a vector with the same value in every dimension."""
        return cls(**{key: value for key in APTITUDE_KEYS})

    def as_dict(self) -> Dict[str, float]:
        """Return the dimensions in canonical order."""
        return {key: getattr(self, key) for key in APTITUDE_KEYS}

    model_config = {"frozen": True}


class CompletedRoutine(BaseModel):
    """
    One completed workout as seen by the scoring engine.

    A routine completed twice in a period appears twice.
    """

    routine_id: Optional[str] = None
    category: Optional[str] = Field(default=None, description="Routine category tag")
    objective: Optional[AptitudeVector] = Field(
        default=None, description="Authored objective profile of the routine"
    )
    completed_on: Optional[date] = None

    model_config = {"frozen": True}
