"""
Audio cue signals emitted during playback.

The playback state machine only emits these values; turning them into
sound is the job of an injected cue player.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CueType(str, Enum):
    """
    Kinds of playback cues.

    - LOW_COUNTDOWN: remaining seconds reached 3, 2 or 1
    - STEP_START: an exercise step became current
    """

    LOW_COUNTDOWN = "low_countdown"
    STEP_START = "step_start"


# Remaining-second values that trigger a LOW_COUNTDOWN cue
LOW_COUNTDOWN_VALUES = (3, 2, 1)


@dataclass(frozen=True)
class CueSignal:
    """A single cue. ``value`` is the seconds left for LOW_COUNTDOWN."""

    type: CueType
    step_index: int
    value: Optional[int] = None

    @classmethod
    def low_countdown(cls, step_index: int, seconds: int) -> "CueSignal":
        return cls(type=CueType.LOW_COUNTDOWN, step_index=step_index, value=seconds)

    @classmethod
    def step_start(cls, step_index: int) -> "CueSignal":
        return cls(type=CueType.STEP_START, step_index=step_index)
