"""Audio cue service for workout playback.

Owns the cue player for one playback session. The state machine decides
which cues fire; this service only plays them, and a failing speaker never
interrupts the workout.
"""

from typing import Iterable, Optional, TextIO
import logging
import sys

from application.ports import CuePlayer
from domain.models import CueSignal, CueType

logger = logging.getLogger(__name__)


# Tone parameters per cue (frequency Hz, duration s, gain)
BUZZER_TONE = (800, 0.2, 0.3)
BEEP_TONE = (1200, 0.15, 0.4)


def tone_for(cue: CueSignal) -> tuple:
    """Return the (frequency, duration, gain) tone for a cue."""
    if cue.type == CueType.STEP_START:
        return BEEP_TONE
    return BUZZER_TONE


class LoggingCuePlayer:
    """Cue player that only logs. Used when no audio device is available."""

    def play(self, cue: CueSignal) -> None:
        frequency, duration, _ = tone_for(cue)
        logger.info(f"Cue {cue.type.value} ({cue.value}) at step {cue.step_index}: {frequency}Hz/{duration}s")


class TerminalCuePlayer:
    """Cue player that rings the terminal bell and prints a short marker."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def play(self, cue: CueSignal) -> None:
        if cue.type == CueType.STEP_START:
            marker = "GO!"
        else:
            marker = f"{cue.value}..."
        self._stream.write(f"\a{marker}\n")
        self._stream.flush()


class AudioCueService:
    """Service that dispatches playback cues to an injected cue player."""

    def __init__(self, player: Optional[CuePlayer] = None, *, muted: bool = False):
        """Initialize the cue service.

        Args:
            player: Cue player to drive (defaults to LoggingCuePlayer)
            muted: Start muted
        """
        self._player = player or LoggingCuePlayer()
        self.muted = muted

    def handle(self, cues: Iterable[CueSignal]) -> int:
        """Play a batch of cues in order.

        Args:
            cues: Cues emitted by one state transition

        Returns:
            Number of cues played successfully
        """
        if self.muted:
            return 0

        played = 0
        for cue in cues:
            try:
                self._player.play(cue)
                played += 1
            except Exception as e:
                logger.warning(f"Could not play {cue.type.value} cue: {e}")
        return played
