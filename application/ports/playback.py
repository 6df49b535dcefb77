"""
Playback Collaborator Interfaces (Ports).

Side-effecting collaborators driven by the workout player:
- Navigator: leaves the workout screen when the user exits
- CuePlayer: turns cue signals into sound
"""
from typing import Protocol

from domain.models import CueSignal


class Navigator(Protocol):
    """Navigation collaborator invoked from exit()."""

    def leave_workout(self) -> None:
        """Leave the workout screen without recording a completion."""
        ...


class CuePlayer(Protocol):
    """Audio output for playback cues."""

    def play(self, cue: CueSignal) -> None:
        """Play the sound for one cue."""
        ...
