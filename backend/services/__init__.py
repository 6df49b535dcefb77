"""Backend services for the workout playback engine."""

from backend.services.audio_cue_service import (
    BEEP_TONE,
    BUZZER_TONE,
    AudioCueService,
    LoggingCuePlayer,
    TerminalCuePlayer,
    tone_for,
)

__all__ = [
    "AudioCueService",
    "LoggingCuePlayer",
    "TerminalCuePlayer",
    "BEEP_TONE",
    "BUZZER_TONE",
    "tone_for",
]
