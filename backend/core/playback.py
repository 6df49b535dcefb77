"""
Playback State Machine for compiled routines.

Pure transition logic for walking a compiled step list:

    Idle -> Running <-> Paused -> Complete
                  \\       /
                   Exited

Every operation is an event fed to ``reduce(session, steps, event)``,
which returns the next session plus the cues and notifications the
transition produced. The reducer never raises and never reads the clock;
the 1 Hz cadence is supplied from outside as TICK events (see
backend.core.player.WorkoutPlayer).

Malformed input is normalized rather than rejected: a negative step
duration is read as 0, and a step of duration 0 is passed on the next tick.
Navigation requests whose precondition is false are no-ops.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import logging

from domain.models import LOW_COUNTDOWN_VALUES, CueSignal, Step, StepType

logger = logging.getLogger(__name__)


# =============================================================================
# State
# =============================================================================


class PlaybackState(str, Enum):
    """Externally visible state of a session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"
    EXITED = "exited"


class PlaybackEvent(str, Enum):
    """Inputs to the state machine."""

    START = "start"
    TICK = "tick"
    PAUSE = "pause"
    RESUME = "resume"
    SKIP_REST = "skip_rest"
    GO_BACK = "go_back"
    GO_FORWARD = "go_forward"
    EXIT = "exit"


@dataclass(frozen=True)
class Session:
    """
    Runtime state of one playback.

    ``last_countdown_cue`` and ``last_started_step`` remember the last cue
    of each kind so a repeated state never fires the same cue twice.
    """

    step_index: int = 0
    remaining_seconds: int = 0
    is_paused: bool = True
    is_complete: bool = False
    is_exited: bool = False
    is_started: bool = False
    last_countdown_cue: Optional[Tuple[int, int]] = None
    last_started_step: Optional[int] = None

    @property
    def state(self) -> PlaybackState:
        if self.is_complete:
            return PlaybackState.COMPLETE
        if self.is_exited:
            return PlaybackState.EXITED
        if not self.is_started:
            return PlaybackState.IDLE
        if self.is_paused:
            return PlaybackState.PAUSED
        return PlaybackState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state == PlaybackState.RUNNING

    @property
    def is_active(self) -> bool:
        """True while the session can still change (running or paused)."""
        return self.state in (PlaybackState.RUNNING, PlaybackState.PAUSED)


@dataclass(frozen=True)
class Transition:
    """Result of applying one event."""

    session: Session
    cues: Tuple[CueSignal, ...] = ()
    completed: bool = False
    exited: bool = False


# =============================================================================
# Step helpers
# =============================================================================


def step_duration(steps: Sequence[Step], index: int) -> int:
    """Duration of ``steps[index]``, with negative values read as 0."""
    if index < 0 or index >= len(steps):
        return 0
    return max(0, steps[index].duration_seconds)


def find_previous_exercise(steps: Sequence[Step], index: int) -> Optional[int]:
    """Index of the nearest exercise step before ``index``, if any."""
    for i in range(min(index, len(steps)) - 1, -1, -1):
        if steps[i].type == StepType.EXERCISE:
            return i
    return None


def find_next_exercise(steps: Sequence[Step], index: int) -> Optional[int]:
    """Index of the nearest exercise step after ``index``, if any."""
    for i in range(index + 1, len(steps)):
        if steps[i].type == StepType.EXERCISE:
            return i
    return None


def current_step(session: Session, steps: Sequence[Step]) -> Optional[Step]:
    if 0 <= session.step_index < len(steps):
        return steps[session.step_index]
    return None


# =============================================================================
# Predicates
# =============================================================================


def can_go_back(session: Session, steps: Sequence[Step]) -> bool:
    """An earlier exercise step exists and the session is still active."""
    return session.is_active and find_previous_exercise(steps, session.step_index) is not None


def can_go_forward(session: Session, steps: Sequence[Step]) -> bool:
    """The session is paused and a later exercise step exists."""
    return (
        session.state == PlaybackState.PAUSED
        and find_next_exercise(steps, session.step_index) is not None
    )


def can_skip_rest(session: Session, steps: Sequence[Step]) -> bool:
    """The session is active and the current step is a rest."""
    step = current_step(session, steps)
    return session.is_active and step is not None and step.type.is_rest


# =============================================================================
# Cues
# =============================================================================


def emit_cues(session: Session, steps: Sequence[Step]) -> Tuple[Session, List[CueSignal]]:
    """
    Compute the cues due for the current state.

    STEP_START fires when an exercise step becomes current; LOW_COUNTDOWN
    fires when remaining seconds sit at 3, 2 or 1 on any step but the
    terminal one. Each is compared with the last cue of its kind so that
    re-evaluating the same state is silent.

    Returns:
        Tuple of (session with updated cue memory, cues to play)
    """
    cues: List[CueSignal] = []
    step = current_step(session, steps)
    if step is None or not session.is_active:
        return session, cues

    index = session.step_index

    if step.type == StepType.EXERCISE and session.last_started_step != index:
        cues.append(CueSignal.step_start(index))
        session = replace(session, last_started_step=index)

    remaining = session.remaining_seconds
    if step.type != StepType.COMPLETE and remaining in LOW_COUNTDOWN_VALUES:
        key = (index, remaining)
        if session.last_countdown_cue != key:
            cues.append(CueSignal.low_countdown(index, remaining))
            session = replace(session, last_countdown_cue=key)

    return session, cues


# =============================================================================
# Transitions
# =============================================================================


def _load_step(session: Session, steps: Sequence[Step], index: int) -> Session:
    return replace(session, step_index=index, remaining_seconds=step_duration(steps, index))


def advance(session: Session, steps: Sequence[Step]) -> Tuple[Session, bool]:
    """
    Move to the next step, shared by a tick reaching zero and skip-rest.

    Returns:
        Tuple of (next session, whether the session just completed)
    """
    next_index = session.step_index + 1
    if next_index >= len(steps):
        return replace(session, is_complete=True, is_paused=True, remaining_seconds=0), True
    return _load_step(session, steps, next_index), False


def _start(session: Session, steps: Sequence[Step]) -> Tuple[Session, bool]:
    if session.state != PlaybackState.IDLE:
        return session, False
    if not steps:
        return replace(session, is_started=True, is_complete=True), True
    started = Session(is_started=True, is_paused=False)
    return _load_step(started, steps, 0), False


def _tick(session: Session, steps: Sequence[Step]) -> Tuple[Session, bool]:
    if not session.is_running:
        return session, False
    if session.remaining_seconds <= 1:
        return advance(session, steps)
    return replace(session, remaining_seconds=session.remaining_seconds - 1), False


def reduce(session: Session, steps: Sequence[Step], event: PlaybackEvent) -> Transition:
    """
    Apply one event to a session.

    Args:
        session: Current session
        steps: Compiled step list (never modified)
        event: Event to apply

    Returns:
        Transition with the next session, cues to play, and whether the
        session completed or exited on this event
    """
    completed = False
    exited = False
    next_session = session

    if event == PlaybackEvent.START:
        next_session, completed = _start(session, steps)

    elif event == PlaybackEvent.TICK:
        next_session, completed = _tick(session, steps)

    elif event == PlaybackEvent.PAUSE:
        if session.is_running:
            next_session = replace(session, is_paused=True)

    elif event == PlaybackEvent.RESUME:
        if session.state == PlaybackState.PAUSED:
            next_session = replace(session, is_paused=False)

    elif event == PlaybackEvent.SKIP_REST:
        if can_skip_rest(session, steps):
            next_session, completed = advance(session, steps)

    elif event == PlaybackEvent.GO_BACK:
        target = find_previous_exercise(steps, session.step_index)
        if session.is_active and target is not None:
            next_session = _load_step(session, steps, target)

    elif event == PlaybackEvent.GO_FORWARD:
        target = find_next_exercise(steps, session.step_index)
        if session.state == PlaybackState.PAUSED and target is not None:
            next_session = _load_step(session, steps, target)

    elif event == PlaybackEvent.EXIT:
        if session.state in (PlaybackState.IDLE, PlaybackState.RUNNING, PlaybackState.PAUSED):
            next_session = replace(session, is_paused=True, is_exited=True)
            exited = True

    if next_session is session and event != PlaybackEvent.TICK:
        logger.debug("Ignored %s in state %s", event.value, session.state.value)

    next_session, cues = emit_cues(next_session, steps)
    return Transition(
        session=next_session,
        cues=tuple(cues),
        completed=completed,
        exited=exited,
    )
