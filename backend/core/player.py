"""
Workout Player: scheduler adapter around the playback state machine.

The player owns the only session for a compiled sequence. It feeds user
operations and timer ticks into ``backend.core.playback.reduce`` and
carries out the side effects a transition asks for:
- Starting or cancelling the 1 Hz tick
- Dispatching cues to the audio cue service
- Invoking the completion callback exactly once
- Notifying the navigator on exit

Timer handling is structural: whenever the session is not running the
tick handle is cancelled, so a paused or abandoned session never
receives a stray tick.

Usage:
    sequence = compile_routine(routine)
    player = WorkoutPlayer(
        sequence,
        scheduler=ThreadingScheduler(),
        on_complete=record_completion,
        navigator=navigator,
        cue_service=AudioCueService(TerminalCuePlayer()),
    )
    player.start()
"""
from typing import Callable, List, Optional
import logging
import threading

from application.ports import Navigator
from backend.core.playback import (
    PlaybackEvent,
    PlaybackState,
    Session,
    Transition,
    can_go_back,
    can_go_forward,
    can_skip_rest,
    current_step,
    reduce,
)
from backend.core.scheduler import CancelHandle, Scheduler
from backend.core.sequence_compiler import current_dot_index
from backend.services.audio_cue_service import AudioCueService
from domain.models import CompiledSequence, Step

logger = logging.getLogger(__name__)


DEFAULT_TICK_INTERVAL_MS = 1000


class WorkoutPlayer:
    """
    Stateful driver that plays a compiled sequence on a periodic tick.

    All transitions run under one lock, so a tick arriving from a timer
    thread never interleaves with a user operation. The completion
    callback, the navigator and ``on_change`` are called after the lock
    is released.
    """

    def __init__(
        self,
        sequence: CompiledSequence,
        *,
        scheduler: Scheduler,
        on_complete: Optional[Callable[[], None]] = None,
        navigator: Optional[Navigator] = None,
        cue_service: Optional[AudioCueService] = None,
        on_change: Optional[Callable[[Session], None]] = None,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    ):
        """
        Initialize the player in the Idle state.

        Args:
            sequence: Compiled steps and progress metadata
            scheduler: Periodic timer used for the tick
            on_complete: Called once when the last step finishes
            navigator: Notified when the user exits
            cue_service: Receives cue signals for audio playback
            on_change: Called with the new session after every transition
            tick_interval_ms: Tick interval in milliseconds
        """
        self._scheduler = scheduler
        self._on_complete = on_complete
        self._navigator = navigator
        self._cue_service = cue_service
        self._on_change = on_change
        self._tick_interval_ms = tick_interval_ms

        self._lock = threading.RLock()
        self._timer: Optional[CancelHandle] = None
        self._timer_generation = 0

        self._sequence = sequence
        self._session = Session()

    # =========================================================================
    # Read-only view
    # =========================================================================

    @property
    def steps(self) -> List[Step]:
        return self._sequence.steps

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> PlaybackState:
        return self._session.state

    @property
    def current_step(self) -> Optional[Step]:
        return current_step(self._session, self.steps)

    @property
    def step_index(self) -> int:
        return self._session.step_index

    @property
    def remaining_seconds(self) -> int:
        return self._session.remaining_seconds

    @property
    def is_paused(self) -> bool:
        return self._session.is_paused

    @property
    def is_complete(self) -> bool:
        return self._session.is_complete

    @property
    def can_go_back(self) -> bool:
        return can_go_back(self._session, self.steps)

    @property
    def can_go_forward(self) -> bool:
        return can_go_forward(self._session, self.steps)

    @property
    def can_skip_rest(self) -> bool:
        return can_skip_rest(self._session, self.steps)

    @property
    def total_dots(self) -> int:
        return self._sequence.total_exercise_steps

    @property
    def dots_by_block(self) -> List[int]:
        return self._sequence.exercise_steps_per_block

    @property
    def current_dot_index(self) -> int:
        return current_dot_index(self.steps, self._session.step_index)

    @property
    def has_active_timer(self) -> bool:
        return self._timer is not None

    # =========================================================================
    # Operations
    # =========================================================================

    def load(self, sequence: CompiledSequence) -> None:
        """Replace the sequence, tearing down any running session first."""
        with self._lock:
            self._cancel_timer()
            self._sequence = sequence
            self._session = Session()
            logger.debug("Loaded sequence with %d steps", len(sequence.steps))

    def start(self) -> None:
        """Idle -> Running. Any previous timer handle is torn down first."""
        with self._lock:
            self._cancel_timer()
            transition = self._apply(PlaybackEvent.START)
        self._run_callbacks(transition)

    def pause(self) -> None:
        self._dispatch(PlaybackEvent.PAUSE)

    def resume(self) -> None:
        self._dispatch(PlaybackEvent.RESUME)

    def skip_rest(self) -> None:
        self._dispatch(PlaybackEvent.SKIP_REST)

    def go_back(self) -> None:
        self._dispatch(PlaybackEvent.GO_BACK)

    def go_forward(self) -> None:
        self._dispatch(PlaybackEvent.GO_FORWARD)

    def exit(self) -> None:
        """Force pause and leave. Never records a completion."""
        self._dispatch(PlaybackEvent.EXIT)

    def close(self) -> None:
        """Tear down the timer without changing session state."""
        with self._lock:
            self._cancel_timer()

    def tick(self) -> None:
        """Advance the countdown by one interval. Normally called by the scheduler."""
        self._dispatch(PlaybackEvent.TICK)

    # =========================================================================
    # Internals
    # =========================================================================

    def _dispatch(self, event: PlaybackEvent) -> Transition:
        with self._lock:
            transition = self._apply(event)
        self._run_callbacks(transition)
        return transition

    def _apply(self, event: PlaybackEvent) -> Transition:
        """Reduce one event and sync the timer. Caller holds the lock."""
        transition = reduce(self._session, self.steps, event)
        self._session = transition.session
        self._sync_timer()

        if transition.cues and self._cue_service is not None:
            self._cue_service.handle(transition.cues)

        if transition.completed:
            logger.info("Workout complete after %d steps", len(self.steps))
        if transition.exited:
            logger.info("Workout exited at step %d", transition.session.step_index)
        return transition

    def _run_callbacks(self, transition: Transition) -> None:
        # called with the lock released
        if transition.completed:
            self._notify_complete()
        if transition.exited:
            self._notify_exit()
        if self._on_change is not None:
            self._on_change(transition.session)

    def _sync_timer(self) -> None:
        if self._session.is_running:
            if self._timer is None:
                self._timer_generation += 1
                generation = self._timer_generation
                self._timer = self._scheduler.schedule(
                    lambda: self._on_timer(generation), self._tick_interval_ms
                )
        else:
            self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._timer_generation += 1

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            # a tick queued before cancel() belongs to a dead handle
            if generation != self._timer_generation:
                return
            transition = self._apply(PlaybackEvent.TICK)
        self._run_callbacks(transition)

    def _notify_complete(self) -> None:
        if self._on_complete is None:
            return
        try:
            self._on_complete()
        except Exception:
            logger.exception("Completion callback failed; session stays complete")

    def _notify_exit(self) -> None:
        if self._navigator is None:
            return
        try:
            self._navigator.leave_workout()
        except Exception:
            logger.exception("Navigator failed on exit")
