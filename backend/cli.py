import json
import argparse
import logging
import sys
import threading

from pydantic import ValidationError

from application.use_cases import RecordCompletionUseCase
from backend.core.player import WorkoutPlayer
from backend.core.scheduler import ThreadingScheduler
from backend.core.sequence_compiler import compile_routine, per_rep_estimator
from backend.services.audio_cue_service import AudioCueService, TerminalCuePlayer
from backend.settings import get_settings
from domain.models import ProgramCustomization, Routine, StepType

logger = logging.getLogger(__name__)


def load_routine(path):
    """Load a routine JSON file. A top-level "customization" key is optional."""
    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    customization = data.pop("customization", None)
    routine = Routine.model_validate(data)
    if customization is not None:
        customization = ProgramCustomization.model_validate(customization)
    return routine, customization


def format_step(player):
    """One status line for the current step."""
    step = player.current_step
    if step is None:
        return ""

    if step.type == StepType.COMPLETE:
        return "Workout complete"

    preview = step.preview
    name = preview.name if preview else ""
    label = {
        StepType.COUNTDOWN: f"Get ready: {name}",
        StepType.EXERCISE: name,
        StepType.REST_EXERCISE: f"Rest, next: {name}",
        StepType.REST_SERIES: f"Series rest, next: {name}",
        StepType.REST_BLOCK: f"Block rest, next: {step.block_name}",
    }[step.type]

    dot = player.current_dot_index + 1
    return (
        f"[{dot}/{player.total_dots}] {step.block_name} "
        f"S{step.series_index}/{step.total_series} {label} - {player.remaining_seconds}s"
    )


def build_completion_callback(user_id, routine):
    """Record the completion in Supabase when a user is given and credentials exist."""
    if not user_id:
        return None

    from api.deps import get_supabase_client
    from infrastructure import SupabaseCompletionRepository

    client = get_supabase_client()
    if client is None:
        print("Warning: Supabase not configured, completion will not be recorded", file=sys.stderr)
        return None

    use_case = RecordCompletionUseCase(completion_repo=SupabaseCompletionRepository(client))
    return use_case.as_callback(user_id, routine)


def cmd_compile(args, settings):
    routine, customization = load_routine(args.input)
    sequence = compile_routine(
        routine,
        customization,
        countdown_seconds=settings.countdown_seconds,
        rep_duration=per_rep_estimator(settings.seconds_per_rep),
    )
    output = sequence.model_dump_json(indent=2, exclude_none=True)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(output)
    else:
        print(output)


def cmd_play(args, settings):
    routine, customization = load_routine(args.input)
    sequence = compile_routine(
        routine,
        customization,
        countdown_seconds=settings.countdown_seconds,
        rep_duration=per_rep_estimator(settings.seconds_per_rep),
    )

    finished = threading.Event()
    on_record = build_completion_callback(args.user_id, routine)

    def on_complete():
        try:
            if on_record is not None:
                on_record()
        finally:
            finished.set()

    player = WorkoutPlayer(
        sequence,
        scheduler=ThreadingScheduler(),
        on_complete=on_complete,
        cue_service=AudioCueService(TerminalCuePlayer(), muted=args.mute),
        on_change=lambda _session: print(format_step(player)),
        tick_interval_ms=settings.tick_interval_ms,
    )

    print(f"Playing {routine} - {len(sequence.steps)} steps. Ctrl+C to exit.")
    player.start()
    try:
        while not finished.wait(0.5):
            pass
    except KeyboardInterrupt:
        player.exit()
        print("Workout exited")
    finally:
        player.close()


def main():
    parser = argparse.ArgumentParser(description="Compile and play workout routines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Print the playback timeline as JSON")
    compile_parser.add_argument("input", help="Routine JSON file path")
    compile_parser.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    play_parser = subparsers.add_parser("play", help="Play a routine in the terminal")
    play_parser.add_argument("input", help="Routine JSON file path")
    play_parser.add_argument("--user-id", help="Record the completion for this user")
    play_parser.add_argument("--mute", action="store_true", help="Disable audio cues")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = get_settings()

    try:
        if args.command == "compile":
            cmd_compile(args, settings)
        else:
            cmd_play(args, settings)

    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: Invalid routine: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: Invalid routine: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
