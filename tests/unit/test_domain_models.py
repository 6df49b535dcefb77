"""
Unit tests for domain models.

Tests for:
- Validation from JSON-like dicts
- Derived properties (effective series, series rest, previews)
- Immutability
"""

import pytest
from pydantic import ValidationError

from domain.models import (
    APTITUDE_KEYS,
    AptitudeVector,
    Block,
    BlockExercise,
    CueSignal,
    CueType,
    ExecutionType,
    ExerciseRef,
    ProgramCustomization,
    Routine,
    Step,
    StepType,
)
from tests.fakes import make_routine


pytestmark = pytest.mark.unit


class TestBlockExercise:

    def test_defaults_to_time(self):
        assert BlockExercise().execution_type == ExecutionType.TIME

    def test_rejects_unknown_execution_type(self):
        with pytest.raises(ValidationError):
            BlockExercise(execution_type="distance")

    def test_name_without_exercise(self):
        assert BlockExercise().name == ""

    def test_str(self):
        squat = BlockExercise(exercise=ExerciseRef(name="Sentadilla"), execution_type="reps", rep_count=12)
        assert str(squat) == "Sentadilla x12"

    def test_has_media(self):
        assert ExerciseRef(name="Plancha", video_url="https://cdn.example.com/p.mp4").has_media


class TestBlock:

    def test_effective_series_requires_repeat(self):
        assert Block(series=4, repeat_block=False).effective_series == 1
        assert Block(series=4, repeat_block=True).effective_series == 4

    def test_series_none_is_one(self):
        assert Block(series=None).series == 1

    def test_series_rest_uses_exercise_rest_when_shared(self):
        block = Block(
            rest_between_exercises_seconds=20,
            rest_between_series_seconds=60,
            use_same_rest_for_series=True,
        )
        assert block.series_rest_seconds == 20

    def test_str_truncates_exercise_list(self):
        block = Block(
            name="Core",
            series=2,
            repeat_block=True,
            exercises=[BlockExercise(exercise=ExerciseRef(name=f"E{i}")) for i in range(5)],
        )
        assert str(block) == "Core x2 series [E0, E1, E2 (+2 more)]"


class TestRoutine:

    def test_from_dict(self):
        routine = Routine.model_validate({
            "name": "Core",
            "blocks": [{"name": "A", "exercises": [{"execution_type": "reps", "rep_count": 8}]}],
        })
        assert routine.blocks[0].exercises[0].is_rep_based
        assert routine.total_exercises == 1

    def test_json_round_trip(self):
        routine = make_routine()
        assert Routine.model_validate_json(routine.model_dump_json()) == routine

    def test_first_exercise_name(self):
        assert make_routine().first_exercise_name == "Plancha"
        assert Routine().first_exercise_name is None

    def test_frozen(self):
        with pytest.raises(ValidationError):
            make_routine().name = "Otro"


class TestProgramCustomization:

    def test_override_lookup(self):
        custom = ProgramCustomization(blocks={"b1": {"exercises": {"be1": {"comment": "Suave"}}}})
        assert custom.override_for("b1", "be1").comment == "Suave"
        assert custom.override_for("b1", "be2") is None
        assert custom.override_for(None, "be1") is None


class TestStep:

    def test_rest_types(self):
        assert StepType.REST_BLOCK.is_rest
        assert not StepType.COUNTDOWN.is_rest
        assert Step(type=StepType.REST_SERIES).is_rest

    def test_preview_falls_back_to_next_exercise(self):
        step = Step(
            type=StepType.REST_EXERCISE,
            next_exercise=ExerciseRef(name="Burpees"),
        )
        assert step.preview.name == "Burpees"


class TestAptitudeVector:

    def test_uniform(self):
        assert set(AptitudeVector.uniform(0.5).as_dict().values()) == {0.5}

    def test_as_dict_order(self):
        assert tuple(AptitudeVector().as_dict()) == APTITUDE_KEYS


class TestCueSignal:

    def test_constructors(self):
        assert CueSignal.low_countdown(3, 2) == CueSignal(CueType.LOW_COUNTDOWN, 3, 2)
        assert CueSignal.step_start(1).value is None
