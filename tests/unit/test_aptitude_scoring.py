"""
Unit tests for backend/core/aptitude_scoring.py

Tests for:
- Display floor and saturation
- Goal normalization per week and month
- Category filtering (Funcional, Kinesiología)
- Calendar helpers
"""

import math
import unicodedata
from datetime import date

import pytest

from backend.core.aptitude_scoring import (
    BASELINE,
    DISPLAY_FLOOR,
    calculate_raw_scores,
    display_score,
    filter_scoring_routines,
    goal_for_period,
    period_bounds,
    score_aptitudes,
    weeks_in_month,
)
from domain.models import APTITUDE_KEYS, AptitudeVector, CompletedRoutine, ScoringPeriod


pytestmark = pytest.mark.unit

REFERENCE = date(2024, 9, 11)  # a Wednesday


def completed(category="Funcional", objective=None, **values):
    return CompletedRoutine(
        routine_id="r1",
        category=category,
        objective=objective if objective is not None else AptitudeVector(**values),
        completed_on=REFERENCE,
    )


# =============================================================================
# Display transform
# =============================================================================


class TestDisplayScore:

    def test_floor_with_no_completions(self):
        scores = score_aptitudes([], weekly_goal=4, reference_date=REFERENCE)
        for value in scores.as_dict().values():
            assert value == pytest.approx(math.sqrt(0.15))
            assert value == pytest.approx(0.387, abs=1e-3)

    def test_floor_constant(self):
        assert BASELINE == 0.15
        assert DISPLAY_FLOOR == pytest.approx(0.3873, abs=1e-4)

    def test_saturates_at_goal(self):
        assert display_score(4.0, 4) == 1.0

    def test_double_goal_equals_goal(self):
        assert display_score(8.0, 4) == display_score(4.0, 4) == 1.0

    def test_monotonic_in_raw(self):
        values = [display_score(raw / 10, 4) for raw in range(0, 60)]
        assert values == sorted(values)

    def test_bounded(self):
        for raw in (0, 0.5, 3.9, 4, 100):
            assert DISPLAY_FLOOR <= display_score(raw, 4) <= 1.0

    def test_goal_below_one_treated_as_one(self):
        assert display_score(0.5, 0) == display_score(0.5, 1)

    def test_partial_progress(self):
        # one routine at 10/10 against a goal of 4 -> 0.25 of the way
        expected = math.sqrt(0.15 + 0.85 * 0.25)
        assert display_score(1.0, 4) == pytest.approx(expected)


# =============================================================================
# Raw scores
# =============================================================================


class TestRawScores:

    def test_sums_objective_over_ten(self):
        raw = calculate_raw_scores([
            completed(strength=8, mobility=2),
            completed(strength=6),
        ])
        assert raw["strength"] == pytest.approx(1.4)
        assert raw["mobility"] == pytest.approx(0.2)
        assert raw["speed"] == 0.0

    def test_routine_without_objective_contributes_nothing(self):
        routine = CompletedRoutine(category="Funcional", completed_on=REFERENCE)
        assert calculate_raw_scores([routine]) == {key: 0.0 for key in APTITUDE_KEYS}

    def test_same_routine_twice_counts_twice(self):
        once = calculate_raw_scores([completed(power=5)])
        twice = calculate_raw_scores([completed(power=5), completed(power=5)])
        assert twice["power"] == pytest.approx(2 * once["power"])


# =============================================================================
# Category filter
# =============================================================================


class TestCategoryFilter:

    def test_only_funcional_and_kinesiologia_count(self):
        routines = [
            completed("Funcional"),
            completed("Kinesiología"),
            completed("Activación"),
            completed(None),
        ]
        kept = filter_scoring_routines(routines)
        assert [r.category for r in kept] == ["Funcional", "Kinesiología"]

    def test_decomposed_accent_matches(self):
        decomposed = unicodedata.normalize("NFD", "Kinesiología")
        assert decomposed != "Kinesiología"
        assert len(filter_scoring_routines([completed(decomposed)])) == 1

    def test_activacion_does_not_move_scores(self):
        scores = score_aptitudes(
            [completed("Activación", objective=AptitudeVector.uniform(10))],
            weekly_goal=1,
            reference_date=REFERENCE,
        )
        assert scores == AptitudeVector.uniform(DISPLAY_FLOOR)

    def test_custom_categories(self):
        scores = score_aptitudes(
            [completed("Activación", objective=AptitudeVector.uniform(10))],
            weekly_goal=1,
            reference_date=REFERENCE,
            categories=("Activación",),
        )
        assert scores == AptitudeVector.uniform(1.0)


# =============================================================================
# Periods
# =============================================================================


class TestPeriods:

    def test_weeks_in_month_starting_monday(self):
        assert weeks_in_month(date(2021, 2, 10)) == 4

    def test_weeks_in_month_starting_sunday(self):
        assert weeks_in_month(date(2024, 9, 1)) == 6

    def test_weeks_in_typical_month(self):
        assert weeks_in_month(date(2024, 10, 20)) == 5

    def test_week_bounds_monday_to_sunday(self):
        assert period_bounds(ScoringPeriod.WEEK, REFERENCE) == (date(2024, 9, 9), date(2024, 9, 15))

    def test_week_bounds_on_sunday(self):
        assert period_bounds(ScoringPeriod.WEEK, date(2024, 9, 15)) == (date(2024, 9, 9), date(2024, 9, 15))

    def test_month_bounds(self):
        assert period_bounds(ScoringPeriod.MONTH, date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_goal_for_week(self):
        assert goal_for_period(4, ScoringPeriod.WEEK, REFERENCE) == 4

    def test_goal_for_month(self):
        assert goal_for_period(4, ScoringPeriod.MONTH, date(2024, 9, 1)) == 24

    def test_month_needs_more_completions_to_saturate(self):
        routines = [completed(objective=AptitudeVector.uniform(10))] * 4
        week = score_aptitudes(routines, 4, ScoringPeriod.WEEK, REFERENCE)
        month = score_aptitudes(routines, 4, ScoringPeriod.MONTH, REFERENCE)
        assert week.strength == 1.0
        assert month.strength < 1.0
