"""
Unit tests for ScoreAptitudesUseCase.
"""

import math
from datetime import date
from unittest.mock import patch

import pytest

from application.use_cases import ScoreAptitudesUseCase
from application.use_cases.score_aptitudes import ScoreAptitudesResult
from backend.core import aptitude_scoring
from domain.models import AptitudeVector, ScoringPeriod
from tests.fakes import FakeCompletedRoutinesRepository


pytestmark = pytest.mark.unit

REFERENCE = date(2024, 9, 11)


@pytest.fixture
def completed_repo() -> FakeCompletedRoutinesRepository:
    return FakeCompletedRoutinesRepository()


@pytest.fixture
def use_case(completed_repo) -> ScoreAptitudesUseCase:
    return ScoreAptitudesUseCase(completed_repo=completed_repo, today=lambda: REFERENCE)


class TestScoreAptitudes:

    def test_no_completions_returns_floor(self, use_case):
        result = use_case.execute("user-1", weekly_goal=4)

        assert result.completed_count == 0
        assert result.period == ScoringPeriod.WEEK
        assert result.scores.strength == pytest.approx(math.sqrt(0.15))

    def test_queries_current_week(self, use_case, completed_repo):
        use_case.execute("user-1", weekly_goal=4)
        assert completed_repo.calls == [
            {"user_id": "user-1", "start": date(2024, 9, 9), "end": date(2024, 9, 15)}
        ]

    def test_queries_current_month(self, use_case, completed_repo):
        result = use_case.execute("user-1", weekly_goal=4, period=ScoringPeriod.MONTH)
        assert (result.start, result.end) == (date(2024, 9, 1), date(2024, 9, 30))

    def test_counts_only_scoring_categories(self, use_case, completed_repo):
        for category in ("Funcional", "Kinesiología", "Activación"):
            completed_repo.add(
                "user-1",
                category=category,
                objective=AptitudeVector.uniform(10),
                completed_on=REFERENCE,
            )
        result = use_case.execute("user-1", weekly_goal=4)

        assert result.completed_count == 2
        assert result.scores.endurance == pytest.approx(math.sqrt(0.15 + 0.85 * 0.5))

    def test_other_users_and_weeks_ignored(self, use_case, completed_repo):
        completed_repo.add("user-2", category="Funcional",
                           objective=AptitudeVector.uniform(10), completed_on=REFERENCE)
        completed_repo.add("user-1", category="Funcional",
                           objective=AptitudeVector.uniform(10), completed_on=date(2024, 9, 2))
        assert use_case.execute("user-1", weekly_goal=4).completed_count == 0

    def test_reaching_goal_saturates(self, use_case, completed_repo):
        for _ in range(4):
            completed_repo.add("user-1", category="Funcional",
                               objective=AptitudeVector(strength=10), completed_on=REFERENCE)
        scores = use_case.execute("user-1", weekly_goal=4).scores
        assert scores.strength == 1.0
        assert scores.mobility == pytest.approx(math.sqrt(0.15))

    def test_reference_date_override(self, use_case, completed_repo):
        result = use_case.execute("user-1", weekly_goal=4, reference_date=date(2024, 1, 3))
        assert result.start == date(2024, 1, 1)

    def test_categories_filtered_once(self, use_case, completed_repo):
        completed_repo.add(
            "user-1", category="Funcional", objective=AptitudeVector(power=5), completed_on=REFERENCE
        )
        with patch(
            "application.use_cases.score_aptitudes.filter_scoring_routines",
            wraps=aptitude_scoring.filter_scoring_routines,
        ) as filter_spy, patch.object(
            aptitude_scoring, "filter_scoring_routines", wraps=aptitude_scoring.filter_scoring_routines
        ) as engine_spy:
            result = use_case.execute("user-1", weekly_goal=1)

        assert filter_spy.call_count == 1
        engine_spy.assert_not_called()
        assert result.scores.power == pytest.approx(math.sqrt(0.15 + 0.85 * 0.5))


class TestScoreAptitudesResult:

    def test_scores_are_required(self):
        with pytest.raises(TypeError):
            ScoreAptitudesResult(
                period=ScoringPeriod.WEEK, start=REFERENCE, end=REFERENCE
            )
