"""
Aptitude Scoring Engine.

Turns the routines a user completed in a period into one display score per
aptitude dimension, for the radar chart:
- Only Funcional and Kinesiología routines count
- Each completion adds objective/10 to every dimension
- Raw sums are normalized by the period goal and capped at 1
- A baseline and a square-root curve keep the chart from collapsing

The display value for every dimension always lies in [sqrt(0.15), 1].
"""
from typing import Dict, Iterable, Optional, Sequence, Tuple
from datetime import date, timedelta
import calendar
import logging
import math
import unicodedata

from domain.models import APTITUDE_KEYS, AptitudeVector, CompletedRoutine, ScoringPeriod

logger = logging.getLogger(__name__)


# Categories that count toward aptitudes (Activación does not)
DEFAULT_APTITUDE_CATEGORIES: Tuple[str, ...] = ("Funcional", "Kinesiología")

# Floor so the radar is never empty
BASELINE = 0.15

# Authored objective scores are on a 1-10 scale
OBJECTIVE_SCALE = 10.0

DISPLAY_FLOOR = math.sqrt(BASELINE)


# =============================================================================
# Calendar helpers
# =============================================================================


def _week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def weeks_in_month(day: date) -> int:
    """
    Count the Monday-start calendar weeks that overlap the month of ``day``.

    Examples:
        >>> weeks_in_month(date(2021, 2, 10))  # Feb 2021 starts on a Monday
        4
        >>> weeks_in_month(date(2024, 9, 1))   # Sep 2024 starts on a Sunday
        6
    """
    first = day.replace(day=1)
    last = day.replace(day=calendar.monthrange(day.year, day.month)[1])
    weeks = (_week_start(last) - _week_start(first)).days // 7 + 1
    return max(1, weeks)


def period_bounds(period: ScoringPeriod, reference_date: date) -> Tuple[date, date]:
    """
    Inclusive date range of the current week (Monday-Sunday) or month.

    Args:
        period: WEEK or MONTH
        reference_date: Any day inside the period

    Returns:
        Tuple of (start, end)
    """
    if period == ScoringPeriod.MONTH:
        start = reference_date.replace(day=1)
        end = reference_date.replace(
            day=calendar.monthrange(reference_date.year, reference_date.month)[1]
        )
        return start, end

    start = _week_start(reference_date)
    return start, start + timedelta(days=6)


def goal_for_period(weekly_goal: float, period: ScoringPeriod, reference_date: date) -> float:
    """Scale the weekly goal to the period."""
    if period == ScoringPeriod.MONTH:
        return weekly_goal * weeks_in_month(reference_date)
    return weekly_goal


# =============================================================================
# Scoring
# =============================================================================


def _normalize_category(category: Optional[str]) -> str:
    if not category:
        return ""
    return unicodedata.normalize("NFC", category).strip()


def filter_scoring_routines(
    completed_routines: Iterable[CompletedRoutine],
    categories: Sequence[str] = DEFAULT_APTITUDE_CATEGORIES,
) -> list:
    """Keep only completions whose routine category counts toward aptitudes."""
    allowed = {_normalize_category(c) for c in categories}
    return [r for r in completed_routines if _normalize_category(r.category) in allowed]


def calculate_raw_scores(completed_routines: Iterable[CompletedRoutine]) -> Dict[str, float]:
    """
    Sum objective/10 per dimension over the given completions.

    Completions without an objective vector contribute nothing.
    """
    raw = {key: 0.0 for key in APTITUDE_KEYS}
    for routine in completed_routines:
        if routine.objective is None:
            continue
        for key, value in routine.objective.as_dict().items():
            raw[key] += (value or 0) / OBJECTIVE_SCALE
    return raw


def display_score(raw: float, goal: float) -> float:
    """
    Map one raw score to its display value.

    Formula: sqrt(BASELINE + (1 - BASELINE) * min(1, raw / max(1, goal)))
    """
    normalized = min(1.0, max(0.0, raw / max(1.0, goal)))
    if normalized >= 1.0:
        return 1.0
    return math.sqrt(BASELINE + (1.0 - BASELINE) * normalized)


def apply_display_transform(raw_scores: Dict[str, float], goal: float) -> AptitudeVector:
    """Apply goal normalization, cap, baseline and sqrt curve to every dimension."""
    return AptitudeVector(
        **{key: display_score(raw_scores.get(key, 0.0), goal) for key in APTITUDE_KEYS}
    )


def score_aptitudes(
    completed_routines: Iterable[CompletedRoutine],
    weekly_goal: float,
    period: ScoringPeriod = ScoringPeriod.WEEK,
    reference_date: Optional[date] = None,
    *,
    categories: Sequence[str] = DEFAULT_APTITUDE_CATEGORIES,
) -> AptitudeVector:
    """
    Compute display aptitude scores for a period.

    Args:
        completed_routines: Completions inside the period
        weekly_goal: Routines per week the user aims for
        period: WEEK or MONTH
        reference_date: Day inside the period (defaults to today); only used
            to count the weeks of a month
        categories: Routine categories that count

    Returns:
        AptitudeVector with each dimension in [sqrt(0.15), 1]
    """
    reference_date = reference_date or date.today()
    scoring = filter_scoring_routines(completed_routines, categories)
    raw = calculate_raw_scores(scoring)
    goal = goal_for_period(weekly_goal, period, reference_date)

    logger.debug(
        "Scoring %d routines for %s (goal %.1f)", len(scoring), period.value, goal
    )

    return apply_display_transform(raw, goal)
