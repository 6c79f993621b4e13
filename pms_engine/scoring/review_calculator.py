"""
scoring/review_calculator.py

Competency review arithmetic:
- behavioural review average (zero ratings mean "not rated")
- 360-style technical score:
      self_avg × self_weight / 100 + supervisor_avg × supervisor_weight / 100
- competency gap = max(0, expected − actual)
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Tuple

from pms_engine.scoring.utils import HUNDRED, ZERO, Number, floor_at_zero, to_decimal


@dataclass(frozen=True)
class CompetencyScoreResult:
    """Gap analysis for a single competency."""
    competency_id: str
    average_rating: Decimal
    expected_rating: Decimal
    gap: Decimal
    has_gap: bool


def calculate_behavioral_review_average(ratings: Iterable[Number]) -> Decimal:
    """Mean of the non-zero ratings, or 0 when nothing was rated."""
    rated = [r for r in (to_decimal(r) for r in ratings) if r != ZERO]
    if not rated:
        return ZERO
    return sum(rated, ZERO) / Decimal(len(rated))


def calculate_technical_weighted_score(
    self_avg: Number,
    supervisor_avg: Number,
    self_weight: Number,
    supervisor_weight: Number,
) -> Decimal:
    # Weights need not add up to 100 here; callers configure them.
    self_part = to_decimal(self_avg) * to_decimal(self_weight) / HUNDRED
    supervisor_part = to_decimal(supervisor_avg) * to_decimal(supervisor_weight) / HUNDRED
    return self_part + supervisor_part


def calculate_competency_gap(expected: Number, actual: Number) -> Tuple[Decimal, bool]:
    """Return ``(gap, has_gap)``; ``has_gap`` only when expected > actual."""
    diff = to_decimal(expected) - to_decimal(actual)
    return floor_at_zero(diff), diff > ZERO


def calculate_competency_score(
    competency_id: str,
    ratings: Iterable[Number],
    expected_rating: Number,
) -> CompetencyScoreResult:
    average = calculate_behavioral_review_average(ratings)
    expected = to_decimal(expected_rating)
    gap, has_gap = calculate_competency_gap(expected, average)
    return CompetencyScoreResult(
        competency_id=competency_id,
        average_rating=average,
        expected_rating=expected,
        gap=gap,
        has_gap=has_gap,
    )
