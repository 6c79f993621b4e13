"""
scoring/period_score_calculator.py

Assembles the final review-period score.

Formula:
    raw          = work_product + objective + competency
    final_score  = max(0, raw − hrd_deduction)
    percentage   = final_score / max_points × 100   (0 when max_points ≤ 0)
    grade        = determine_grade(percentage)
    under-performing when percentage < 50
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from pms_engine.models.enumerations import PerformanceGrade
from pms_engine.scoring.category_calculator import CategoryScore
from pms_engine.scoring.grading import determine_grade
from pms_engine.scoring.utils import HUNDRED, ZERO, Number, floor_at_zero, to_decimal

UNDER_PERFORMANCE_CUTOFF = Decimal("50")


@dataclass(frozen=True)
class PeriodScoreResult:
    """Output of calculate_period_score(). Computed on demand, never stored."""
    final_score: Decimal
    score_percentage: Decimal
    grade: PerformanceGrade
    is_under_performing: bool
    category_breakdown: List[CategoryScore] = field(default_factory=list)


def calculate_work_product_outcome(timeliness: Number, quality: Number, output: Number) -> Decimal:
    """Unweighted sum of the three work-product evaluation dimensions."""
    return to_decimal(timeliness) + to_decimal(quality) + to_decimal(output)


def apply_hrd_deduction(score: Number, deduction: Number) -> Decimal:
    """Subtract HRD-deducted points; the result never goes below zero."""
    return floor_at_zero(to_decimal(score) - to_decimal(deduction))


def calculate_score_percentage(score: Number, max_points: Number) -> Decimal:
    max_d = to_decimal(max_points)
    if max_d <= ZERO:
        return ZERO
    return to_decimal(score) / max_d * HUNDRED


def calculate_period_score(
    work_product_score: Number,
    objective_score: Number,
    competency_score: Number,
    max_points: Number,
    hrd_deduction: Number = 0,
    category_breakdown: Optional[Sequence[CategoryScore]] = None,
    thresholds: Optional[Sequence[Decimal]] = None,
    under_performance_cutoff: Decimal = UNDER_PERFORMANCE_CUTOFF,
) -> PeriodScoreResult:
    """
    Calculate the period score, percentage and grade.

    Examples:
        >>> result = calculate_period_score(40, 30, 10, 100, 5)
        >>> result.final_score, result.grade.value
        (Decimal('75'), 'Competent')
    """
    raw = to_decimal(work_product_score) + to_decimal(objective_score) + to_decimal(competency_score)
    final_score = apply_hrd_deduction(raw, hrd_deduction)
    percentage = calculate_score_percentage(final_score, max_points)

    return PeriodScoreResult(
        final_score=final_score,
        score_percentage=percentage,
        grade=determine_grade(percentage, thresholds),
        is_under_performing=percentage < under_performance_cutoff,
        category_breakdown=list(category_breakdown or []),
    )
