"""
scoring/grading.py

Maps a score percentage to a performance grade.

Bands (lower bound inclusive):
    < 30        Probation
    [30, 50)    Developing
    [50, 66)    Progressive
    [66, 80)    Competent
    [80, 90)    Accomplished
    >= 90       Exemplary

Values below 0 or above 100 fall into the outer bands.
"""

from decimal import Decimal
from typing import Optional, Sequence, Tuple

from pms_engine.models.enumerations import PerformanceGrade
from pms_engine.scoring.utils import Number, to_decimal

DEFAULT_THRESHOLDS: Tuple[Decimal, ...] = (
    Decimal("30"),
    Decimal("50"),
    Decimal("66"),
    Decimal("80"),
    Decimal("90"),
)

# Grade reached once the percentage meets the threshold at the same index
_GRADES_ABOVE: Tuple[PerformanceGrade, ...] = (
    PerformanceGrade.DEVELOPING,
    PerformanceGrade.PROGRESSIVE,
    PerformanceGrade.COMPETENT,
    PerformanceGrade.ACCOMPLISHED,
    PerformanceGrade.EXEMPLARY,
)


def determine_grade(
    score_percentage: Number,
    thresholds: Optional[Sequence[Decimal]] = None,
) -> PerformanceGrade:
    """
    Determine the performance grade for a percentage.

    Args:
        score_percentage: Percentage score, normally in [0, 100].
        thresholds: Five ascending band lower bounds. Defaults to
                    ``DEFAULT_THRESHOLDS``.

    Examples:
        >>> determine_grade("65.99")
        <PerformanceGrade.PROGRESSIVE: 'Progressive'>
        >>> determine_grade(66)
        <PerformanceGrade.COMPETENT: 'Competent'>
    """
    bounds = tuple(thresholds) if thresholds is not None else DEFAULT_THRESHOLDS
    if len(bounds) != len(_GRADES_ABOVE):
        raise ValueError(f"expected {len(_GRADES_ABOVE)} grade thresholds, got {len(bounds)}")

    pct = to_decimal(score_percentage)
    grade = PerformanceGrade.PROBATION
    for bound, band in zip(bounds, _GRADES_ABOVE):
        if pct < to_decimal(bound):
            break
        grade = band
    return grade
