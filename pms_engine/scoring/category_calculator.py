"""
scoring/category_calculator.py

Weighted aggregation of category scores.

Formula:
    weighted = Σ (score_i × weight_i / 100)

Weights are percentage points and must add up to 100 within ±0.01 before
any aggregation happens.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Sequence

import structlog

from pms_engine.core.exceptions import NoScoreDataError, WeightValidationError
from pms_engine.scoring.utils import HUNDRED, ZERO, Number, to_decimal

logger = structlog.get_logger(__name__)

WEIGHT_TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class CategoryScore:
    """One scored category with its weight (e.g. 30 = 30%)."""
    category_id: str
    score: Decimal
    weight: Decimal
    max_points: Decimal = field(default=ZERO)

    @classmethod
    def of(cls, category_id: str, score: Number, weight: Number, max_points: Number = 0) -> "CategoryScore":
        return cls(
            category_id=category_id,
            score=to_decimal(score),
            weight=to_decimal(weight),
            max_points=to_decimal(max_points),
        )


def validate_category_weights(
    weights: Iterable[Number],
    category_id: str = "",
    expected_total: Decimal = HUNDRED,
    tolerance: Decimal = WEIGHT_TOLERANCE,
) -> None:
    """
    Check that weights sum to ``expected_total`` within ``tolerance``.

    Raises:
        WeightValidationError: when |Σ weights − expected_total| > tolerance.
    """
    total = sum((to_decimal(w) for w in weights), ZERO)
    if abs(total - expected_total) > tolerance:
        logger.warning(
            "category_weights_unbalanced",
            expected_total=float(expected_total),
            actual_total=float(total),
            category_id=category_id,
        )
        raise WeightValidationError(
            expected_total=expected_total,
            actual_total=total,
            category_id=category_id,
        )


def calculate_weighted_category_score(
    scores: Sequence[CategoryScore],
    expected_total: Decimal = HUNDRED,
    tolerance: Decimal = WEIGHT_TOLERANCE,
) -> Decimal:
    """
    Weighted sum across categories.

    Raises:
        NoScoreDataError: ``scores`` is empty.
        WeightValidationError: weights are not balanced. ``category_id`` is
            the last category of the set, as a representative.

    Examples:
        >>> calculate_weighted_category_score([
        ...     CategoryScore.of("A", 70, 60), CategoryScore.of("B", 30, 40)])
        Decimal('54')
    """
    if not scores:
        raise NoScoreDataError()

    validate_category_weights(
        [cs.weight for cs in scores],
        category_id=scores[-1].category_id,
        expected_total=expected_total,
        tolerance=tolerance,
    )

    total = ZERO
    for cs in scores:
        total += to_decimal(cs.score) * to_decimal(cs.weight) / HUNDRED
    return total
