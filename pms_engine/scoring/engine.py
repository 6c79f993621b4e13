"""
scoring/engine.py

Class: ScoringEngine
Stateless facade over the scoring calculators, with the weight tolerance,
grade thresholds and under-performance cut-off taken from Settings.

Safe to share between threads: it holds only immutable Decimals.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence, Tuple

import structlog

from pms_engine.config import Settings, get_settings
from pms_engine.models.enumerations import PerformanceGrade
from pms_engine.scoring import category_calculator, period_score_calculator, review_calculator
from pms_engine.scoring.category_calculator import CategoryScore
from pms_engine.scoring.grading import determine_grade
from pms_engine.scoring.period_score_calculator import PeriodScoreResult
from pms_engine.scoring.review_calculator import CompetencyScoreResult
from pms_engine.scoring.utils import Number

logger = structlog.get_logger(__name__)


class ScoringEngine:
    """Pure scoring calculations for the performance management system."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.weight_target = settings.WEIGHT_TARGET_TOTAL
        self.weight_tolerance = settings.WEIGHT_TOLERANCE
        self.under_performance_cutoff = settings.UNDER_PERFORMANCE_CUTOFF
        self.thresholds: Tuple[Decimal, ...] = tuple(settings.grade_thresholds)

    # ------------------------------------------------------------------
    # Grades
    # ------------------------------------------------------------------

    def determine_grade(self, score_percentage: Number) -> PerformanceGrade:
        return determine_grade(score_percentage, self.thresholds)

    # ------------------------------------------------------------------
    # Category weights
    # ------------------------------------------------------------------

    def calculate_weighted_category_score(self, scores: Sequence[CategoryScore]) -> Decimal:
        return category_calculator.calculate_weighted_category_score(
            scores,
            expected_total=self.weight_target,
            tolerance=self.weight_tolerance,
        )

    def validate_category_weights(self, weights: Iterable[Number]) -> None:
        category_calculator.validate_category_weights(
            weights,
            expected_total=self.weight_target,
            tolerance=self.weight_tolerance,
        )

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------

    def calculate_work_product_outcome(self, timeliness: Number, quality: Number, output: Number) -> Decimal:
        return period_score_calculator.calculate_work_product_outcome(timeliness, quality, output)

    def calculate_behavioral_review_average(self, ratings: Iterable[Number]) -> Decimal:
        return review_calculator.calculate_behavioral_review_average(ratings)

    def calculate_technical_weighted_score(
        self,
        self_avg: Number,
        supervisor_avg: Number,
        self_weight: Number,
        supervisor_weight: Number,
    ) -> Decimal:
        return review_calculator.calculate_technical_weighted_score(
            self_avg, supervisor_avg, self_weight, supervisor_weight
        )

    def calculate_competency_gap(self, expected: Number, actual: Number) -> Tuple[Decimal, bool]:
        return review_calculator.calculate_competency_gap(expected, actual)

    def calculate_competency_score(
        self,
        competency_id: str,
        ratings: Iterable[Number],
        expected_rating: Number,
    ) -> CompetencyScoreResult:
        return review_calculator.calculate_competency_score(competency_id, ratings, expected_rating)

    # ------------------------------------------------------------------
    # Period score
    # ------------------------------------------------------------------

    def apply_hrd_deduction(self, score: Number, deduction: Number) -> Decimal:
        return period_score_calculator.apply_hrd_deduction(score, deduction)

    def calculate_score_percentage(self, score: Number, max_points: Number) -> Decimal:
        return period_score_calculator.calculate_score_percentage(score, max_points)

    def calculate_period_score(
        self,
        work_product_score: Number,
        objective_score: Number,
        competency_score: Number,
        max_points: Number,
        hrd_deduction: Number = 0,
        category_breakdown: Optional[Sequence[CategoryScore]] = None,
    ) -> PeriodScoreResult:
        result = period_score_calculator.calculate_period_score(
            work_product_score,
            objective_score,
            competency_score,
            max_points,
            hrd_deduction,
            category_breakdown=category_breakdown,
            thresholds=self.thresholds,
            under_performance_cutoff=self.under_performance_cutoff,
        )

        logger.debug(
            "period_score_calculated",
            work_product_score=str(work_product_score),
            objective_score=str(objective_score),
            competency_score=str(competency_score),
            max_points=str(max_points),
            hrd_deduction=str(hrd_deduction),
            final_score=float(result.final_score),
            score_percentage=float(result.score_percentage),
            grade=result.grade.value,
            is_under_performing=result.is_under_performing,
        )
        return result
