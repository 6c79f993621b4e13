# tests/test_scoring.py

"""
Scoring Engine Tests - grades, weights, reviews, deductions and period scores
"""

from decimal import Decimal

import pytest

from pms_engine.core.exceptions import (
    ErrorKind,
    NoScoreDataError,
    WeightsNotBalancedError,
    WeightValidationError,
    is_error_kind,
)
from pms_engine.models.enumerations import PerformanceGrade as G
from pms_engine.scoring.category_calculator import (
    CategoryScore,
    calculate_weighted_category_score,
    validate_category_weights,
)
from pms_engine.scoring.grading import determine_grade
from pms_engine.scoring.period_score_calculator import (
    apply_hrd_deduction,
    calculate_period_score,
    calculate_score_percentage,
    calculate_work_product_outcome,
)
from pms_engine.scoring.review_calculator import (
    calculate_behavioral_review_average,
    calculate_competency_gap,
    calculate_competency_score,
    calculate_technical_weighted_score,
)


# =============================================================================
# GRADES
# =============================================================================


class TestDetermineGrade:

    @pytest.mark.parametrize(
        "pct,expected",
        [
            ("29.99", G.PROBATION),
            ("30.00", G.DEVELOPING),
            ("49.99", G.DEVELOPING),
            ("50.00", G.PROGRESSIVE),
            ("65.99", G.PROGRESSIVE),
            ("66.00", G.COMPETENT),
            ("79.99", G.COMPETENT),
            ("80.00", G.ACCOMPLISHED),
            ("89.99", G.ACCOMPLISHED),
            ("90.00", G.EXEMPLARY),
        ],
    )
    def test_band_boundaries(self, pct, expected):
        assert determine_grade(Decimal(pct)) == expected

    def test_out_of_range_values_fall_into_outer_bands(self):
        assert determine_grade(-5) == G.PROBATION
        assert determine_grade(150) == G.EXEMPLARY

    def test_accepts_floats(self):
        assert determine_grade(65.99) == G.PROGRESSIVE

    def test_wrong_threshold_count(self):
        with pytest.raises(ValueError):
            determine_grade(50, thresholds=[Decimal("50")])


# =============================================================================
# CATEGORY WEIGHTS
# =============================================================================


class TestWeightedCategoryScore:

    def test_balanced_weights(self):
        scores = [CategoryScore.of("work", 70, 60), CategoryScore.of("obj", 30, 40)]
        assert calculate_weighted_category_score(scores) == Decimal("54")

    def test_unbalanced_weights(self):
        scores = [CategoryScore.of("work", 70, 50), CategoryScore.of("obj", 30, 40)]
        with pytest.raises(WeightValidationError) as exc_info:
            calculate_weighted_category_score(scores)

        err = exc_info.value
        assert err.expected_total == Decimal("100")
        assert err.actual_total == Decimal("90")
        assert err.category_id == "obj"
        assert isinstance(err, WeightsNotBalancedError)
        assert is_error_kind(err, ErrorKind.WEIGHTS_NOT_BALANCED)

    def test_empty_input(self):
        with pytest.raises(NoScoreDataError):
            calculate_weighted_category_score([])


class TestValidateCategoryWeights:

    def test_within_tolerance(self):
        validate_category_weights([30.005, 69.995])

    def test_outside_tolerance(self):
        with pytest.raises(WeightValidationError) as exc_info:
            validate_category_weights([30, 69.98])
        assert exc_info.value.actual_total == Decimal("99.98")

    def test_exactly_at_tolerance(self):
        validate_category_weights(["30", "69.99"])

    def test_message(self):
        with pytest.raises(WeightValidationError) as exc_info:
            validate_category_weights([50, 40], category_id="competency")
        assert "90.00%" in str(exc_info.value)
        assert "competency" in str(exc_info.value)


# =============================================================================
# REVIEWS
# =============================================================================


class TestReviewCalculations:

    def test_behavioral_average_skips_unrated(self):
        assert calculate_behavioral_review_average([0, 3, 0, 5]) == Decimal("4")

    def test_behavioral_average_empty(self):
        assert calculate_behavioral_review_average([]) == Decimal("0")

    def test_behavioral_average_all_zero(self):
        assert calculate_behavioral_review_average([0, 0]) == Decimal("0")

    def test_technical_weighted_score(self):
        assert calculate_technical_weighted_score(4, 3, 30, 70) == Decimal("3.3")

    @pytest.mark.parametrize(
        "expected,actual,gap,has_gap",
        [
            (5, 3, Decimal("2"), True),
            (3, 5, Decimal("0"), False),
            (4, 4, Decimal("0"), False),
        ],
    )
    def test_competency_gap(self, expected, actual, gap, has_gap):
        assert calculate_competency_gap(expected, actual) == (gap, has_gap)

    def test_competency_score(self):
        result = calculate_competency_score("C-01", [0, 3, 4, 0, 2], 4)
        assert result.competency_id == "C-01"
        assert result.average_rating == Decimal("3")
        assert result.gap == Decimal("1")
        assert result.has_gap is True


# =============================================================================
# PERIOD SCORE
# =============================================================================


class TestPeriodScore:

    def test_work_product_outcome(self):
        assert calculate_work_product_outcome(2, "1.5", 3) == Decimal("6.5")

    def test_hrd_deduction_floor(self):
        assert apply_hrd_deduction(3, 10) == Decimal("0")

    def test_hrd_deduction_none(self):
        assert apply_hrd_deduction(80, 0) == Decimal("80")

    def test_score_percentage(self):
        assert calculate_score_percentage(45, 60) == Decimal("75")

    @pytest.mark.parametrize("max_points", [0, -10])
    def test_score_percentage_without_max_points(self, max_points):
        assert calculate_score_percentage(45, max_points) == Decimal("0")

    def test_competent_period(self):
        result = calculate_period_score(40, 30, 10, 100, 5)
        assert result.final_score == Decimal("75")
        assert result.score_percentage == Decimal("75")
        assert result.grade == G.COMPETENT
        assert result.is_under_performing is False

    def test_probation_period(self):
        result = calculate_period_score(10, 10, 5, 100, 0)
        assert result.grade == G.PROBATION
        assert result.is_under_performing is True

    def test_zero_max_points(self):
        result = calculate_period_score(40, 30, 10, 0, 5)
        assert result.score_percentage == Decimal("0")
        assert result.grade == G.PROBATION

    def test_under_performance_boundary(self):
        assert calculate_period_score(25, 25, 0, 100).is_under_performing is False
        assert calculate_period_score("24.99", 25, 0, 100).is_under_performing is True

    def test_category_breakdown_is_kept(self):
        breakdown = [CategoryScore.of("work", 70, 60), CategoryScore.of("obj", 30, 40)]
        result = calculate_period_score(40, 30, 10, 100, category_breakdown=breakdown)
        assert result.category_breakdown == breakdown


# =============================================================================
# FACADE
# =============================================================================


class TestScoringEngine:

    def test_period_score(self, scoring_engine):
        result = scoring_engine.calculate_period_score(40, 30, 10, 100, 5)
        assert result.grade == G.COMPETENT

    def test_weighted_category_score(self, scoring_engine):
        scores = [CategoryScore.of("a", 70, 60), CategoryScore.of("b", 30, 40)]
        assert scoring_engine.calculate_weighted_category_score(scores) == Decimal("54")

    def test_validate_weights(self, scoring_engine):
        with pytest.raises(WeightValidationError):
            scoring_engine.validate_category_weights([30, 69.98])

    def test_delegates_reviews(self, scoring_engine):
        assert scoring_engine.calculate_behavioral_review_average([0, 3, 0, 5]) == Decimal("4")
        assert scoring_engine.calculate_technical_weighted_score(4, 3, 30, 70) == Decimal("3.3")
        assert scoring_engine.calculate_competency_gap(5, 3) == (Decimal("2"), True)
        assert scoring_engine.apply_hrd_deduction(3, 10) == Decimal("0")
        assert scoring_engine.calculate_work_product_outcome(1, 2, 3) == Decimal("6")
        assert scoring_engine.calculate_score_percentage(1, 0) == Decimal("0")
        assert scoring_engine.calculate_competency_score("C", [4], 5).has_gap is True

    def test_custom_thresholds(self):
        from pms_engine.config import Settings
        from pms_engine.scoring.engine import ScoringEngine

        strict = ScoringEngine(Settings(_env_file=None, GRADE_EXEMPLARY=Decimal("95")))
        assert strict.determine_grade(92) == G.ACCOMPLISHED
        assert strict.determine_grade(95) == G.EXEMPLARY

    def test_custom_tolerance(self):
        from pms_engine.config import Settings
        from pms_engine.scoring.engine import ScoringEngine

        loose = ScoringEngine(Settings(_env_file=None, WEIGHT_TOLERANCE=Decimal("0.5")))
        loose.validate_category_weights([30, 69.6])
