# tests/test_planning.py

"""
Planning Guard Tests - review-period ranges, period bounds, objective limits
"""

from datetime import datetime, timezone

import pytest

from pms_engine.core.exceptions import ErrorKind, ObjectiveLimitError, RangeValueError, is_error_kind
from pms_engine.models.enumerations import ReviewPeriodRange as R
from pms_engine.planning import check_objective_limit, get_period_bounds, validate_range_value


class TestValidateRangeValue:

    @pytest.mark.parametrize(
        "period_range,value",
        [(R.QUARTERLY, 1), (R.QUARTERLY, 4), (R.BI_ANNUAL, 2), (R.ANNUAL, 1)],
    )
    def test_valid(self, period_range, value):
        validate_range_value(period_range, value)

    @pytest.mark.parametrize(
        "period_range,value,max_value",
        [
            (R.QUARTERLY, 5, 4),
            (R.QUARTERLY, 0, 4),
            (R.BI_ANNUAL, 3, 2),
            (R.ANNUAL, 2, 1),
        ],
    )
    def test_invalid(self, period_range, value, max_value):
        with pytest.raises(RangeValueError) as exc_info:
            validate_range_value(period_range, value)
        err = exc_info.value
        assert err.value == value
        assert err.max_value == max_value
        assert err.period_range == period_range
        assert is_error_kind(err, ErrorKind.INVALID_RANGE_VALUE)

    def test_accepts_raw_range(self):
        validate_range_value(1, 3)

    def test_unknown_range(self):
        with pytest.raises(ValueError):
            validate_range_value(7, 1)


class TestGetPeriodBounds:

    def test_second_quarter(self):
        start, end = get_period_bounds(2025, R.QUARTERLY, 2)
        assert start == datetime(2025, 4, 1, tzinfo=timezone.utc)
        assert end == datetime(2025, 6, 30, 23, 59, 59, tzinfo=timezone.utc)

    def test_first_half_of_leap_year(self):
        start, end = get_period_bounds(2024, R.BI_ANNUAL, 1)
        assert start.month == 1
        assert end == datetime(2024, 6, 30, 23, 59, 59, tzinfo=timezone.utc)

    def test_first_quarter_leap_february_not_end(self):
        _, end = get_period_bounds(2024, R.QUARTERLY, 1)
        assert end.date().isoformat() == "2024-03-31"

    def test_annual(self):
        start, end = get_period_bounds(2023, R.ANNUAL, 1)
        assert start == datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert end == datetime(2023, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

    def test_rejects_bad_value(self):
        with pytest.raises(RangeValueError):
            get_period_bounds(2023, R.BI_ANNUAL, 3)


class TestObjectiveLimit:

    def test_at_limit(self):
        check_objective_limit(5, 5, staff_id="S-1", period_id="P-1")

    def test_over_limit(self):
        with pytest.raises(ObjectiveLimitError) as exc_info:
            check_objective_limit(5, 6, staff_id="S-1", period_id="P-1")
        err = exc_info.value
        assert (err.max, err.current, err.staff_id, err.period_id) == (5, 6, "S-1", "P-1")
