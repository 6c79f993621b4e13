"""
Review-period planning guards
pms_engine/planning.py

Pure checks run by review-period and objective services before they
persist anything:
    validate_range_value   - quarter / half / year index for a period range
    get_period_bounds      - first and last instant of a period (UTC)
    check_objective_limit  - objectives planned vs. the period maximum
"""

import calendar
from datetime import datetime, timezone
from typing import Dict, Tuple

from pms_engine.core.exceptions import ObjectiveLimitError, RangeValueError
from pms_engine.models.enumerations import ReviewPeriodRange

# Highest valid range value per period range; values start at 1
MAX_RANGE_VALUE: Dict[ReviewPeriodRange, int] = {
    ReviewPeriodRange.QUARTERLY: 4,
    ReviewPeriodRange.BI_ANNUAL: 2,
    ReviewPeriodRange.ANNUAL: 1,
}

# Months covered by one range value
_MONTHS_PER_VALUE: Dict[ReviewPeriodRange, int] = {
    ReviewPeriodRange.QUARTERLY: 3,
    ReviewPeriodRange.BI_ANNUAL: 6,
    ReviewPeriodRange.ANNUAL: 12,
}


def validate_range_value(period_range: ReviewPeriodRange, value: int) -> None:
    """
    Raises:
        RangeValueError: ``value`` is outside 1..max for ``period_range``.
        ValueError: ``period_range`` is not a known ReviewPeriodRange.
    """
    period_range = ReviewPeriodRange(period_range)
    max_value = MAX_RANGE_VALUE[period_range]
    if value < 1 or value > max_value:
        raise RangeValueError(period_range=period_range, value=value, max_value=max_value)


def get_period_bounds(year: int, period_range: ReviewPeriodRange, value: int) -> Tuple[datetime, datetime]:
    """
    Start (00:00:00) and end (23:59:59 on the last day) of a review period.

    Examples:
        >>> start, end = get_period_bounds(2025, ReviewPeriodRange.QUARTERLY, 2)
        >>> start.date().isoformat(), end.date().isoformat()
        ('2025-04-01', '2025-06-30')
    """
    validate_range_value(period_range, value)
    span = _MONTHS_PER_VALUE[ReviewPeriodRange(period_range)]

    start_month = (value - 1) * span + 1
    end_month = value * span
    last_day = calendar.monthrange(year, end_month)[1]

    start = datetime(year, start_month, 1, tzinfo=timezone.utc)
    end = datetime(year, end_month, last_day, 23, 59, 59, tzinfo=timezone.utc)
    return start, end


def check_objective_limit(
    max_objectives: int,
    current: int,
    staff_id: str = "",
    period_id: str = "",
) -> None:
    """Raise ObjectiveLimitError when ``current`` exceeds ``max_objectives``."""
    if current > max_objectives:
        raise ObjectiveLimitError(
            max_objectives=max_objectives,
            current=current,
            staff_id=staff_id,
            period_id=period_id,
        )
