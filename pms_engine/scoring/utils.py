"""
Decimal Utilities
pms_engine/scoring/utils.py

Precision-safe conversions shared by the scoring calculators.
"""

from decimal import Decimal
from typing import Iterable, List, Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal through ``str`` so floats keep their printed value."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimals(values: Iterable[Number]) -> List[Decimal]:
    return [to_decimal(v) for v in values]


def floor_at_zero(value: Decimal) -> Decimal:
    """Return ``value`` or zero, whichever is larger."""
    return max(ZERO, value)
