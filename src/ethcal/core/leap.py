from __future__ import annotations

from typing import Tuple


def is_gregorian_leap(year: int) -> bool:
    """Proleptic Gregorian leap rule, astronomical year numbering (year 0 is leap)."""
    return (year % 4 == 0) and ((year % 100 != 0) or (year % 400 == 0))


def is_ethiopian_leap(year: int) -> bool:
    """The year before every fourth year carries a sixth Pagume day."""
    return year % 4 == 3


def gregorian_month_lengths(year: int) -> Tuple[int, ...]:
    """Month lengths for ``year``, index 0 = January. Built fresh on every call."""
    feb = 29 if is_gregorian_leap(year) else 28
    return (31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def ethiopian_month_length(year: int, month: int) -> int:
    if month == 13:
        return 6 if is_ethiopian_leap(year) else 5
    return 30
