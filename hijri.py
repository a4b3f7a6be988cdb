"""Approximate Gregorian <-> Hijri conversion — no UI dependencies.

Both directions use fixed linear scaling, not a lunar table, and they are
computed independently: converting a date there and back does not always
return the starting date.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import NamedTuple

_YEAR_RATIO = 1.030684
_MONTH_RATIO = 0.970224
_EPOCH_YEAR = 622

# Alternating 30/29, not tied to year or leap rules
_MONTH_LENGTHS = [30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29]


class HijriDate(NamedTuple):
    year: int
    month: int
    day: int


def gregorian_to_hijri(d: date) -> HijriDate:
    """Return the approximate Hijri (year, month, day) for a Gregorian date."""
    h_year = math.floor((d.year - _EPOCH_YEAR) * _YEAR_RATIO + 0.5)
    h_month = math.floor((d.month - 1) * _MONTH_RATIO + 1)
    h_day = math.floor(d.day * _MONTH_RATIO)

    if h_month > 12:
        h_month -= 12
        h_year += 1
    if h_month < 1:
        h_month += 12
        h_year -= 1
    h_day = max(1, min(30, h_day))
    return HijriDate(h_year, h_month, h_day)


def hijri_to_gregorian(year: int, month: int, day: int) -> date:
    """Return the approximate Gregorian date for a Hijri (year, month, day).

    Out-of-range month or day values produced by the scaling are not
    normalised; they roll over into the following months/years.
    """
    g_year = math.floor((year - 1) / _YEAR_RATIO + _EPOCH_YEAR)
    g_month = math.floor((month - 1) / _MONTH_RATIO + 1)
    g_day = math.floor(day / _MONTH_RATIO)
    return _rollover_date(g_year, g_month, g_day)


def _rollover_date(year: int, month: int, day: int) -> date:
    """Build a date, letting month and day overflow carry forward (or back)."""
    carry, month_index = divmod(month - 1, 12)
    first = date(year + carry, month_index + 1, 1)
    return first + timedelta(days=day - 1)


def hijri_month_length(month: int) -> int:
    """Return 30 for odd months and 29 for even months (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Hijri month out of range: {month}")
    return _MONTH_LENGTHS[month - 1]
