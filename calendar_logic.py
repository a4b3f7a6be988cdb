"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from datetime import date
from typing import NamedTuple

from hijri import hijri_month_length, hijri_to_gregorian

GREGORIAN = "gregorian"
HIJRI = "hijri"
CALENDAR_TYPES = (GREGORIAN, HIJRI)


class DayCell(NamedTuple):
    date: date | None
    is_blank: bool


_BLANK = DayCell(None, True)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given Gregorian month."""
    return calendar.monthrange(year, month)[1]


def sunday_weekday(d: date) -> int:
    """Return the weekday index with Sunday=0 .. Saturday=6."""
    return (d.weekday() + 1) % 7


def first_weekday(year: int, month: int) -> int:
    """Return the Sunday-based weekday of the 1st of the month."""
    return sunday_weekday(date(year, month, 1))


def build_gregorian_month(year: int, month: int) -> list[DayCell]:
    """Return leading blanks followed by one cell per day of the month."""
    cells = [_BLANK] * first_weekday(year, month)
    cells.extend(
        DayCell(date(year, month, day), False)
        for day in range(1, days_in_month(year, month) + 1)
    )
    return cells


def build_hijri_month(hijri_year: int, hijri_month: int) -> list[DayCell]:
    """Return the cells for a Hijri month, addressed by Gregorian dates.

    The leading blank count is the weekday of the Gregorian equivalent of
    Hijri day 1.
    """
    length = hijri_month_length(hijri_month)
    first = hijri_to_gregorian(hijri_year, hijri_month, 1)
    cells = [_BLANK] * sunday_weekday(first)
    cells.extend(
        DayCell(hijri_to_gregorian(hijri_year, hijri_month, day), False)
        for day in range(1, length + 1)
    )
    return cells


def build_month(calendar_type: str, year: int, month: int) -> list[DayCell]:
    """Dispatch to the grid builder for *calendar_type*."""
    if calendar_type == GREGORIAN:
        return build_gregorian_month(year, month)
    if calendar_type == HIJRI:
        return build_hijri_month(year, month)
    raise ValueError(f"Unknown calendar type: {calendar_type!r}")


def week_rows(cells: list[DayCell]) -> list[list[DayCell]]:
    """Chunk cells into a 6×7 grid.

    Trailing slots are blank. Always 6 rows so the calendar height stays
    constant.
    """
    grid: list[list[DayCell]] = []
    row: list[DayCell] = []
    for cell in cells:
        row.append(cell)
        if len(row) == 7:
            grid.append(row)
            row = []
    if row:
        row.extend([_BLANK] * (7 - len(row)))
        grid.append(row)
    # Pad to exactly 6 rows
    while len(grid) < 6:
        grid.append([_BLANK] * 7)
    return grid


def date_key(d: date) -> str:
    """Return the canonical 'YYYY-MM-DD' key used for marked dates."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date | None:
    """Parse a 'YYYY-MM-DD' key, returning None when it is malformed.

    Only keys that ``date_key`` would produce are accepted (zero-padded,
    ASCII digits).
    """
    try:
        parsed = date.fromisoformat(key)
    except ValueError:
        return None
    if date_key(parsed) != key:
        return None
    return parsed


def year_options(center: int) -> list[int]:
    """Return the years offered by the year picker (100 back, 10 ahead)."""
    return list(range(center - 100, center + 11))


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
