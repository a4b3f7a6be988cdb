"""Tests for month grid construction and navigation helpers."""

from datetime import date

import pytest

from calendar_logic import (
    DayCell,
    build_gregorian_month,
    build_hijri_month,
    build_month,
    date_key,
    first_weekday,
    next_month,
    parse_date_key,
    prev_month,
    week_rows,
    year_options,
)
from hijri import hijri_month_length


def _blanks(cells):
    return sum(1 for c in cells if c.is_blank)


def test_first_weekday_is_sunday_based():
    assert first_weekday(2024, 9) == 0   # Sunday
    assert first_weekday(2024, 2) == 4   # Thursday


def test_gregorian_february_leap_year():
    cells = build_gregorian_month(2024, 2)
    days = [c for c in cells if not c.is_blank]

    assert _blanks(cells) == 4
    assert len(days) == 29
    assert days[0].date == date(2024, 2, 1)
    assert days[-1].date == date(2024, 2, 29)
    # blanks only lead
    assert all(c.is_blank for c in cells[:4])
    assert all(c.date is None for c in cells[:4])


def test_gregorian_month_starting_on_sunday_has_no_blanks():
    cells = build_gregorian_month(2024, 9)
    assert _blanks(cells) == 0
    assert len(cells) == 30


def test_hijri_month_cell_count_matches_length():
    for year in (1400, 1445, 1446, 1460):
        for month in range(1, 13):
            cells = build_hijri_month(year, month)
            assert len(cells) - _blanks(cells) == hijri_month_length(month)


def test_hijri_month_uses_gregorian_addresses():
    cells = build_hijri_month(1446, 1)
    # 2023-01-01 was a Sunday
    assert _blanks(cells) == 0
    assert cells[0] == DayCell(date(2023, 1, 1), False)
    assert cells[-1].date == date(2023, 1, 30)


def test_hijri_month_rolls_over_short_gregorian_month():
    cells = build_hijri_month(1446, 2)
    # 2023-02-01 was a Wednesday
    assert _blanks(cells) == 3
    assert cells[-1].date == date(2023, 3, 1)


def test_build_month_dispatch():
    assert build_month("gregorian", 2024, 2) == build_gregorian_month(2024, 2)
    assert build_month("hijri", 1446, 2) == build_hijri_month(1446, 2)
    with pytest.raises(ValueError):
        build_month("julian", 2024, 2)


def test_week_rows_always_six_by_seven():
    # February 2015 starts on Sunday and fills exactly four rows
    grid = week_rows(build_gregorian_month(2015, 2))
    assert len(grid) == 6
    assert all(len(row) == 7 for row in grid)
    assert all(c.is_blank for row in grid[4:] for c in row)
    assert grid[0][0].date == date(2015, 2, 1)


def test_week_rows_pads_partial_last_row():
    grid = week_rows(build_gregorian_month(2024, 2))
    # 4 blanks + 29 days = 33 cells -> last row has 5 days then 2 blanks
    assert grid[4][4].date == date(2024, 2, 29)
    assert grid[4][5].is_blank and grid[4][6].is_blank


def test_date_key_is_zero_padded():
    assert date_key(date(2024, 3, 5)) == "2024-03-05"


@pytest.mark.parametrize("key", ["", "abc", "2024-02-30", "2024-13-01", "2024-03", "24-3-x",
                                 "2024-3-5", "٢٠٢٤-٠٣-٠٥", "20240305", "2024-03-05T00:00"])
def test_parse_date_key_rejects_malformed(key):
    assert parse_date_key(key) is None


def test_parse_date_key_accepts_canonical():
    assert parse_date_key("2024-02-29") == date(2024, 2, 29)


def test_year_options_range():
    years = year_options(2026)
    assert years[0] == 1926
    assert years[-1] == 2036
    assert len(years) == 111


def test_month_navigation_wraps():
    assert prev_month(2024, 1) == (2023, 12)
    assert next_month(2024, 12) == (2025, 1)
    assert prev_month(2024, 6) == (2024, 5)
    assert next_month(2024, 6) == (2024, 7)
