"""Tests for numeral rendering and localized tables."""

from datetime import date

import pytest

import locale_text
from locale_text import (
    format_number,
    is_rtl,
    label,
    localize_digits,
    marked_count_text,
    month_name,
    to_arabic_numerals,
    today_caption,
    weekday_full,
    weekday_short,
    weekend_days,
)


def test_arabic_indic_digits():
    assert to_arabic_numerals(2024) == "٢٠٢٤"
    assert to_arabic_numerals(0) == "٠"
    assert to_arabic_numerals(-7) == "-٧"


def test_format_number_by_language():
    assert format_number(1445, "en") == "1445"
    assert format_number(1445, "ar") == "١٤٤٥"


def test_localize_digits_keeps_separators():
    assert localize_digits("09:05:30", "ar") == "٠٩:٠٥:٣٠"
    assert localize_digits("09:05:30", "en") == "09:05:30"


def test_rtl_only_for_arabic():
    assert is_rtl("ar")
    assert not is_rtl("en")


def test_month_and_weekday_names():
    assert month_name("hijri", 9, "en") == "Ramadan"
    assert month_name("gregorian", 1, "ar") == "يناير"
    assert weekday_short(0, "en") == "Sun"
    assert weekday_full(5, "ar") == "الجمعة"


def test_tables_are_complete():
    for lang in ("en", "ar"):
        assert len(locale_text.GREGORIAN_MONTHS[lang]) == 12
        assert len(locale_text.HIJRI_MONTHS[lang]) == 12
        assert len(locale_text.WEEKDAYS_SHORT[lang]) == 7
        assert len(locale_text.WEEKDAYS_FULL[lang]) == 7
    assert locale_text.LABELS["en"].keys() == locale_text.LABELS["ar"].keys()


def test_marked_count_text():
    assert marked_count_text(1, "en") == "1 marked date"
    assert marked_count_text(3, "en") == "3 marked dates"
    assert marked_count_text(3, "ar") == "٣ تاريخ محفوظ"


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError):
        format_number(1, "fr")
    with pytest.raises(ValueError):
        label("title", "fr")


def test_weekend_days_follow_language():
    assert [weekday_short(i, "en") for i in weekend_days("en")] == ["Sun", "Sat"]
    assert [weekday_full(i, "ar") for i in weekend_days("ar")] == ["الجمعة", "السبت"]
    with pytest.raises(ValueError):
        weekend_days("fr")


def test_today_caption_tracks_the_date():
    assert today_caption(date(2024, 3, 15)) == "15 March 2024 / 14 Safar 1445 AH"
    assert today_caption(date(2024, 3, 16)) != today_caption(date(2024, 3, 15))
    assert today_caption(date(2024, 3, 15), "ar") == "١٥ مارس ٢٠٢٤ / ١٤ صفر ١٤٤٥ هـ"
