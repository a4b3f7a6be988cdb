"""Month/weekday names, UI labels and numeral rendering for English and Arabic."""

from __future__ import annotations

from datetime import date

from hijri import gregorian_to_hijri

LANGUAGES: list[tuple[str, str]] = [
    ("en", "English"),
    ("ar", "العربية"),
]

_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_TO_ARABIC = str.maketrans("0123456789", _ARABIC_DIGITS)

GREGORIAN_MONTHS = {
    "en": ["January", "February", "March", "April", "May", "June",
           "July", "August", "September", "October", "November", "December"],
    "ar": ["يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
           "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"],
}

HIJRI_MONTHS = {
    "en": ["Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
           "Jumada al-awwal", "Jumada al-thani", "Rajab", "Sha'ban",
           "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah"],
    "ar": ["محرم", "صفر", "ربيع الأول", "ربيع الثاني",
           "جمادى الأولى", "جمادى الثانية", "رجب", "شعبان",
           "رمضان", "شوال", "ذو القعدة", "ذو الحجة"],
}

# Sunday first, matching the grid columns
WEEKDAYS_SHORT = {
    "en": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    "ar": ["أحد", "اثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"],
}

WEEKDAYS_FULL = {
    "en": ["Sunday", "Monday", "Tuesday", "Wednesday",
           "Thursday", "Friday", "Saturday"],
    "ar": ["الأحد", "الاثنين", "الثلاثاء", "الأربعاء",
           "الخميس", "الجمعة", "السبت"],
}

LABELS = {
    "en": {
        "title": "Dual Calendar",
        "subtitle": "Dual Calendar System",
        "gregorian": "Gregorian",
        "hijri": "Hijri",
        "era": "AH",
        "selected_date": "Selected Date",
        "today": "Today",
        "mark": "Mark Date",
        "unmark": "Unmark Date",
        "go_today": "Go to Today",
        "hijri_date": "Hijri Date",
        "select_year": "Select Year",
        "theme": "Theme",
    },
    "ar": {
        "title": "التقويم المزدوج",
        "subtitle": "نظام التقويم المزدوج",
        "gregorian": "ميلادي",
        "hijri": "هجري",
        "era": "هـ",
        "selected_date": "التاريخ المحدد",
        "today": "اليوم",
        "mark": "وضع علامة",
        "unmark": "إلغاء العلامة",
        "go_today": "اذهب إلى اليوم",
        "hijri_date": "التاريخ الهجري",
        "select_year": "اختر السنة",
        "theme": "المظهر",
    },
}

_RTL = {"ar"}


def _check(language: str) -> None:
    if language not in LABELS:
        raise ValueError(f"Unsupported language: {language!r}")


def to_arabic_numerals(num: int) -> str:
    """Render an integer with Arabic-Indic digits."""
    return str(num).translate(_TO_ARABIC)


def format_number(num: int, language: str) -> str:
    _check(language)
    return to_arabic_numerals(num) if language == "ar" else str(num)


def localize_digits(text: str, language: str) -> str:
    """Swap the Western digits inside *text* (e.g. a clock string)."""
    _check(language)
    return text.translate(_TO_ARABIC) if language == "ar" else text


def is_rtl(language: str) -> bool:
    _check(language)
    return language in _RTL


def label(key: str, language: str) -> str:
    _check(language)
    return LABELS[language][key]


def month_name(calendar_type: str, month: int, language: str) -> str:
    """Return the localized name of a 1-based month in the given calendar."""
    _check(language)
    table = HIJRI_MONTHS if calendar_type == "hijri" else GREGORIAN_MONTHS
    return table[language][month - 1]


def weekday_short(index: int, language: str) -> str:
    _check(language)
    return WEEKDAYS_SHORT[language][index]


def weekday_full(index: int, language: str) -> str:
    _check(language)
    return WEEKDAYS_FULL[language][index]


def marked_count_text(count: int, language: str) -> str:
    """Return e.g. '3 marked dates' / '٣ تاريخ محفوظ'."""
    _check(language)
    if language == "ar":
        return f"{to_arabic_numerals(count)} تاريخ محفوظ"
    return f"{count} marked date{'s' if count != 1 else ''}"


# Sunday-based weekday indices shown in the weekend colour
_WEEKEND = {
    "en": (0, 6),   # Sunday, Saturday
    "ar": (5, 6),   # Friday, Saturday
}


def weekend_days(language: str) -> tuple[int, ...]:
    _check(language)
    return _WEEKEND[language]


def today_caption(today: date, language: str = "en") -> str:
    """Gregorian and approximate Hijri date of *today*, e.g. for a tooltip."""
    h = gregorian_to_hijri(today)
    return (f"{format_number(today.day, language)} "
            f"{month_name('gregorian', today.month, language)} "
            f"{format_number(today.year, language)} / "
            f"{format_number(h.day, language)} {month_name('hijri', h.month, language)} "
            f"{format_number(h.year, language)} {label('era', language)}")
