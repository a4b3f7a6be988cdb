"""Session state and the pure transitions the window drives it with.

The window never mutates state in place: every user action becomes an event,
``apply(state, event)`` returns the next state, and ``persistence_writes``
tells the caller which settings entries changed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from calendar_logic import (
    CALENDAR_TYPES,
    GREGORIAN,
    HIJRI,
    DayCell,
    build_month,
    date_key,
    days_in_month,
    next_month,
    prev_month,
    year_options,
)
from hijri import HijriDate, gregorian_to_hijri, hijri_to_gregorian
from locale_text import LABELS


@dataclass(frozen=True)
class CalendarState:
    current: date              # Gregorian anchor (year, month shown)
    hijri_anchor: HijriDate    # Hijri anchor, authoritative in the Hijri view
    selected: date
    marked: frozenset[str]
    language: str = "en"
    calendar_type: str = GREGORIAN
    dark_mode: bool = False


# --- events -----------------------------------------------------------------

@dataclass(frozen=True)
class NavigateMonth:
    direction: int  # -1 previous, +1 next


@dataclass(frozen=True)
class ChangeYear:
    year: int


@dataclass(frozen=True)
class SelectDate:
    date: date


@dataclass(frozen=True)
class ToggleMark:
    pass


@dataclass(frozen=True)
class SetLanguage:
    language: str


@dataclass(frozen=True)
class SetCalendarType:
    calendar_type: str


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class GoToday:
    today: date


# --- construction -------------------------------------------------------------

def initial_state(settings: dict, today: date) -> CalendarState:
    """Build the startup state from loaded settings."""
    return CalendarState(
        current=today,
        hijri_anchor=gregorian_to_hijri(today),
        selected=today,
        marked=frozenset(settings.get("marked_dates", [])),
        language=settings.get("language", "en"),
        calendar_type=settings.get("calendar_type", GREGORIAN),
        dark_mode=bool(settings.get("dark_mode", False)),
    )


# --- transitions ----------------------------------------------------------------

def _with_day_clamped(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, days_in_month(year, month)))


def _reanchor_hijri(state: CalendarState, year: int, month: int) -> CalendarState:
    # Gregorian anchor follows the Hijri month's first day so both stay in step
    return replace(
        state,
        hijri_anchor=HijriDate(year, month, 1),
        current=hijri_to_gregorian(year, month, 1),
    )


def navigate_month(state: CalendarState, direction: int) -> CalendarState:
    step = prev_month if direction < 0 else next_month
    if state.calendar_type == HIJRI:
        y, m = step(state.hijri_anchor.year, state.hijri_anchor.month)
        return _reanchor_hijri(state, y, m)
    y, m = step(state.current.year, state.current.month)
    return replace(state, current=_with_day_clamped(y, m, state.current.day))


def change_year(state: CalendarState, year: int) -> CalendarState:
    if state.calendar_type == HIJRI:
        return _reanchor_hijri(state, year, state.hijri_anchor.month)
    cur = state.current
    return replace(state, current=_with_day_clamped(year, cur.month, cur.day))


def toggle_mark(state: CalendarState) -> CalendarState:
    key = date_key(state.selected)
    if key in state.marked:
        return replace(state, marked=state.marked - {key})
    return replace(state, marked=state.marked | {key})


def set_language(state: CalendarState, language: str) -> CalendarState:
    if language not in LABELS:
        raise ValueError(f"Unsupported language: {language!r}")
    return replace(state, language=language)


def set_calendar_type(state: CalendarState, calendar_type: str) -> CalendarState:
    if calendar_type not in CALENDAR_TYPES:
        raise ValueError(f"Unknown calendar type: {calendar_type!r}")
    if calendar_type == HIJRI and state.calendar_type != HIJRI:
        state = replace(state, hijri_anchor=gregorian_to_hijri(state.current))
    return replace(state, calendar_type=calendar_type)


def go_today(state: CalendarState, today: date) -> CalendarState:
    return replace(
        state,
        current=today,
        selected=today,
        hijri_anchor=gregorian_to_hijri(today),
    )


def apply(state: CalendarState, event) -> CalendarState:
    """Return the state that follows *event*."""
    if isinstance(event, NavigateMonth):
        return navigate_month(state, event.direction)
    if isinstance(event, ChangeYear):
        return change_year(state, event.year)
    if isinstance(event, SelectDate):
        return replace(state, selected=event.date)
    if isinstance(event, ToggleMark):
        return toggle_mark(state)
    if isinstance(event, SetLanguage):
        return set_language(state, event.language)
    if isinstance(event, SetCalendarType):
        return set_calendar_type(state, event.calendar_type)
    if isinstance(event, ToggleTheme):
        return replace(state, dark_mode=not state.dark_mode)
    if isinstance(event, GoToday):
        return go_today(state, event.today)
    raise TypeError(f"Unknown event: {event!r}")


# --- derived views ----------------------------------------------------------------

def visible_month(state: CalendarState) -> tuple[int, int]:
    """Return the (year, month) shown in the active calendar."""
    if state.calendar_type == HIJRI:
        return state.hijri_anchor.year, state.hijri_anchor.month
    return state.current.year, state.current.month


def visible_grid(state: CalendarState) -> list[DayCell]:
    """Recompute the day cells for the current anchor."""
    year, month = visible_month(state)
    return build_month(state.calendar_type, year, month)


def picker_years(state: CalendarState, today: date) -> list[int]:
    """Years for the year picker, centred on today's year in the active calendar."""
    if state.calendar_type == HIJRI:
        return year_options(gregorian_to_hijri(today).year)
    return year_options(today.year)


def persistence_writes(old: CalendarState, new: CalendarState) -> dict:
    """Return the settings entries whose value changed between two states."""
    writes: dict = {}
    if old.marked != new.marked:
        writes["marked_dates"] = sorted(new.marked)
    if old.language != new.language:
        writes["language"] = new.language
    if old.calendar_type != new.calendar_type:
        writes["calendar_type"] = new.calendar_type
    if old.dark_mode != new.dark_mode:
        writes["dark_mode"] = new.dark_mode
    return writes
