"""
Monday-aligned week arithmetic for the meal-plan calendar.
"""

from datetime import date, datetime, timedelta
from typing import List, Union

from domain.enums import WeekDirection

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def monday_of(reference: DateLike) -> date:
    """Return the Monday on or before `reference` (Sunday rolls back six days)."""
    day = _as_date(reference)
    dow = (day.weekday() + 1) % 7  # Sunday=0 .. Saturday=6
    offset = -6 if dow == 0 else 1 - dow
    return day + timedelta(days=offset)


def this_week(today: DateLike) -> date:
    return monday_of(today)


def week_end(week_start: date) -> date:
    return week_start + timedelta(days=6)


def week_dates(week_start: date) -> List[date]:
    return [week_start + timedelta(days=i) for i in range(7)]


def shift(week_start: date, direction: Union[WeekDirection, str]) -> date:
    """Move a week start one week back or forward."""
    if isinstance(direction, str) and not isinstance(direction, WeekDirection):
        direction = {"previous": WeekDirection.PREVIOUS}.get(direction) or WeekDirection(direction)
    step = 7 if direction is WeekDirection.NEXT else -7
    return week_start + timedelta(days=step)


def range_label(week_start: date) -> str:
    """
    Human readable week range.

    "3 - 9 Jun 2024" when the week stays in one month,
    "27 May - 2 Jun 2024" when it crosses into the next.
    """
    end = week_end(week_start)
    start_month = MONTH_ABBR[week_start.month - 1]
    end_month = MONTH_ABBR[end.month - 1]

    if start_month == end_month:
        return f"{week_start.day} - {end.day} {start_month} {week_start.year}"
    return f"{week_start.day} {start_month} - {end.day} {end_month} {week_start.year}"
