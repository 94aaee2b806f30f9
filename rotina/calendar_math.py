# rotina/calendar_math.py
"""
Calendar arithmetic used by the recurrence engine.

Every helper works on calendar fields (year, month, day). Nothing here
subtracts timestamps, so results do not drift across daylight-saving
transitions. Weekday indices follow the 0=Sunday..6=Saturday convention
used by stored rules.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta, MO, TU, WE, TH, FR, SA, SU

DateLike = Union[date, datetime]

# Indexed 0=Sunday..6=Saturday
_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def js_weekday(d: DateLike) -> int:
    """Weekday index with Sunday as 0."""
    return as_date(d).isoweekday() % 7


def days_between(a: DateLike, b: DateLike) -> int:
    return as_date(b).toordinal() - as_date(a).toordinal()


def week_start(d: DateLike) -> date:
    """Monday on or before ``d``."""
    d = as_date(d)
    return d - timedelta(days=d.weekday())


def weeks_between(a: DateLike, b: DateLike) -> int:
    return days_between(week_start(a), week_start(b)) // 7


def months_between(a: DateLike, b: DateLike) -> int:
    a, b = as_date(a), as_date(b)
    return (b.year - a.year) * 12 + (b.month - a.month)


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp day to the last valid day of the given year/month."""
    return min(day, last_day_of_month(year, month))


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> Optional[int]:
    """
    Day-of-month of the ``n``-th ``weekday`` in a month.

    ``n`` is 1..5 for first through fifth, -1 for last. Returns None when the
    month has no such occurrence (e.g. a fifth Monday) or the arguments are
    out of range.
    """
    if not 0 <= weekday <= 6:
        return None
    if n == -1:
        delta = relativedelta(day=31, weekday=_WEEKDAYS[weekday](-1))
    elif 1 <= n <= 5:
        delta = relativedelta(weekday=_WEEKDAYS[weekday](n))
    else:
        return None
    try:
        found = date(year, month, 1) + delta
    except OverflowError:
        # Stepped past date.max: December 9999 has no such occurrence
        return None
    if found.month != month:
        return None
    return found.day


def month_days(year: int, month: int) -> List[date]:
    return [date(year, month, day) for day in range(1, last_day_of_month(year, month) + 1)]
