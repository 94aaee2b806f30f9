# rotina/recurrence.py
"""
Recurrence resolution: decides which tasks are due on a given date.

Everything here is a pure function of its arguments. Tasks come in from
whatever persistence layer the caller uses; this module only filters them
by calendar arithmetic and never caches, mutates or raises for a
well-typed rule. Underspecified rules (a monthly rule with neither form
filled in, a weekly rule with no days) simply never match.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List

from .calendar_math import (
    DateLike,
    as_date,
    clamp_day,
    days_between,
    js_weekday,
    month_days,
    months_between,
    nth_weekday_of_month,
    weeks_between,
)
from .schemas import (
    DailyRule,
    MonthlyRule,
    NoneRule,
    RecurrenceRule,
    Task,
    WeeklyRule,
    YearlyRule,
)

logger = logging.getLogger(__name__)

# Kinds hidden from the coarser views: they would fill every cell
WEEK_VIEW_EXCLUDED = frozenset({"daily"})
MONTH_VIEW_EXCLUDED = frozenset({"daily", "weekly"})

# --------- Matcher ---------


def _interval_ok(elapsed: int, interval: int) -> bool:
    if interval <= 1:
        return True
    return elapsed >= 0 and elapsed % interval == 0


def _match_daily(rule: DailyRule, anchor: date, target: date) -> bool:
    if rule.interval <= 1:
        return True
    return _interval_ok(days_between(anchor, target), rule.interval)


def _match_weekly(rule: WeeklyRule, anchor: date, target: date) -> bool:
    if js_weekday(target) not in rule.days_of_week:
        return False
    if rule.interval <= 1:
        return True
    return _interval_ok(weeks_between(anchor, target), rule.interval)


def _match_monthly(rule: MonthlyRule, anchor: date, target: date) -> bool:
    if rule.interval > 1 and not _interval_ok(months_between(anchor, target), rule.interval):
        return False

    if rule.uses_weekday_ordinal:
        wanted = nth_weekday_of_month(
            target.year, target.month, rule.days_of_week[0], rule.week_of_month
        )
        return wanted is not None and target.day == wanted

    if rule.day_of_month is not None:
        return target.day == clamp_day(target.year, target.month, rule.day_of_month)

    return False


def _match_yearly(rule: YearlyRule, target: date) -> bool:
    if rule.month_of_year is None or rule.day_of_month is None:
        return False
    if target.month != rule.month_of_year:
        return False
    return target.day == clamp_day(target.year, target.month, rule.day_of_month)


def matches(rule: RecurrenceRule, anchor: DateLike, target: DateLike) -> bool:
    """True when ``rule``, counted from ``anchor``, is due on ``target``."""
    anchor = as_date(anchor)
    target = as_date(target)

    if isinstance(rule, NoneRule):
        return False
    if isinstance(rule, DailyRule):
        return _match_daily(rule, anchor, target)
    if isinstance(rule, WeeklyRule):
        return _match_weekly(rule, anchor, target)
    if isinstance(rule, MonthlyRule):
        return _match_monthly(rule, anchor, target)
    if isinstance(rule, YearlyRule):
        return _match_yearly(rule, target)
    return False


def appears_on(task: Task, target: DateLike) -> bool:
    return matches(task.recurrence, task.anchor, target)

# --------- Range expansion ---------


def tasks_on_date(target: DateLike, tasks: Iterable[Task]) -> List[Task]:
    """Tasks due on ``target``, in input order."""
    target = as_date(target)
    return [task for task in tasks if appears_on(task, target)]


def _bucket(
    days: Iterable[date],
    tasks: List[Task],
    excluded: frozenset,
    key: Callable[[date], int],
) -> Dict[int, List[Task]]:
    candidates = [task for task in tasks if task.recurrence.type not in excluded]
    result: Dict[int, List[Task]] = {}
    for day in days:
        due = tasks_on_date(day, candidates)
        if due:
            result[key(day)] = due
    return result


def tasks_by_weekday(week_start: DateLike, tasks: Iterable[Task]) -> Dict[int, List[Task]]:
    """
    Tasks for the 7 days starting at ``week_start``, keyed by day offset
    (0 = ``week_start``). Daily tasks are left out and empty days omitted.
    """
    start = as_date(week_start)
    days = [start + timedelta(days=offset) for offset in range(7)]
    result = _bucket(days, list(tasks), WEEK_VIEW_EXCLUDED, lambda d: days_between(start, d))
    logger.debug(f"tasks_by_weekday {start.isoformat()}: {len(result)} non-empty days")
    return result


def tasks_by_month_day(year: int, month: int, tasks: Iterable[Task]) -> Dict[int, List[Task]]:
    """
    Tasks for each day of a month (``month`` is 1-based), keyed by
    day-of-month. Daily and weekly tasks are left out and empty days omitted.
    """
    result = _bucket(month_days(year, month), list(tasks), MONTH_VIEW_EXCLUDED, lambda d: d.day)
    logger.debug(f"tasks_by_month_day {year:04d}-{month:02d}: {len(result)} non-empty days")
    return result
