"""
Helpers the day/week views apply on top of the recurrence engine.

They take the task lists produced by ``rotina.recurrence`` and narrow or
regroup them; none of them looks at dates.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..calendar_math import DateLike
from ..core import config
from ..recurrence import tasks_on_date
from ..schemas import Period, Task

logger = logging.getLogger(__name__)

TaskId = Union[int, str]


@dataclass(frozen=True)
class DayStats:
    total: int   # essential (non-optional) tasks
    done: int    # essential tasks already checked
    all: int     # every task, optional included


def filter_by_period(tasks: Iterable[Task], period: Period) -> List[Task]:
    return [task for task in tasks if period in task.periods]


def filter_by_person(tasks: Iterable[Task], person: Optional[str]) -> List[Task]:
    """Tasks for ``person``; shared tasks count for everyone. None means all."""
    if person is None:
        return list(tasks)
    return [
        task for task in tasks
        if task.primary_person in (person, config.SHARED_PERSON)
    ]


def group_by_category(tasks: Iterable[Task]) -> List[Tuple[Optional[str], List[Task]]]:
    """Group tasks by category, keeping first-seen category order."""
    groups: Dict[Optional[str], List[Task]] = {}
    for task in tasks:
        groups.setdefault(task.category, []).append(task)
    return list(groups.items())


def day_stats(
    tasks: Iterable[Task],
    person: Optional[str],
    is_checked: Callable[[TaskId], bool],
) -> DayStats:
    filtered = filter_by_person(tasks, person)
    essential = [task for task in filtered if not task.optional]
    done = sum(1 for task in essential if is_checked(task.id))
    return DayStats(total=len(essential), done=done, all=len(filtered))


def agenda_for_date(
    target: DateLike,
    tasks: Iterable[Task],
    person: Optional[str] = None,
    period: Optional[Period] = None,
) -> List[Task]:
    """Tasks due on ``target``, narrowed to a person and/or period."""
    due = filter_by_person(tasks_on_date(target, tasks), person)
    if period is not None:
        due = filter_by_period(due, period)
    logger.debug(f"agenda_for_date {target}: {len(due)} tasks (person={person}, period={period})")
    return due
