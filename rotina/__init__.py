"""Recurrence resolution for recurring household tasks."""

from .errors import InvalidConfiguration, RotinaError
from .schemas import (
    DailyRule,
    MonthlyRule,
    NoneRule,
    RecurrenceIn,
    RecurrenceRule,
    Task,
    WeeklyRule,
    YearlyRule,
)
from .recurrence import (
    appears_on,
    matches,
    tasks_by_month_day,
    tasks_by_weekday,
    tasks_on_date,
)
from .describe import describe
from .validation import parse_rule, validate_rule

__version__ = "0.3.0"
