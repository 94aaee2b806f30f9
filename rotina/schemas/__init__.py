from .recurrences import (
    RULE_TYPES,
    RuleBase,
    NoneRule,
    DailyRule,
    WeeklyRule,
    MonthlyRule,
    YearlyRule,
    RecurrenceRule,
    RecurrenceIn,
    rule_adapter,
)

from .tasks import (
    Period,
    Task,
)
