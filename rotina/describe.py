# rotina/describe.py
"""
Human-readable descriptions of recurrence rules.

Presentation only: nothing in here affects matching. Phrases are kept per
locale; English is the default and Portuguese mirrors the wording of the
household app the rules were first written for.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence

from .core import config
from .schemas import (
    DailyRule,
    MonthlyRule,
    NoneRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
)

_EN_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th", 5: "5th"}

LOCALES: Dict[str, Dict] = {
    "en": {
        "day_short": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "day_ordinal": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
        "months": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                   "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
        "ordinal": lambda n: _EN_ORDINALS.get(n, f"{n}th"),
        "last": "last",
        "none": "no set date",
        "every_day": "every day",
        "every_n_days": "every {n} days",
        "weekly": "weekly",
        "every_days": "every {days}",
        "every_n_weeks": "every {n} weeks",
        "every_n_months": "every {n} months",
        "of_month": "of month",
        "month_day": "day {day} of every month",
        "month_day_every": "{base}, day {day}",
        "monthly": "monthly",
        "yearly_on": "{month} {day} every year",
        "yearly": "yearly",
    },
    "pt": {
        "day_short": ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sab"],
        "day_ordinal": ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sab"],
        "months": ["Janeiro", "Fevereiro", "Marco", "Abril", "Maio", "Junho",
                   "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro"],
        "ordinal": lambda n: f"{n}o",
        "last": "Ultimo",
        "none": "Sem data definida",
        "every_day": "Todo dia",
        "every_n_days": "A cada {n} dias",
        "weekly": "Semanal",
        "every_days": "Toda {days}",
        "every_n_weeks": "A cada {n} semanas",
        "every_n_months": "A cada {n} meses",
        "of_month": "do mes",
        "month_day": "Dia {day} de cada mes",
        "month_day_every": "{base}, dia {day}",
        "monthly": "Mensal",
        "yearly_on": "{day} de {month} todo ano",
        "yearly": "Anual",
    },
}


def _name(names: Sequence[str], index: int) -> str:
    if 0 <= index < len(names):
        return names[index]
    return str(index)


def _describe_weekly(rule: WeeklyRule, phrases: Dict) -> str:
    days = ", ".join(_name(phrases["day_short"], d) for d in rule.days_of_week)
    if rule.interval <= 1:
        if len(set(rule.days_of_week)) == 7:
            return phrases["every_day"]
        return phrases["every_days"].format(days=days) if days else phrases["weekly"]
    text = phrases["every_n_weeks"].format(n=rule.interval)
    return f"{text} ({days})" if days else text


def _describe_monthly(rule: MonthlyRule, phrases: Dict) -> str:
    base = phrases["every_n_months"].format(n=rule.interval) if rule.interval > 1 else ""

    if rule.uses_weekday_ordinal:
        if rule.week_of_month == -1:
            ordinal = phrases["last"]
        else:
            ordinal = phrases["ordinal"](rule.week_of_month)
        day = _name(phrases["day_ordinal"], rule.days_of_week[0])
        return f"{ordinal} {day} {base or phrases['of_month']}"

    if rule.day_of_month is not None:
        if base:
            return phrases["month_day_every"].format(base=base, day=rule.day_of_month)
        return phrases["month_day"].format(day=rule.day_of_month)

    return base or phrases["monthly"]


def describe(rule: RecurrenceRule, locale: Optional[str] = None) -> str:
    """Phrase such as ``every 2 weeks (Sat)`` or ``1st Saturday of month``."""
    phrases = LOCALES.get(locale or config.DEFAULT_LOCALE, LOCALES["en"])

    if isinstance(rule, NoneRule):
        return phrases["none"]
    if isinstance(rule, DailyRule):
        if rule.interval <= 1:
            return phrases["every_day"]
        return phrases["every_n_days"].format(n=rule.interval)
    if isinstance(rule, WeeklyRule):
        return _describe_weekly(rule, phrases)
    if isinstance(rule, MonthlyRule):
        return _describe_monthly(rule, phrases)
    if isinstance(rule, YearlyRule):
        if rule.month_of_year is None or rule.day_of_month is None:
            return phrases["yearly"]
        if 1 <= rule.month_of_year <= 12:
            month = phrases["months"][rule.month_of_year - 1]
        else:
            month = str(rule.month_of_year)
        return phrases["yearly_on"].format(month=month, day=rule.day_of_month)
    return ""
