"""
Data-entry boundary for recurrence rules.

The engine itself accepts any well-typed rule and resolves nonsense to
"never matches". Editors and importers call into this module when a rule is
created or replaced so that a misconfigured task is rejected up front
instead of silently vanishing from every view.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple, Union

from pydantic import ValidationError

from .errors import InvalidConfiguration
from .schemas import (
    MonthlyRule,
    RecurrenceIn,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
)

logger = logging.getLogger(__name__)

VALID_WEEKS_OF_MONTH = (-1, 1, 2, 3, 4, 5)


def _check_day_of_month(value, errors: List[Tuple[str, str]]) -> None:
    if value is not None and not 1 <= value <= 31:
        errors.append(("day_of_month", f"must be between 1 and 31, got {value}"))


def _rule_errors(rule: RecurrenceRule) -> List[Tuple[str, str]]:
    errors: List[Tuple[str, str]] = []

    if isinstance(rule, WeeklyRule):
        if not rule.days_of_week:
            errors.append(("days_of_week", "weekly rule needs at least one weekday"))
        bad = [d for d in rule.days_of_week if not 0 <= d <= 6]
        if bad:
            errors.append(("days_of_week", f"weekday indices must be 0..6, got {bad}"))

    elif isinstance(rule, MonthlyRule):
        if rule.week_of_month is None and rule.day_of_month is None:
            errors.append(("day_of_month", "monthly rule needs a day of month or a week of month"))
        if rule.week_of_month is not None:
            if rule.week_of_month not in VALID_WEEKS_OF_MONTH:
                errors.append(("week_of_month", f"must be 1..5 or -1, got {rule.week_of_month}"))
            if len(rule.days_of_week) != 1:
                errors.append(("days_of_week", "week of month needs exactly one weekday"))
            elif not 0 <= rule.days_of_week[0] <= 6:
                errors.append(("days_of_week", f"weekday index must be 0..6, got {rule.days_of_week[0]}"))
        _check_day_of_month(rule.day_of_month, errors)

    elif isinstance(rule, YearlyRule):
        if rule.month_of_year is None:
            errors.append(("month_of_year", "yearly rule needs a month"))
        elif not 1 <= rule.month_of_year <= 12:
            errors.append(("month_of_year", f"must be between 1 and 12, got {rule.month_of_year}"))
        if rule.day_of_month is None:
            errors.append(("day_of_month", "yearly rule needs a day of month"))
        _check_day_of_month(rule.day_of_month, errors)

    return errors


def validate_rule(rule: RecurrenceRule) -> RecurrenceRule:
    """Return ``rule`` unchanged, or raise InvalidConfiguration."""
    errors = _rule_errors(rule)
    if errors:
        logger.warning(f"Rejected {rule.type} recurrence: {errors}")
        raise InvalidConfiguration(f"invalid {rule.type} recurrence", errors)
    if isinstance(rule, MonthlyRule) and rule.uses_weekday_ordinal and rule.day_of_month is not None:
        logger.debug("Monthly recurrence has both forms; week of month takes precedence")
    return rule


def parse_rule(payload: Union[RecurrenceIn, Mapping[str, Any]], strict: bool = True) -> RecurrenceRule:
    """Build a RecurrenceRule from an editor payload or stored row.

    Type errors (unknown kind, ``interval`` below 1, non-integer fields) are
    always rejected. With ``strict`` the rule must also be well formed; without
    it underspecified rules pass through and will simply never match.
    """
    try:
        if not isinstance(payload, RecurrenceIn):
            payload = RecurrenceIn.model_validate(payload)
        rule = payload.to_rule()
    except ValidationError as exc:
        errors = [
            (".".join(str(part) for part in err["loc"]) or "recurrence", err["msg"])
            for err in exc.errors()
        ]
        logger.warning(f"Rejected recurrence payload: {errors}")
        raise InvalidConfiguration("invalid recurrence payload", errors) from exc

    if strict:
        validate_rule(rule)
    return rule
