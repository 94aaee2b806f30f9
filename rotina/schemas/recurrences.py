from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

RuleType = Literal["none", "daily", "weekly", "monthly", "yearly"]
RULE_TYPES: Tuple[str, ...] = ("none", "daily", "weekly", "monthly", "yearly")


class RuleBase(BaseModel):
    """Fields shared by every recurrence kind.

    Rules are values: frozen, compared and hashed by their fields. Stored
    rows use camelCase column names, so both spellings are accepted.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    interval: int = Field(default=1, ge=1)  # every N days/weeks/months


class NoneRule(RuleBase):
    type: Literal["none"] = "none"


class DailyRule(RuleBase):
    type: Literal["daily"] = "daily"


class WeeklyRule(RuleBase):
    type: Literal["weekly"] = "weekly"
    days_of_week: Tuple[int, ...] = ()        # 0=Sun..6=Sat


class MonthlyRule(RuleBase):
    type: Literal["monthly"] = "monthly"
    day_of_month: Optional[int] = None        # 1..31, clamped to month length
    week_of_month: Optional[int] = None       # 1..5, or -1 = last
    days_of_week: Tuple[int, ...] = ()        # first entry used with week_of_month

    @property
    def uses_weekday_ordinal(self) -> bool:
        return self.week_of_month is not None and len(self.days_of_week) > 0


class YearlyRule(RuleBase):
    type: Literal["yearly"] = "yearly"
    month_of_year: Optional[int] = None       # 1..12
    day_of_month: Optional[int] = None        # 1..31, clamped to month length


RecurrenceRule = Annotated[
    Union[NoneRule, DailyRule, WeeklyRule, MonthlyRule, YearlyRule],
    Field(discriminator="type"),
]

rule_adapter: TypeAdapter = TypeAdapter(RecurrenceRule)


class RecurrenceIn(BaseModel):
    """Flat rule payload as sent by the task editor or read from storage.

    Carries every column regardless of kind; ``to_rule`` keeps only the
    fields that belong to the declared type.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: RuleType
    interval: Optional[int] = None
    days_of_week: Optional[List[int]] = None
    day_of_month: Optional[int] = None
    month_of_year: Optional[int] = None
    week_of_month: Optional[int] = None

    def to_rule(self) -> RecurrenceRule:
        data = {
            "type": self.type,
            "interval": self.interval if self.interval is not None else 1,
        }
        if self.type in ("weekly", "monthly") and self.days_of_week:
            data["days_of_week"] = tuple(self.days_of_week)
        if self.type in ("monthly", "yearly"):
            data["day_of_month"] = self.day_of_month
        if self.type == "monthly":
            data["week_of_month"] = self.week_of_month
        if self.type == "yearly":
            data["month_of_year"] = self.month_of_year
        return rule_adapter.validate_python(data)
