from datetime import date, datetime
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..calendar_math import as_date
from .recurrences import RecurrenceIn, RecurrenceRule

Period = Literal["MA", "TA", "NO"]   # morning | afternoon | night


class Task(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: Union[int, str]
    name: str = ""
    recurrence: RecurrenceRule
    created_at: Union[datetime, date]
    category: Optional[str] = None
    primary_person: Optional[str] = None
    optional: bool = False
    periods: Tuple[Period, ...] = ()

    @field_validator("recurrence", mode="before")
    @classmethod
    def _from_stored_row(cls, value):
        # Stored rows carry every column, null where unused
        if isinstance(value, dict):
            return RecurrenceIn.model_validate(value).to_rule()
        return value

    @property
    def anchor(self) -> date:
        """Calendar date that interval counting starts from."""
        return as_date(self.created_at)

    @property
    def kind(self) -> str:
        return self.recurrence.type
