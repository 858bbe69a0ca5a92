"""User-authored cashflow estimate."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.value_objects.week_timeline import week_start_for
from rollcast.domain.shared.time import monday_of, utc_now

DEFAULT_SCENARIO = "base"


class RecurringPeriod(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class Estimate(BaseModel):
    """A forecast line item placed in one week of one scenario.

    The week anchor is the Monday ``week_start`` of the week the estimate
    belongs to; relative week numbers are always derived from it against a
    timeline anchor and never stored. Any date passed as ``week_start`` is
    snapped back to its Monday.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    amount: Decimal = Field(..., ge=0)
    direction: TransactionDirection
    category: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    notes: str | None = None
    week_start: date
    scenario: str = Field(default=DEFAULT_SCENARIO, min_length=1)
    is_recurring: bool = False
    recurring_period: RecurringPeriod | None = None
    monthly_day_of_month: int | None = Field(default=None, ge=1, le=31)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("week_start")
    @classmethod
    def _snap_to_monday(cls, value: date) -> date:
        return monday_of(value)

    @model_validator(mode="after")
    def _validate_recurrence(self) -> "Estimate":
        if self.is_recurring and self.recurring_period is None:
            msg = "Recurring estimates need a recurring_period"
            raise ValueError(msg)
        return self

    @classmethod
    def in_week(cls, anchor: date, week_number: int, **fields: Any) -> "Estimate":
        """Create an estimate addressed by relative week number."""
        return cls(week_start=week_start_for(anchor, week_number), **fields)

    @property
    def is_inflow(self) -> bool:
        return self.direction is TransactionDirection.INFLOW

    def updated(self, **changes: Any) -> "Estimate":
        """Return a validated copy with ``changes`` applied and a new timestamp.

        ``id``, ``created_at`` cannot be changed.
        """
        changes.pop("id", None)
        changes.pop("created_at", None)
        data = self.model_dump()
        data.update(changes)
        data["updated_at"] = utc_now()
        return Estimate.model_validate(data)

    def occurring_in(self, week_start: date) -> "Estimate":
        """Copy of a recurring estimate placed in another week."""
        return self.model_copy(update={"week_start": monday_of(week_start)})
