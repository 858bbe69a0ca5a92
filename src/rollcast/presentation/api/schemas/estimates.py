"""Estimate schemas for API requests and responses."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.value_objects import (
    DEFAULT_SCENARIO,
    Estimate,
    RecurringPeriod,
    week_start_for,
)


class EstimateCreateRequest(BaseModel):
    """Request to create an estimate.

    The week is given either as any date inside it (``week_start``) or as a
    relative ``week_number`` against ``anchor_date``.
    """

    amount: Decimal = Field(..., ge=0, description="Non-negative magnitude")
    direction: TransactionDirection
    category: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    week_start: date | None = Field(None, description="Any day of the target week")
    week_number: int | None = Field(
        None,
        description="Relative week number, used together with anchor_date",
    )
    anchor_date: date | None = None
    scenario: str = Field(default=DEFAULT_SCENARIO, min_length=1)
    notes: str | None = None
    recurring_period: RecurringPeriod | None = None
    monthly_day_of_month: int | None = Field(None, ge=1, le=31)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "5000.00",
                "direction": "inflow",
                "category": "Customer Payments",
                "description": "Retainer ACME",
                "week_number": 1,
                "anchor_date": "2024-01-15",
                "scenario": "base",
            },
        },
    )

    @model_validator(mode="after")
    def _resolve_week(self) -> "EstimateCreateRequest":
        if self.week_start is not None:
            return self
        if self.week_number is None or self.anchor_date is None:
            msg = "Provide week_start or both week_number and anchor_date"
            raise ValueError(msg)
        self.week_start = week_start_for(self.anchor_date, self.week_number)
        return self


class EstimateUpdateRequest(BaseModel):
    """Partial update; only fields present in the request are changed."""

    amount: Decimal | None = Field(None, ge=0)
    direction: TransactionDirection | None = None
    category: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    week_start: date | None = None
    scenario: str | None = Field(None, min_length=1)
    notes: str | None = None
    recurring_period: RecurringPeriod | None = None
    monthly_day_of_month: int | None = Field(None, ge=1, le=31)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EstimateResponse(BaseModel):
    id: str
    amount: Decimal
    direction: TransactionDirection
    category: str
    description: str
    notes: str | None = None
    week_start: date
    scenario: str
    is_recurring: bool
    recurring_period: RecurringPeriod | None = None
    monthly_day_of_month: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, estimate: Estimate) -> "EstimateResponse":
        return cls.model_validate(estimate.model_dump())


class EstimateListResponse(BaseModel):
    estimates: list[EstimateResponse]
    count: int
    scenarios: list[str] = Field(description="Distinct scenario names, base first")
