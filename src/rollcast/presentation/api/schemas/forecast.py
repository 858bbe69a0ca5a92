"""Forecast schemas for API requests and responses."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from rollcast.application.dtos import ForecastRequest, ForecastResult
from rollcast.application.queries import assumptions_from_settings
from rollcast.domain.forecasting.services import (
    ProjectionSummary,
    ScenarioComparison,
)
from rollcast.domain.forecasting.value_objects import (
    ClientPaymentProjection,
    CollectionStatus,
    InvoiceRecord,
    ProjectionConfidence,
    ScenarioAdjustment,
    TimelineMode,
    TimelineWindow,
    WeekBucket,
    WeekStatus,
)
from rollcast.domain.shared.time import today_utc
from rollcast_config import Settings


class InvoiceRequest(BaseModel):
    """An outstanding invoice passed inline instead of read from a feed."""

    invoice_number: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1)
    due_date: date
    amount_due: Decimal
    status: str = "open"

    def to_domain(self) -> InvoiceRecord:
        return InvoiceRecord(**self.model_dump())


class CollectionAssumptionsRequest(BaseModel):
    current_on_time_pct: Decimal | None = Field(None, ge=0)
    overdue_collection_pct: Decimal | None = Field(None, ge=0)
    average_delay_days: int | None = Field(None, ge=0)
    collections_after_days: int | None = Field(None, ge=1)
    collections_rate_pct: Decimal | None = Field(None, ge=0)
    collections_delay_days: int | None = Field(None, ge=0)


class ForecastRequestSchema(BaseModel):
    """Timeline, balance and receivables of a forecast.

    Window sizes, the fixed week count and the scenario fall back to the
    configured defaults when omitted.
    """

    anchor_date: date | None = Field(None, description="Defaults to today")
    mode: TimelineMode = TimelineMode.ROLLING
    past_weeks: int | None = Field(None, ge=0, le=52)
    future_weeks: int | None = Field(None, ge=0, le=104)
    weeks: int | None = Field(None, ge=1, le=104, description="Fixed mode only")
    scenario: str | None = Field(None, min_length=1)
    starting_balance: Decimal | None = Field(
        None,
        description="Defaults to the latest balance reported on a statement",
    )
    balance_week: int = Field(
        0,
        description="Relative week whose opening balance is starting_balance",
    )
    invoices: list[InvoiceRequest] = Field(default_factory=list)
    assumptions: CollectionAssumptionsRequest | None = None
    today: date | None = Field(None, description="Overrides the status reference")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "anchor_date": "2024-01-15",
                "mode": "rolling",
                "past_weeks": 4,
                "future_weeks": 8,
                "scenario": "base",
                "starting_balance": "100000.00",
                "balance_week": -1,
            },
        },
    )

    def to_request(self, settings: Settings) -> ForecastRequest:
        if self.mode is TimelineMode.FIXED:
            window = TimelineWindow.fixed(self.weeks or settings.forecast_fixed_weeks)
        else:
            window = TimelineWindow.rolling(
                past_weeks=_or_default(self.past_weeks, settings.forecast_past_weeks),
                future_weeks=_or_default(
                    self.future_weeks,
                    settings.forecast_future_weeks,
                ),
            )

        assumptions = None
        if self.assumptions is not None:
            overrides = self.assumptions.model_dump(exclude_none=True)
            defaults = assumptions_from_settings(settings)
            assumptions = defaults.model_copy(update=overrides)

        return ForecastRequest(
            anchor_date=self.anchor_date or today_utc(),
            window=window,
            scenario=self.scenario or settings.forecast_default_scenario,
            starting_balance=self.starting_balance,
            balance_week=self.balance_week,
            invoices=tuple(invoice.to_domain() for invoice in self.invoices),
            assumptions=assumptions,
            today=self.today,
        )


class ScenarioComparisonRequest(ForecastRequestSchema):
    scenarios: list[str] | None = Field(
        None,
        description="Scenario names to compare, defaults to every stored scenario",
    )


class ScenarioAdjustmentRequest(BaseModel):
    name: str = Field(..., min_length=1)
    multiplier: Decimal = Field(..., ge=0)
    delay_days: int = 0
    confidence_override: ProjectionConfidence | None = None

    def to_domain(self) -> ScenarioAdjustment:
        return ScenarioAdjustment(**self.model_dump())


class ReceivablesOutlookRequest(ForecastRequestSchema):
    adjustments: list[ScenarioAdjustmentRequest] | None = Field(
        None,
        description="Defaults to the optimistic, realistic and pessimistic presets",
    )


class VarianceResponse(BaseModel):
    inflow_pct: Decimal
    outflow_pct: Decimal


class WeekBucketResponse(BaseModel):
    """One week of the forecast."""

    week_number: int
    week_start: date
    week_end: date
    status: WeekStatus
    actual_inflow: Decimal
    actual_outflow: Decimal
    estimated_inflow: Decimal
    estimated_outflow: Decimal
    projected_inflow: Decimal
    total_inflow: Decimal
    total_outflow: Decimal
    net_cashflow: Decimal
    running_balance: Decimal
    variance: VarianceResponse | None = None
    transaction_ids: list[str] = Field(default_factory=list)
    estimate_ids: list[str] = Field(default_factory=list)
    invoice_numbers: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, bucket: WeekBucket) -> "WeekBucketResponse":
        variance = None
        if bucket.variance is not None:
            variance = VarianceResponse(
                inflow_pct=bucket.variance.inflow_pct,
                outflow_pct=bucket.variance.outflow_pct,
            )
        return cls(
            week_number=bucket.week_number,
            week_start=bucket.week_start,
            week_end=bucket.week_end,
            status=bucket.status,
            actual_inflow=bucket.actual_inflow,
            actual_outflow=bucket.actual_outflow,
            estimated_inflow=bucket.estimated_inflow,
            estimated_outflow=bucket.estimated_outflow,
            projected_inflow=bucket.projected_inflow,
            total_inflow=bucket.total_inflow,
            total_outflow=bucket.total_outflow,
            net_cashflow=bucket.net_cashflow,
            running_balance=bucket.running_balance,
            variance=variance,
            transaction_ids=[tx.id for tx in bucket.transactions],
            estimate_ids=[estimate.id for estimate in bucket.estimates],
            invoice_numbers=[p.invoice_number for p in bucket.projections],
        )


class ProjectionResponse(BaseModel):
    invoice_number: str
    client_name: str
    expected_amount: Decimal
    original_amount: Decimal
    original_due_date: date
    estimated_collection_date: date
    confidence: ProjectionConfidence
    collection_status: CollectionStatus
    days_until_due: int
    days_overdue: int
    week_number: int

    @classmethod
    def from_domain(cls, projection: ClientPaymentProjection) -> "ProjectionResponse":
        return cls.model_validate(projection.model_dump())


class ProjectionSummaryResponse(BaseModel):
    total_expected: Decimal
    client_count: int
    invoice_count: int
    by_confidence: dict[str, Decimal]
    by_week: dict[int, Decimal]

    @classmethod
    def from_domain(cls, summary: ProjectionSummary) -> "ProjectionSummaryResponse":
        return cls(
            total_expected=summary.total_expected,
            client_count=summary.client_count,
            invoice_count=summary.invoice_count,
            by_confidence={
                confidence.value: amount
                for confidence, amount in summary.by_confidence.items()
            },
            by_week=dict(summary.by_week),
        )


class ForecastResponse(BaseModel):
    anchor_date: date
    scenario: str
    weeks: list[WeekBucketResponse]
    starting_balance: Decimal
    balance_week: int
    ending_balance: Decimal | None = None
    projections: list[ProjectionResponse] = Field(default_factory=list)
    projection_summary: ProjectionSummaryResponse | None = None

    @classmethod
    def from_dto(cls, result: ForecastResult) -> "ForecastResponse":
        summary = None
        if result.projection_summary is not None:
            summary = ProjectionSummaryResponse.from_domain(result.projection_summary)
        return cls(
            anchor_date=result.anchor_date,
            scenario=result.scenario,
            weeks=[WeekBucketResponse.from_domain(b) for b in result.buckets],
            starting_balance=result.starting_balance,
            balance_week=result.balance_week,
            ending_balance=result.ending_balance,
            projections=[ProjectionResponse.from_domain(p) for p in result.projections],
            projection_summary=summary,
        )


class ScenarioFiguresResponse(BaseModel):
    inflow: Decimal
    outflow: Decimal
    net: Decimal
    running_balance: Decimal


class ScenarioWeekResponse(BaseModel):
    week_number: int
    week_start: date
    week_end: date
    status: WeekStatus
    scenarios: dict[str, ScenarioFiguresResponse]


class ScenarioComparisonResponse(BaseModel):
    scenarios: list[str]
    weeks: list[ScenarioWeekResponse]

    @classmethod
    def from_domain(
        cls,
        comparison: ScenarioComparison,
    ) -> "ScenarioComparisonResponse":
        return cls(
            scenarios=list(comparison.scenarios),
            weeks=[
                ScenarioWeekResponse(
                    week_number=week.week_number,
                    week_start=week.week_start,
                    week_end=week.week_end,
                    status=week.status,
                    scenarios={
                        name: ScenarioFiguresResponse(
                            inflow=figures.inflow,
                            outflow=figures.outflow,
                            net=figures.net,
                            running_balance=figures.running_balance,
                        )
                        for name, figures in week.scenarios.items()
                    },
                )
                for week in comparison.weeks
            ],
        )


class ReceivablesOutlookResponse(BaseModel):
    """Week buckets of one scenario under each receivables adjustment."""

    scenario: str
    outlooks: dict[str, list[WeekBucketResponse]]


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value

