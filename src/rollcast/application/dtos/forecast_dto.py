"""DTOs for forecast requests and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from rollcast.domain.forecasting.services import ProjectionSummary
from rollcast.domain.forecasting.value_objects import (
    DEFAULT_SCENARIO,
    ClientPaymentProjection,
    CollectionAssumptions,
    InvoiceRecord,
    TimelineWindow,
    WeekBucket,
)


@dataclass(frozen=True)
class ForecastRequest:
    """Parameters of one forecast computation.

    Without a ``starting_balance`` the balance is derived from the latest
    balance reported on an imported statement, and ``balance_week`` is
    ignored.
    """

    anchor_date: date
    window: TimelineWindow = field(default_factory=TimelineWindow.rolling)
    scenario: str = DEFAULT_SCENARIO
    starting_balance: Decimal | None = None
    balance_week: int = 0
    invoices: tuple[InvoiceRecord, ...] = ()
    assumptions: CollectionAssumptions | None = None
    today: date | None = None


@dataclass(frozen=True)
class ForecastResult:
    """Filled week buckets plus the projections that went into them."""

    anchor_date: date
    scenario: str
    buckets: list[WeekBucket]
    projections: list[ClientPaymentProjection] = field(default_factory=list)
    projection_summary: ProjectionSummary | None = None
    starting_balance: Decimal = Decimal("0")
    balance_week: int = 0

    @property
    def ending_balance(self) -> Decimal | None:
        if not self.buckets:
            return None
        return self.buckets[-1].running_balance

    @property
    def week_count(self) -> int:
        return len(self.buckets)
