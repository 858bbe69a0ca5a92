"""Computed week bucket of the rolling timeline."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.value_objects.client_payment_projection import (
    ClientPaymentProjection,
)
from rollcast.domain.forecasting.value_objects.estimate import Estimate
from rollcast.domain.forecasting.value_objects.week_status import WeekStatus

ZERO = Decimal("0")


class EstimateVariance(BaseModel):
    """Percentage deviation of actuals from estimates in an elapsed week."""

    inflow_pct: Decimal = ZERO
    outflow_pct: Decimal = ZERO

    model_config = ConfigDict(frozen=True)


class WeekBucket(BaseModel):
    """One week of actual, estimated and projected flows.

    Past weeks total actuals only. Current and future weeks add estimates
    and projections on top of the actuals already posted.
    """

    week_number: int
    week_start: date
    week_end: date
    status: WeekStatus
    actual_inflow: Decimal = ZERO
    actual_outflow: Decimal = ZERO
    estimated_inflow: Decimal = ZERO
    estimated_outflow: Decimal = ZERO
    projected_inflow: Decimal = ZERO
    total_inflow: Decimal = ZERO
    total_outflow: Decimal = ZERO
    net_cashflow: Decimal = ZERO
    running_balance: Decimal = ZERO
    variance: EstimateVariance | None = None
    transactions: tuple[Transaction, ...] = ()
    estimates: tuple[Estimate, ...] = ()
    projections: tuple[ClientPaymentProjection, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not (self.transactions or self.estimates or self.projections)
