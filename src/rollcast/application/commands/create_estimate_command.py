"""Create a cashflow estimate."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import ValidationError as ModelValidationError

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.exceptions import InvalidEstimateError
from rollcast.domain.forecasting.value_objects import (
    DEFAULT_SCENARIO,
    Estimate,
    RecurringPeriod,
)

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.forecasting.repositories import EstimateRepository

logger = logging.getLogger(__name__)


class CreateEstimateCommand:
    """Validate and store a new estimate."""

    def __init__(self, estimate_repository: EstimateRepository):
        self._estimate_repo = estimate_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateEstimateCommand:
        return cls(estimate_repository=factory.estimate_repository())

    async def execute(  # NOQA: PLR0913
        self,
        amount: Decimal,
        direction: TransactionDirection,
        category: str,
        description: str,
        week_start: date,
        scenario: str = DEFAULT_SCENARIO,
        notes: str | None = None,
        recurring_period: RecurringPeriod | None = None,
        monthly_day_of_month: int | None = None,
    ) -> Estimate:
        try:
            estimate = Estimate(
                amount=amount,
                direction=direction,
                category=category,
                description=description,
                week_start=week_start,
                scenario=scenario,
                notes=notes,
                is_recurring=recurring_period is not None,
                recurring_period=recurring_period,
                monthly_day_of_month=monthly_day_of_month,
            )
        except ModelValidationError as e:
            raise InvalidEstimateError.from_validation(e) from e

        await self._estimate_repo.save(estimate)
        logger.info(
            "Created estimate %s in scenario %s for week %s",
            estimate.id,
            estimate.scenario,
            estimate.week_start,
        )
        return estimate
