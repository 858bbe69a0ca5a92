"""Edit an existing cashflow estimate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as ModelValidationError

from rollcast.domain.forecasting.exceptions import (
    EstimateNotFoundError,
    InvalidEstimateError,
)
from rollcast.domain.forecasting.value_objects import Estimate

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.forecasting.repositories import EstimateRepository

logger = logging.getLogger(__name__)


class UpdateEstimateCommand:
    """Apply field changes to an estimate; the id and creation time never change."""

    def __init__(self, estimate_repository: EstimateRepository):
        self._estimate_repo = estimate_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateEstimateCommand:
        return cls(estimate_repository=factory.estimate_repository())

    async def execute(self, estimate_id: str, **changes: Any) -> Estimate:
        existing = await self._estimate_repo.find_by_id(estimate_id)
        if existing is None:
            raise EstimateNotFoundError(estimate_id)

        if "recurring_period" in changes:
            changes["is_recurring"] = changes["recurring_period"] is not None

        try:
            estimate = existing.updated(**changes)
        except ModelValidationError as e:
            raise InvalidEstimateError.from_validation(e, estimate_id) from e

        await self._estimate_repo.save(estimate)
        logger.info("Updated estimate %s (%s)", estimate_id, ", ".join(sorted(changes)))
        return estimate
