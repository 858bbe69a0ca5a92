"""Query comparing several scenarios over the same timeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rollcast.application.dtos import ForecastRequest
from rollcast.application.queries.rolling_forecast_query import RollingForecastQuery
from rollcast.domain.forecasting.services import ScenarioComparison, ScenarioOverlay

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.banking.repositories import TransactionRepository
    from rollcast.domain.forecasting.repositories import EstimateRepository
    from rollcast_config import Settings


class ScenarioComparisonQuery:
    """Aggregate each requested scenario and line the weeks up side by side."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        estimate_repository: EstimateRepository,
        forecast_query: RollingForecastQuery,
        overlay: ScenarioOverlay | None = None,
    ):
        self._transaction_repo = transaction_repository
        self._estimate_repo = estimate_repository
        self._forecast_query = forecast_query
        self._overlay = overlay or ScenarioOverlay()

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        settings: Settings | None = None,
    ) -> ScenarioComparisonQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            estimate_repository=factory.estimate_repository(),
            forecast_query=RollingForecastQuery.from_factory(factory, settings),
        )

    async def execute(
        self,
        request: ForecastRequest,
        scenarios: Sequence[str] | None = None,
    ) -> ScenarioComparison:
        """
        Compare scenarios.

        Parameters
        ----------
        request
            Timeline, balance and invoices shared by every scenario; its
            ``scenario`` field is ignored
        scenarios
            Names to compare, defaults to every stored scenario
        """
        request = await self._forecast_query.with_feed_invoices(request)
        transactions = await self._transaction_repo.find_all()
        estimates = await self._estimate_repo.find_all()
        timeline = self._forecast_query.timeline_for(request)
        starting_balance, balance_week = self._forecast_query.balance_for(
            request,
            timeline,
            transactions,
        )
        return self._overlay.compare(
            timeline,
            transactions,
            estimates,
            scenarios=scenarios,
            projections=self._forecast_query.projections_for(request),
            starting_balance=starting_balance,
            balance_week=balance_week,
        )
