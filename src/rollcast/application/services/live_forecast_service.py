"""Keep a forecast current while the stored data changes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from rollcast.application.dtos import ForecastRequest, ForecastResult
from rollcast.application.queries import RollingForecastQuery
from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.services import filter_estimates
from rollcast.domain.forecasting.value_objects import Estimate

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.domain.banking.repositories import TransactionRepository
    from rollcast.domain.forecasting.repositories import EstimateRepository
    from rollcast_config import Settings

logger = logging.getLogger(__name__)

ForecastListener = Callable[[ForecastResult], None]


class ForecastSubscription:
    """State of one watched forecast.

    Each store push replaces the whole cached collection; the forecast is
    then recomputed from scratch.
    """

    def __init__(
        self,
        request: ForecastRequest,
        query: RollingForecastQuery,
        listener: ForecastListener,
    ):
        self._request = request
        self._query = query
        self._listener = listener
        self._transactions: list[Transaction] = []
        self._estimates: list[Estimate] = []
        self._unsubscribers: list[Callable[[], None]] = []
        self.latest: ForecastResult | None = None

    def load(self, transactions: list[Transaction], estimates: list[Estimate]) -> None:
        self._transactions = list(transactions)
        self._estimates = filter_estimates(estimates, self._request.scenario)
        self._recompute()

    def attach(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribers.append(unsubscribe)

    def replace_transactions(self, transactions: list[Transaction]) -> None:
        self._transactions = list(transactions)
        self._recompute()

    def replace_estimates(self, estimates: list[Estimate]) -> None:
        self._estimates = filter_estimates(estimates, self._request.scenario)
        self._recompute()

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _recompute(self) -> None:
        self.latest = self._query.compute(
            self._request,
            self._transactions,
            self._estimates,
        )
        self._listener(self.latest)


class LiveForecastService:
    """Recompute a forecast on every transaction or estimate change."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        estimate_repository: EstimateRepository,
        forecast_query: RollingForecastQuery,
    ):
        self._transaction_repo = transaction_repository
        self._estimate_repo = estimate_repository
        self._forecast_query = forecast_query

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        settings: Settings | None = None,
    ) -> LiveForecastService:
        return cls(
            transaction_repository=factory.transaction_repository(),
            estimate_repository=factory.estimate_repository(),
            forecast_query=RollingForecastQuery.from_factory(factory, settings),
        )

    async def watch(
        self,
        request: ForecastRequest,
        listener: ForecastListener,
    ) -> ForecastSubscription:
        """Compute the forecast once, then again after every store push.

        Call ``close()`` on the returned subscription to stop.
        """
        request = await self._forecast_query.with_feed_invoices(request)
        subscription = ForecastSubscription(request, self._forecast_query, listener)
        subscription.load(
            await self._transaction_repo.find_all(),
            await self._estimate_repo.find_all(),
        )
        subscription.attach(
            self._transaction_repo.subscribe(subscription.replace_transactions),
        )
        subscription.attach(
            self._estimate_repo.subscribe(subscription.replace_estimates),
        )
        logger.debug("Watching forecast for scenario %s", request.scenario)
        return subscription
