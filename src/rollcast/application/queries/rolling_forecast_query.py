"""Query for the rolling week forecast of one scenario."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal
from typing import TYPE_CHECKING

from rollcast.application.dtos import ForecastRequest, ForecastResult
from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.services import (
    ProjectionBuilder,
    RollingWeekGenerator,
    ScenarioOverlay,
    derive_balance_anchor,
    summarize_projections,
)
from rollcast.domain.forecasting.value_objects import (
    ClientPaymentProjection,
    CollectionAssumptions,
    Estimate,
    WeekTimeline,
)

if TYPE_CHECKING:
    from rollcast.application.factories import RepositoryFactory
    from rollcast.application.ports import ReceivablesFeed
    from rollcast.domain.banking.repositories import TransactionRepository
    from rollcast.domain.forecasting.repositories import EstimateRepository
    from rollcast_config import Settings

logger = logging.getLogger(__name__)


def assumptions_from_settings(settings: Settings) -> CollectionAssumptions:
    return CollectionAssumptions(
        current_on_time_pct=settings.receivables_current_on_time_pct,
        overdue_collection_pct=settings.receivables_overdue_collection_pct,
        average_delay_days=settings.receivables_average_delay_days,
        collections_after_days=settings.receivables_collections_after_days,
        collections_rate_pct=settings.receivables_collections_rate_pct,
        collections_delay_days=settings.receivables_collections_delay_days,
    )


class RollingForecastQuery:
    """Load transactions and estimates, then fill the rolling timeline.

    ``compute`` is the pure half and is reused by live recomputation.
    """

    def __init__(  # NOQA: PLR0913
        self,
        transaction_repository: TransactionRepository,
        estimate_repository: EstimateRepository,
        generator: RollingWeekGenerator | None = None,
        overlay: ScenarioOverlay | None = None,
        assumptions: CollectionAssumptions | None = None,
        receivables_feed: ReceivablesFeed | None = None,
    ):
        self._transaction_repo = transaction_repository
        self._estimate_repo = estimate_repository
        self._generator = generator or RollingWeekGenerator()
        self._overlay = overlay or ScenarioOverlay()
        self._assumptions = assumptions or CollectionAssumptions()
        self._receivables_feed = receivables_feed

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        settings: Settings | None = None,
        receivables_feed: ReceivablesFeed | None = None,
    ) -> RollingForecastQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            estimate_repository=factory.estimate_repository(),
            assumptions=assumptions_from_settings(settings) if settings else None,
            receivables_feed=receivables_feed,
        )

    async def execute(self, request: ForecastRequest) -> ForecastResult:
        request = await self.with_feed_invoices(request)
        transactions = await self._transaction_repo.find_all()
        estimates = await self._estimate_repo.find_by_scenario(request.scenario)
        return self.compute(request, transactions, estimates)

    def compute(
        self,
        request: ForecastRequest,
        transactions: Sequence[Transaction],
        estimates: Sequence[Estimate],
    ) -> ForecastResult:
        timeline = self.timeline_for(request)
        projections = self.projections_for(request)
        starting_balance, balance_week = self.balance_for(
            request,
            timeline,
            transactions,
        )
        buckets = self._overlay.project(
            timeline,
            transactions,
            estimates,
            scenario=request.scenario,
            projections=projections,
            starting_balance=starting_balance,
            balance_week=balance_week,
        )
        summary = summarize_projections(projections) if projections else None
        return ForecastResult(
            anchor_date=request.anchor_date,
            scenario=request.scenario,
            buckets=buckets,
            projections=projections,
            projection_summary=summary,
            starting_balance=starting_balance,
            balance_week=balance_week,
        )

    async def with_feed_invoices(self, request: ForecastRequest) -> ForecastRequest:
        """Fill in open invoices from the receivables feed unless given inline."""
        if request.invoices or self._receivables_feed is None:
            return request
        invoices = await self._receivables_feed.fetch_open_invoices()
        logger.debug("Loaded %d invoices from the receivables feed", len(invoices))
        return replace(request, invoices=tuple(invoices))

    def timeline_for(self, request: ForecastRequest) -> WeekTimeline:
        return self._generator.generate(
            request.anchor_date,
            request.window,
            request.today,
        )

    def projections_for(
        self,
        request: ForecastRequest,
    ) -> list[ClientPaymentProjection]:
        if not request.invoices:
            return []
        builder = ProjectionBuilder(request.assumptions or self._assumptions)
        return builder.build(request.invoices, request.anchor_date, request.today)

    @staticmethod
    def balance_for(
        request: ForecastRequest,
        timeline: WeekTimeline,
        transactions: Sequence[Transaction],
    ) -> tuple[Decimal, int]:
        """Starting balance and its week, from the request or the statements."""
        if request.starting_balance is not None:
            return request.starting_balance, request.balance_week
        anchor = derive_balance_anchor(timeline, transactions)
        if anchor is None:
            return Decimal("0"), request.balance_week
        return anchor.starting_balance, anchor.balance_week
