"""Scenario branching on top of the cashflow aggregator."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.services.cashflow_aggregator import (
    ZERO,
    CashflowAggregator,
)
from rollcast.domain.forecasting.services.projection_adjustments import (
    apply_adjustment,
)
from rollcast.domain.forecasting.value_objects import (
    DEFAULT_ADJUSTMENTS,
    DEFAULT_SCENARIO,
    ClientPaymentProjection,
    Estimate,
    ReceivablesOutlook,
    ScenarioAdjustment,
    WeekBucket,
    WeekStatus,
    WeekTimeline,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioFigures:
    inflow: Decimal
    outflow: Decimal
    net: Decimal
    running_balance: Decimal


@dataclass
class ScenarioWeekComparison:
    """One week of the timeline with the figures of every scenario."""

    week_number: int
    week_start: date
    week_end: date
    status: WeekStatus
    scenarios: dict[str, ScenarioFigures] = field(default_factory=dict)


@dataclass
class ScenarioComparison:
    scenarios: list[str]
    weeks: list[ScenarioWeekComparison]
    buckets: dict[str, list[WeekBucket]]


def filter_estimates(estimates: Iterable[Estimate], scenario: str) -> list[Estimate]:
    return [estimate for estimate in estimates if estimate.scenario == scenario]


def scenario_names(estimates: Iterable[Estimate]) -> list[str]:
    """Distinct scenario names, the default scenario first."""
    names = sorted({estimate.scenario for estimate in estimates} | {DEFAULT_SCENARIO})
    names.remove(DEFAULT_SCENARIO)
    return [DEFAULT_SCENARIO, *names]


class ScenarioOverlay:
    """Run the aggregator once per scenario or receivables outlook.

    Only estimates of the requested scenario reach the aggregator.
    Transactions and projections are shared by every scenario.
    """

    def __init__(self, aggregator: CashflowAggregator | None = None):
        self._aggregator = aggregator or CashflowAggregator()

    def project(  # NOQA: PLR0913
        self,
        timeline: WeekTimeline,
        transactions: Sequence[Transaction],
        estimates: Sequence[Estimate],
        scenario: str = DEFAULT_SCENARIO,
        projections: Sequence[ClientPaymentProjection] = (),
        starting_balance: Decimal = ZERO,
        balance_week: int = 0,
    ) -> list[WeekBucket]:
        return self._aggregator.aggregate(
            timeline,
            transactions,
            filter_estimates(estimates, scenario),
            projections,
            starting_balance,
            balance_week,
        )

    def compare(  # NOQA: PLR0913
        self,
        timeline: WeekTimeline,
        transactions: Sequence[Transaction],
        estimates: Sequence[Estimate],
        scenarios: Sequence[str] | None = None,
        projections: Sequence[ClientPaymentProjection] = (),
        starting_balance: Decimal = ZERO,
        balance_week: int = 0,
    ) -> ScenarioComparison:
        """Aggregate every scenario and line the results up per week.

        ``scenarios`` defaults to every scenario present in ``estimates``.
        """
        names = list(scenarios) if scenarios else scenario_names(estimates)
        buckets = {
            name: self.project(
                timeline,
                transactions,
                estimates,
                name,
                projections,
                starting_balance,
                balance_week,
            )
            for name in names
        }
        # Every scenario keeps its weeks once any scenario has data.
        if any(buckets.values()):
            for name, scenario_buckets in buckets.items():
                if not scenario_buckets:
                    buckets[name] = self._aggregator.aggregate(
                        timeline,
                        transactions,
                        [],
                        projections,
                        starting_balance,
                        balance_week,
                        keep_empty=True,
                    )

        weeks = [
            ScenarioWeekComparison(
                week_number=shell.week_number,
                week_start=shell.week_start,
                week_end=shell.week_end,
                status=shell.status,
            )
            for shell in timeline.shells
        ]
        for name, scenario_buckets in buckets.items():
            for week, bucket in zip(weeks, scenario_buckets):
                week.scenarios[name] = ScenarioFigures(
                    inflow=bucket.total_inflow,
                    outflow=bucket.total_outflow,
                    net=bucket.net_cashflow,
                    running_balance=bucket.running_balance,
                )

        # Fixed timelines with no input produce no buckets at all.
        if not any(buckets.values()):
            weeks = []

        logger.debug("Compared %d scenarios over %d weeks", len(names), len(weeks))
        return ScenarioComparison(scenarios=names, weeks=weeks, buckets=buckets)

    def receivables_outlooks(  # NOQA: PLR0913
        self,
        timeline: WeekTimeline,
        transactions: Sequence[Transaction],
        estimates: Sequence[Estimate],
        projections: Sequence[ClientPaymentProjection],
        scenario: str = DEFAULT_SCENARIO,
        adjustments: Iterable[ScenarioAdjustment] | None = None,
        starting_balance: Decimal = ZERO,
        balance_week: int = 0,
    ) -> dict[str, list[WeekBucket]]:
        """Aggregate one scenario under each receivables adjustment."""
        if adjustments is None:
            adjustments = [
                DEFAULT_ADJUSTMENTS[outlook] for outlook in ReceivablesOutlook
            ]
        return {
            adjustment.name: self.project(
                timeline,
                transactions,
                estimates,
                scenario,
                apply_adjustment(projections, adjustment, timeline.anchor),
                starting_balance,
                balance_week,
            )
            for adjustment in adjustments
        }
