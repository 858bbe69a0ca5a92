"""Aggregation of actuals, estimates and projections into week buckets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.services.recurring_estimate_expander import (
    RecurringEstimateExpander,
)
from rollcast.domain.forecasting.value_objects import (
    ClientPaymentProjection,
    Estimate,
    EstimateVariance,
    TimelineMode,
    WeekBucket,
    WeekShell,
    WeekStatus,
    WeekTimeline,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
_HUNDRED = Decimal("100")
_CENTS = Decimal("0.01")


def variance_pct(actual: Decimal, estimated: Decimal) -> Decimal:
    """``(actual - estimated) / estimated * 100`` rounded to cents, 0 if unestimated."""
    if estimated == 0:
        return ZERO
    return ((actual - estimated) / estimated * _HUNDRED).quantize(
        _CENTS,
        rounding=ROUND_HALF_UP,
    )


class _BucketContents:
    """Mutable accumulator used while partitioning inputs for one week."""

    def __init__(self, shell: WeekShell):
        self.shell = shell
        self.transactions: list[Transaction] = []
        self.estimates: list[Estimate] = []
        self.projections: list[ClientPaymentProjection] = []

    def sum_transactions(self, inflow: bool) -> Decimal:
        return sum(
            (tx.amount for tx in self.transactions if tx.is_inflow == inflow),
            ZERO,
        )

    def sum_estimates(self, inflow: bool) -> Decimal:
        return sum(
            (est.amount for est in self.estimates if est.is_inflow == inflow),
            ZERO,
        )

    def sum_projections(self) -> Decimal:
        return sum((p.expected_amount for p in self.projections), ZERO)


class CashflowAggregator:
    """Fill a week timeline with flows and a running balance.

    The result is a pure function of its inputs: every call recomputes all
    buckets from scratch and nothing is retained between calls.
    """

    def __init__(self, expander: RecurringEstimateExpander | None = None):
        self._expander = expander or RecurringEstimateExpander()

    def aggregate(  # NOQA: PLR0913
        self,
        timeline: WeekTimeline,
        transactions: Sequence[Transaction],
        estimates: Sequence[Estimate],
        projections: Sequence[ClientPaymentProjection] = (),
        starting_balance: Decimal = ZERO,
        balance_week: int = 0,
        keep_empty: bool = False,
    ) -> list[WeekBucket]:
        """Compute the week buckets of ``timeline``.

        Parameters
        ----------
        timeline
            Week shells to fill, oldest first
        transactions
            Every known transaction; those outside the timeline are ignored
        estimates
            Estimates of a single scenario
        projections
            Receivables projections with week numbers relative to the
            timeline anchor
        starting_balance
            Known balance at the opening of ``balance_week``
        balance_week
            Relative week number whose opening balance is
            ``starting_balance``; 0 means the start of the anchor week
        keep_empty
            Fill every shell even when a fixed timeline has no input

        Returns
        -------
        One bucket per shell. In fixed mode an entirely empty input yields
        an empty list unless ``keep_empty`` is set.
        """
        if not keep_empty and timeline.mode is TimelineMode.FIXED and not (
            transactions or estimates or projections
        ):
            return []

        contents = [_BucketContents(shell) for shell in timeline.shells]
        self._partition_transactions(timeline, contents, transactions)
        self._partition_estimates(timeline, contents, estimates)
        self._partition_projections(timeline, contents, projections)

        buckets = [self._summarize(content) for content in contents]
        return self._apply_running_balance(buckets, starting_balance, balance_week)

    def _partition_transactions(
        self,
        timeline: WeekTimeline,
        contents: list[_BucketContents],
        transactions: Sequence[Transaction],
    ) -> None:
        outside = 0
        for tx in transactions:
            week_number = timeline.week_number_for(tx.date)
            content = self._content_for(timeline, contents, week_number)
            if content is None:
                outside += 1
                continue
            content.transactions.append(tx)
        if outside:
            logger.debug("%d transactions fall outside the timeline", outside)

    def _partition_estimates(
        self,
        timeline: WeekTimeline,
        contents: list[_BucketContents],
        estimates: Sequence[Estimate],
    ) -> None:
        for estimate in self._expander.expand(estimates, timeline):
            week_number = timeline.week_number_for(estimate.week_start)
            content = self._content_for(timeline, contents, week_number)
            if content is None:
                logger.warning(
                    "Estimate %s (week starting %s, relative week %d) is outside "
                    "the timeline and was excluded",
                    estimate.id,
                    estimate.week_start,
                    week_number,
                )
                continue
            content.estimates.append(estimate)

    def _partition_projections(
        self,
        timeline: WeekTimeline,
        contents: list[_BucketContents],
        projections: Sequence[ClientPaymentProjection],
    ) -> None:
        for projection in projections:
            content = self._content_for(timeline, contents, projection.week_number)
            if content is None:
                logger.warning(
                    "Projection for invoice %s (week %d) is outside the timeline "
                    "and was excluded",
                    projection.invoice_number,
                    projection.week_number,
                )
                continue
            content.projections.append(projection)

    @staticmethod
    def _content_for(
        timeline: WeekTimeline,
        contents: list[_BucketContents],
        week_number: int,
    ) -> _BucketContents | None:
        if not timeline.covers(week_number):
            return None
        return contents[week_number - timeline.shells[0].week_number]

    @staticmethod
    def _summarize(content: _BucketContents) -> WeekBucket:
        shell = content.shell
        actual_inflow = content.sum_transactions(inflow=True)
        actual_outflow = content.sum_transactions(inflow=False)
        estimated_inflow = content.sum_estimates(inflow=True)
        estimated_outflow = content.sum_estimates(inflow=False)
        projected_inflow = content.sum_projections()

        if shell.status is WeekStatus.PAST:
            total_inflow = actual_inflow
            total_outflow = actual_outflow
        else:
            total_inflow = actual_inflow + estimated_inflow + projected_inflow
            total_outflow = actual_outflow + estimated_outflow

        variance = None
        if shell.status is WeekStatus.PAST and content.estimates:
            variance = EstimateVariance(
                inflow_pct=variance_pct(actual_inflow, estimated_inflow),
                outflow_pct=variance_pct(actual_outflow, estimated_outflow),
            )

        return WeekBucket(
            week_number=shell.week_number,
            week_start=shell.week_start,
            week_end=shell.week_end,
            status=shell.status,
            actual_inflow=actual_inflow,
            actual_outflow=actual_outflow,
            estimated_inflow=estimated_inflow,
            estimated_outflow=estimated_outflow,
            projected_inflow=projected_inflow,
            total_inflow=total_inflow,
            total_outflow=total_outflow,
            net_cashflow=total_inflow - total_outflow,
            variance=variance,
            transactions=tuple(sorted(content.transactions, key=lambda tx: tx.date)),
            estimates=tuple(content.estimates),
            projections=tuple(content.projections),
        )

    @staticmethod
    def _apply_running_balance(
        buckets: list[WeekBucket],
        starting_balance: Decimal,
        balance_week: int,
    ) -> list[WeekBucket]:
        # Opening balance of balance_week must equal starting_balance.
        balance = starting_balance - sum(
            (b.net_cashflow for b in buckets if b.week_number < balance_week),
            ZERO,
        )
        result = []
        for bucket in buckets:
            balance += bucket.net_cashflow
            result.append(bucket.model_copy(update={"running_balance": balance}))
        return result
