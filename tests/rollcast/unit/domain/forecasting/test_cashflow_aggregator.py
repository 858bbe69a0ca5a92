"""Tests for cashflow aggregation into week buckets."""

from datetime import date
from decimal import Decimal

import pytest

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.services import (
    CashflowAggregator,
    ProjectionBuilder,
    RollingWeekGenerator,
    variance_pct,
)
from rollcast.domain.forecasting.value_objects import WeekStatus
from tests.shared.fixtures import (
    ANCHOR,
    TODAY,
    make_estimate,
    make_invoice,
    make_transaction,
)

INFLOW = TransactionDirection.INFLOW
OUTFLOW = TransactionDirection.OUTFLOW

LAST_WEEK = date(2024, 1, 8)
THIS_WEEK = date(2024, 1, 15)
NEXT_WEEK = date(2024, 1, 22)


@pytest.fixture
def timeline():
    return RollingWeekGenerator().generate(ANCHOR, today=TODAY)


@pytest.fixture
def aggregator():
    return CashflowAggregator()


def _by_number(buckets):
    return {bucket.week_number: bucket for bucket in buckets}


class TestHundredThousandScenario:
    """$100,000 opening last week, actuals last week, estimates ahead."""

    @pytest.fixture
    def buckets(self, timeline, aggregator):
        transactions = [
            make_transaction(date(2024, 1, 9), "20000", description="CANVA WIRE"),
            make_transaction(date(2024, 1, 10), "15000", OUTFLOW, description="DEEL"),
            make_transaction(date(2024, 1, 15), "3000", description="STRIPE"),
        ]
        estimates = [
            make_estimate(THIS_WEEK, "5000", INFLOW, category="Client Payments"),
            make_estimate(THIS_WEEK, "2000", OUTFLOW),
            make_estimate(NEXT_WEEK, "8000", OUTFLOW),
        ]
        return _by_number(
            aggregator.aggregate(
                timeline,
                transactions,
                estimates,
                starting_balance=Decimal("100000"),
                balance_week=-1,
            ),
        )

    def test_past_week_closes_at_105k(self, buckets):
        last_week = buckets[-1]

        assert last_week.status is WeekStatus.PAST
        assert last_week.total_inflow == Decimal("20000")
        assert last_week.total_outflow == Decimal("15000")
        assert last_week.running_balance == Decimal("105000")

    def test_weeks_before_balance_week_hold_opening_balance(self, buckets):
        assert buckets[-4].running_balance == Decimal("100000")
        assert buckets[-2].running_balance == Decimal("100000")

    def test_current_week_adds_actuals_and_estimates(self, buckets):
        current = buckets[0]

        assert current.status is WeekStatus.CURRENT
        assert current.actual_inflow == Decimal("3000")
        assert current.estimated_inflow == Decimal("5000")
        assert current.total_inflow == Decimal("8000")
        assert current.total_outflow == Decimal("2000")
        assert current.net_cashflow == Decimal("6000")
        assert current.running_balance == Decimal("111000")

    def test_future_week_uses_estimates(self, buckets):
        future = buckets[1]

        assert future.status is WeekStatus.FUTURE
        assert future.total_outflow == Decimal("8000")
        assert future.running_balance == Decimal("105000") + Decimal("6000") - Decimal(
            "8000",
        )

    def test_balance_continuity(self, buckets):
        ordered = [buckets[number] for number in sorted(buckets)]

        for previous, current in zip(ordered, ordered[1:]):
            assert current.running_balance == (
                previous.running_balance + current.net_cashflow
            )

    def test_final_balance(self, buckets):
        assert buckets[8].running_balance == Decimal("103000")


class TestAggregator:
    """Test cases for CashflowAggregator.aggregate."""

    def test_past_week_ignores_estimates_but_reports_variance(
        self,
        timeline,
        aggregator,
    ):
        transactions = [make_transaction(date(2024, 1, 9), "20000")]
        estimates = [make_estimate(LAST_WEEK, "25000", INFLOW)]

        bucket = _by_number(aggregator.aggregate(timeline, transactions, estimates))[-1]

        assert bucket.estimated_inflow == Decimal("25000")
        assert bucket.total_inflow == Decimal("20000")
        assert bucket.variance is not None
        assert bucket.variance.inflow_pct == Decimal("-20.00")
        assert bucket.variance.outflow_pct == Decimal("0")

    def test_no_variance_without_estimates(self, timeline, aggregator):
        transactions = [make_transaction(date(2024, 1, 9), "20000")]

        bucket = _by_number(aggregator.aggregate(timeline, transactions, []))[-1]

        assert bucket.variance is None

    def test_transactions_outside_timeline_are_ignored(self, timeline, aggregator):
        transactions = [make_transaction(date(2023, 6, 1), "999")]

        buckets = aggregator.aggregate(timeline, transactions, [])

        assert all(bucket.is_empty for bucket in buckets)
        assert buckets[-1].running_balance == Decimal("0")

    def test_estimates_outside_timeline_are_excluded(
        self,
        timeline,
        aggregator,
        caplog,
    ):
        estimate = make_estimate(date(2024, 6, 3), "100")

        buckets = aggregator.aggregate(timeline, [], [estimate])

        assert sum(bucket.estimated_outflow for bucket in buckets) == Decimal("0")
        assert "outside the timeline" in caplog.text

    def test_projections_add_to_open_weeks(self, timeline, aggregator):
        projections = ProjectionBuilder().build(
            [make_invoice("INV-1", date(2024, 1, 24), "10000")],
            ANCHOR,
            TODAY,
        )

        bucket = _by_number(aggregator.aggregate(timeline, [], [], projections))[1]

        assert bucket.projected_inflow == Decimal("9000.00")
        assert bucket.total_inflow == Decimal("9000.00")
        assert [p.invoice_number for p in bucket.projections] == ["INV-1"]

    def test_recurring_estimates_are_expanded(self, timeline, aggregator):
        estimate = make_estimate(
            THIS_WEEK,
            "1000",
            is_recurring=True,
            recurring_period="weekly",
        )

        buckets = _by_number(aggregator.aggregate(timeline, [], [estimate]))

        assert buckets[-1].estimated_outflow == Decimal("0")
        assert all(buckets[n].estimated_outflow == Decimal("1000") for n in range(9))
        assert buckets[8].running_balance == Decimal("-9000")

    def test_transactions_in_bucket_are_date_ordered(self, timeline, aggregator):
        later = make_transaction(date(2024, 1, 18), "1", description="B")
        earlier = make_transaction(date(2024, 1, 16), "1", description="A")

        bucket = _by_number(aggregator.aggregate(timeline, [later, earlier], []))[0]

        assert bucket.transactions == (earlier, later)

    def test_balance_week_zero_opens_anchor_week(self, timeline, aggregator):
        transactions = [make_transaction(date(2024, 1, 9), "500")]

        buckets = _by_number(
            aggregator.aggregate(
                timeline,
                transactions,
                [],
                starting_balance=Decimal("1000"),
            ),
        )

        assert buckets[-1].running_balance == Decimal("1000")
        assert buckets[-2].running_balance == Decimal("500")
        assert buckets[0].running_balance == Decimal("1000")

    def test_rerun_gives_identical_result(self, timeline, aggregator):
        transactions = [make_transaction(date(2024, 1, 9), "500")]
        estimates = [make_estimate(NEXT_WEEK, "200")]

        first = aggregator.aggregate(timeline, transactions, estimates)
        second = aggregator.aggregate(timeline, transactions, estimates)

        assert first == second

    def test_rolling_timeline_with_no_input_has_empty_buckets(
        self,
        timeline,
        aggregator,
    ):
        buckets = aggregator.aggregate(timeline, [], [])

        assert len(buckets) == 13
        assert all(bucket.running_balance == Decimal("0") for bucket in buckets)

    def test_fixed_timeline_with_no_input_is_empty(self, aggregator):
        fixed = RollingWeekGenerator().generate_fixed(ANCHOR, today=TODAY)

        assert aggregator.aggregate(fixed, [], []) == []

    def test_fixed_timeline_with_input(self, aggregator):
        fixed = RollingWeekGenerator().generate_fixed(ANCHOR, today=TODAY)

        buckets = aggregator.aggregate(fixed, [], [make_estimate(NEXT_WEEK, "10")])

        assert len(buckets) == 13
        assert buckets[-1].running_balance == Decimal("-10")


class TestVariancePct:
    def test_rounded_to_cents(self):
        assert variance_pct(Decimal("1"), Decimal("3")) == Decimal("-66.67")

    def test_zero_estimate(self):
        assert variance_pct(Decimal("100"), Decimal("0")) == Decimal("0")
