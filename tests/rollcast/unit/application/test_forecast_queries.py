"""Unit tests for the forecast queries."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from rollcast.application.dtos import ForecastRequest
from rollcast.application.queries import (
    ReceivablesOutlookQuery,
    RollingForecastQuery,
    ScenarioComparisonQuery,
    TransactionListQuery,
    assumptions_from_settings,
)
from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.value_objects import TimelineWindow
from rollcast_config import Settings
from tests.shared.fixtures import (
    ANCHOR,
    TODAY,
    make_estimate,
    make_invoice,
    make_transaction,
)

NEXT_WEEK = date(2024, 1, 22)


@pytest.fixture
def transaction_repo():
    repo = AsyncMock()
    repo.find_all.return_value = [make_transaction(date(2024, 1, 9), "5000")]
    return repo


@pytest.fixture
def estimates():
    return [
        make_estimate(NEXT_WEEK, "1000"),
        make_estimate(NEXT_WEEK, "3000", scenario="hiring"),
    ]


@pytest.fixture
def estimate_repo(estimates):
    repo = AsyncMock()
    repo.find_all.return_value = estimates
    repo.find_by_scenario.side_effect = lambda scenario: [
        estimate for estimate in estimates if estimate.scenario == scenario
    ]
    return repo


@pytest.fixture
def feed():
    feed = AsyncMock()
    feed.fetch_open_invoices.return_value = [
        make_invoice("INV-FEED", date(2024, 1, 24), "10000"),
    ]
    return feed


@pytest.fixture
def forecast_query(transaction_repo, estimate_repo):
    return RollingForecastQuery(transaction_repo, estimate_repo)


def _request(**fields):
    fields.setdefault("today", TODAY)
    return ForecastRequest(anchor_date=ANCHOR, **fields)


def _week(buckets, number):
    return next(bucket for bucket in buckets if bucket.week_number == number)


class TestRollingForecastQuery:
    """Test cases for RollingForecastQuery."""

    @pytest.mark.asyncio
    async def test_default_rolling_forecast(self, forecast_query, estimate_repo):
        result = await forecast_query.execute(
            _request(starting_balance=Decimal("20000")),
        )

        estimate_repo.find_by_scenario.assert_awaited_once_with("base")
        assert result.week_count == 13
        assert result.buckets[0].week_number == -4
        assert _week(result.buckets, -1).total_inflow == Decimal("5000")
        assert _week(result.buckets, 1).total_outflow == Decimal("1000")
        assert result.ending_balance == Decimal("19000")
        assert result.projections == []
        assert result.projection_summary is None

    @pytest.mark.asyncio
    async def test_scenario_and_window(self, forecast_query):
        result = await forecast_query.execute(
            _request(scenario="hiring", window=TimelineWindow.fixed(4)),
        )

        assert [b.week_number for b in result.buckets] == [0, 1, 2, 3]
        assert result.scenario == "hiring"
        assert _week(result.buckets, 1).total_outflow == Decimal("3000")

    @pytest.mark.asyncio
    async def test_inline_invoices(self, forecast_query):
        result = await forecast_query.execute(
            _request(invoices=(make_invoice("INV-1", date(2024, 1, 24), "10000"),)),
        )

        assert _week(result.buckets, 1).projected_inflow == Decimal("9000.00")
        assert result.projection_summary.total_expected == Decimal("9000.00")

    @pytest.mark.asyncio
    async def test_feed_fills_missing_invoices(
        self,
        transaction_repo,
        estimate_repo,
        feed,
    ):
        query = RollingForecastQuery(
            transaction_repo,
            estimate_repo,
            receivables_feed=feed,
        )

        result = await query.execute(_request())

        feed.fetch_open_invoices.assert_awaited_once()
        assert [p.invoice_number for p in result.projections] == ["INV-FEED"]

    @pytest.mark.asyncio
    async def test_inline_invoices_skip_feed(
        self,
        transaction_repo,
        estimate_repo,
        feed,
    ):
        query = RollingForecastQuery(
            transaction_repo,
            estimate_repo,
            receivables_feed=feed,
        )

        result = await query.execute(
            _request(invoices=(make_invoice("INV-1", date(2024, 1, 24), "100"),)),
        )

        feed.fetch_open_invoices.assert_not_awaited()
        assert [p.invoice_number for p in result.projections] == ["INV-1"]

    def test_compute_is_pure(self, forecast_query):
        tx = make_transaction(date(2024, 1, 16), "40", TransactionDirection.OUTFLOW)

        result = forecast_query.compute(_request(), [tx], [])

        assert _week(result.buckets, 0).actual_outflow == Decimal("40")

    def test_assumptions_from_settings(self):
        settings = Settings(
            receivables_current_on_time_pct=Decimal("100"),
            receivables_collections_rate_pct=Decimal("40"),
            receivables_collections_delay_days=45,
        )

        assumptions = assumptions_from_settings(settings)

        assert assumptions.current_on_time_pct == Decimal("100")
        assert assumptions.average_delay_days == 14
        assert assumptions.collections_rate_pct == Decimal("40")
        assert assumptions.collections_delay_days == 45

    @pytest.mark.asyncio
    async def test_starting_balance_from_statement(
        self,
        forecast_query,
        transaction_repo,
    ):
        transaction_repo.find_all.return_value = [
            make_transaction(
                date(2024, 1, 9),
                "5000",
                running_balance_at_source=Decimal("25000"),
            ),
        ]

        result = await forecast_query.execute(_request())

        assert result.starting_balance == Decimal("20000")
        assert result.balance_week == -1
        assert _week(result.buckets, -1).running_balance == Decimal("25000")
        assert result.ending_balance == Decimal("24000")

    @pytest.mark.asyncio
    async def test_explicit_balance_wins(self, forecast_query, transaction_repo):
        transaction_repo.find_all.return_value = [
            make_transaction(
                date(2024, 1, 9),
                "5000",
                running_balance_at_source=Decimal("25000"),
            ),
        ]

        result = await forecast_query.execute(
            _request(starting_balance=Decimal("100"), balance_week=2),
        )

        assert result.starting_balance == Decimal("100")
        assert result.balance_week == 2


class TestScenarioComparisonQuery:
    @pytest.mark.asyncio
    async def test_compares_all_stored_scenarios(
        self,
        transaction_repo,
        estimate_repo,
        forecast_query,
    ):
        query = ScenarioComparisonQuery(transaction_repo, estimate_repo, forecast_query)

        comparison = await query.execute(_request())

        assert comparison.scenarios == ["base", "hiring"]
        week_one = next(w for w in comparison.weeks if w.week_number == 1)
        assert week_one.scenarios["base"].outflow == Decimal("1000")
        assert week_one.scenarios["hiring"].outflow == Decimal("3000")

    @pytest.mark.asyncio
    async def test_selected_scenarios(
        self,
        transaction_repo,
        estimate_repo,
        forecast_query,
    ):
        query = ScenarioComparisonQuery(transaction_repo, estimate_repo, forecast_query)

        comparison = await query.execute(_request(), scenarios=["hiring"])

        assert list(comparison.buckets) == ["hiring"]


class TestReceivablesOutlookQuery:
    @pytest.mark.asyncio
    async def test_three_outlooks_from_feed(
        self,
        transaction_repo,
        estimate_repo,
        feed,
    ):
        forecast_query = RollingForecastQuery(
            transaction_repo,
            estimate_repo,
            receivables_feed=feed,
        )
        query = ReceivablesOutlookQuery(
            transaction_repo,
            estimate_repo,
            forecast_query,
        )

        outlooks = await query.execute(_request())

        assert list(outlooks) == ["optimistic", "realistic", "pessimistic"]
        assert _week(outlooks["optimistic"], 1).projected_inflow == Decimal(
            "10800.00",
        )
        assert _week(outlooks["pessimistic"], 3).projected_inflow == Decimal(
            "6300.00",
        )


class TestTransactionListQuery:
    @pytest.mark.asyncio
    async def test_all(self, transaction_repo):
        transactions = await TransactionListQuery(transaction_repo).execute()

        assert len(transactions) == 1
        transaction_repo.find_by_date_range.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_open_ended_range(self, transaction_repo):
        transaction_repo.find_by_date_range.return_value = []

        await TransactionListQuery(transaction_repo).execute(start=date(2024, 1, 1))

        transaction_repo.find_by_date_range.assert_awaited_once_with(
            date(2024, 1, 1),
            date.max,
        )
