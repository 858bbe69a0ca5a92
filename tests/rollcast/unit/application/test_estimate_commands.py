"""Unit tests for the estimate and session commands."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from rollcast.application.commands import (
    CreateEstimateCommand,
    DeleteEstimateCommand,
    ResetSessionCommand,
    UpdateEstimateCommand,
)
from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.exceptions import (
    EstimateNotFoundError,
    InvalidEstimateError,
)
from rollcast.domain.forecasting.value_objects import RecurringPeriod
from rollcast.domain.shared.exceptions import ErrorCode
from tests.shared.fixtures import make_estimate


@pytest.fixture
def estimate_repo():
    return AsyncMock()


class TestCreateEstimateCommand:
    """Test cases for CreateEstimateCommand."""

    @pytest.mark.asyncio
    async def test_creates_and_saves(self, estimate_repo):
        command = CreateEstimateCommand(estimate_repo)

        estimate = await command.execute(
            amount=Decimal("12000"),
            direction=TransactionDirection.OUTFLOW,
            category="Payroll",
            description="January payroll",
            week_start=date(2024, 1, 24),
        )

        estimate_repo.save.assert_awaited_once_with(estimate)
        assert estimate.week_start == date(2024, 1, 22)
        assert estimate.scenario == "base"
        assert estimate.is_recurring is False

    @pytest.mark.asyncio
    async def test_recurring_period_marks_recurring(self, estimate_repo):
        command = CreateEstimateCommand(estimate_repo)

        estimate = await command.execute(
            amount=Decimal("900"),
            direction=TransactionDirection.OUTFLOW,
            category="Rent",
            description="Office rent",
            week_start=date(2024, 1, 22),
            recurring_period=RecurringPeriod.MONTHLY,
            monthly_day_of_month=1,
        )

        assert estimate.is_recurring is True
        assert estimate.monthly_day_of_month == 1

    @pytest.mark.asyncio
    async def test_invalid_fields_are_rejected(self, estimate_repo):
        command = CreateEstimateCommand(estimate_repo)

        with pytest.raises(InvalidEstimateError) as exc_info:
            await command.execute(
                amount=Decimal("-5"),
                direction=TransactionDirection.OUTFLOW,
                category="Payroll",
                description="Payroll",
                week_start=date(2024, 1, 22),
            )

        assert exc_info.value.code is ErrorCode.BUSINESS_RULE_VIOLATION
        assert "amount" in exc_info.value.reason
        estimate_repo.save.assert_not_awaited()

    def test_from_factory(self, estimate_repo):
        factory = MagicMock()
        factory.estimate_repository.return_value = estimate_repo

        command = CreateEstimateCommand.from_factory(factory)

        assert command._estimate_repo is estimate_repo


class TestUpdateEstimateCommand:
    """Test cases for UpdateEstimateCommand."""

    @pytest.mark.asyncio
    async def test_applies_changes(self, estimate_repo):
        existing = make_estimate(date(2024, 1, 22), "500")
        estimate_repo.find_by_id.return_value = existing

        updated = await UpdateEstimateCommand(estimate_repo).execute(
            existing.id,
            amount=Decimal("650"),
            scenario="hiring",
        )

        assert updated.id == existing.id
        assert updated.amount == Decimal("650")
        assert updated.scenario == "hiring"
        estimate_repo.save.assert_awaited_once_with(updated)

    @pytest.mark.asyncio
    async def test_unknown_id(self, estimate_repo):
        estimate_repo.find_by_id.return_value = None

        with pytest.raises(EstimateNotFoundError) as exc_info:
            await UpdateEstimateCommand(estimate_repo).execute("nope", amount=1)

        assert exc_info.value.code is ErrorCode.ESTIMATE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_setting_period_makes_recurring(self, estimate_repo):
        existing = make_estimate(date(2024, 1, 22), "500")
        estimate_repo.find_by_id.return_value = existing

        updated = await UpdateEstimateCommand(estimate_repo).execute(
            existing.id,
            recurring_period=RecurringPeriod.WEEKLY,
        )

        assert updated.is_recurring is True

    @pytest.mark.asyncio
    async def test_clearing_period_ends_recurrence(self, estimate_repo):
        existing = make_estimate(
            date(2024, 1, 22),
            "500",
            is_recurring=True,
            recurring_period=RecurringPeriod.WEEKLY,
        )
        estimate_repo.find_by_id.return_value = existing

        updated = await UpdateEstimateCommand(estimate_repo).execute(
            existing.id,
            recurring_period=None,
        )

        assert updated.is_recurring is False

    @pytest.mark.asyncio
    async def test_invalid_change(self, estimate_repo):
        existing = make_estimate(date(2024, 1, 22), "500")
        estimate_repo.find_by_id.return_value = existing

        with pytest.raises(InvalidEstimateError) as exc_info:
            await UpdateEstimateCommand(estimate_repo).execute(
                existing.id,
                description="",
            )

        assert exc_info.value.details["estimate_id"] == existing.id
        estimate_repo.save.assert_not_awaited()


class TestDeleteEstimateCommand:
    @pytest.mark.asyncio
    async def test_deletes(self, estimate_repo):
        estimate_repo.delete.return_value = True

        await DeleteEstimateCommand(estimate_repo).execute("e1")

        estimate_repo.delete.assert_awaited_once_with("e1")

    @pytest.mark.asyncio
    async def test_unknown_id(self, estimate_repo):
        estimate_repo.delete.return_value = False

        with pytest.raises(EstimateNotFoundError):
            await DeleteEstimateCommand(estimate_repo).execute("e1")


class TestResetSessionCommand:
    @pytest.mark.asyncio
    async def test_returns_removed_count(self):
        transaction_repo = AsyncMock()
        transaction_repo.delete_all.return_value = 7

        removed = await ResetSessionCommand(transaction_repo, "session-1").execute()

        assert removed == 7
