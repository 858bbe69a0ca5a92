"""Tests for deriving the starting balance from statement balances."""

from datetime import date
from decimal import Decimal

import pytest

from rollcast.domain.banking.value_objects import TransactionDirection
from rollcast.domain.forecasting.services import (
    RollingWeekGenerator,
    derive_balance_anchor,
    end_of_day_balance,
)
from rollcast.domain.forecasting.value_objects import TimelineWindow
from tests.shared.fixtures import ANCHOR, TODAY, make_transaction

OUTFLOW = TransactionDirection.OUTFLOW


@pytest.fixture
def timeline():
    return RollingWeekGenerator().generate(ANCHOR, today=TODAY)


class TestEndOfDayBalance:
    """Test cases for end_of_day_balance."""

    @pytest.fixture
    def same_day(self):
        deposit = make_transaction(
            date(2024, 1, 16),
            "1000",
            description="CLIENT WIRE",
            running_balance_at_source=Decimal("11000"),
        )
        fee = make_transaction(
            date(2024, 1, 16),
            "500",
            OUTFLOW,
            description="VENDOR",
            running_balance_at_source=Decimal("10500"),
        )
        return deposit, fee

    def test_closing_row_found_in_either_order(self, same_day):
        deposit, fee = same_day

        assert end_of_day_balance([deposit, fee]) == Decimal("10500")
        assert end_of_day_balance([fee, deposit]) == Decimal("10500")

    def test_unchained_balances_use_first_row(self):
        rows = [
            make_transaction(
                date(2024, 1, 16),
                "10",
                running_balance_at_source=Decimal("700"),
            ),
            make_transaction(
                date(2024, 1, 16),
                "20",
                description="OTHER",
                running_balance_at_source=Decimal("900"),
            ),
        ]

        assert end_of_day_balance(rows) == Decimal("700")

    def test_no_reported_balance(self):
        assert end_of_day_balance([make_transaction(date(2024, 1, 16), "5")]) is None


class TestDeriveBalanceAnchor:
    """Test cases for derive_balance_anchor."""

    def test_without_balances(self, timeline):
        transactions = [make_transaction(date(2024, 1, 9), "5000")]

        assert derive_balance_anchor(timeline, transactions) is None

    def test_rolls_back_to_opening_of_week(self, timeline):
        transactions = [
            make_transaction(
                date(2024, 1, 9),
                "5000",
                running_balance_at_source=Decimal("15000"),
            ),
            make_transaction(
                date(2024, 1, 16),
                "400",
                OUTFLOW,
                description="SOFTWARE",
                running_balance_at_source=Decimal("14600"),
            ),
        ]

        anchor = derive_balance_anchor(timeline, transactions)

        assert anchor.starting_balance == Decimal("15000")
        assert anchor.balance_week == 0
        assert anchor.observed_on == date(2024, 1, 16)

    def test_statement_before_window_rolls_forward(self, timeline):
        transactions = [
            make_transaction(
                date(2023, 12, 1),
                "100",
                running_balance_at_source=Decimal("50000"),
            ),
            make_transaction(date(2023, 12, 10), "1000", description="LATE WIRE"),
        ]

        anchor = derive_balance_anchor(timeline, transactions)

        assert anchor.starting_balance == Decimal("51000")
        assert anchor.balance_week == -4

    def test_statement_after_window_rolls_back(self):
        short = RollingWeekGenerator().generate(
            ANCHOR,
            TimelineWindow.rolling(past_weeks=1, future_weeks=0),
            TODAY,
        )
        transactions = [
            make_transaction(
                date(2024, 1, 24),
                "1000",
                OUTFLOW,
                running_balance_at_source=Decimal("9000"),
            ),
        ]

        anchor = derive_balance_anchor(short, transactions)

        assert anchor.starting_balance == Decimal("10000")
        assert anchor.balance_week == 1
