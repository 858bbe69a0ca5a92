"""Derive the starting balance from balances reported on bank statements."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from rollcast.domain.banking.value_objects import Transaction
from rollcast.domain.forecasting.services.cashflow_aggregator import ZERO
from rollcast.domain.forecasting.value_objects import WeekTimeline, week_start_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceAnchor:
    """Opening balance of ``balance_week`` and the day it was observed on."""

    starting_balance: Decimal
    balance_week: int
    observed_on: date


def _net(transactions: Sequence[Transaction]) -> Decimal:
    return sum((tx.signed_amount for tx in transactions), ZERO)


def end_of_day_balance(day_transactions: Sequence[Transaction]) -> Decimal | None:
    """Closing balance of one day from the balances reported after each row.

    The closing row is the one whose balance no other row of the day starts
    from. When the reported balances do not chain, the first row wins, as
    statement exports list the newest entry first.
    """
    reported = [
        tx for tx in day_transactions if tx.running_balance_at_source is not None
    ]
    if not reported:
        return None
    opening_balances = {
        tx.running_balance_at_source - tx.signed_amount for tx in reported
    }
    closing = [
        tx for tx in reported if tx.running_balance_at_source not in opening_balances
    ]
    chosen = closing[0] if len(closing) == 1 else reported[0]
    return chosen.running_balance_at_source


def derive_balance_anchor(
    timeline: WeekTimeline,
    transactions: Sequence[Transaction],
) -> BalanceAnchor | None:
    """Anchor the running balance on the latest reported statement balance.

    The closing balance of the latest day with a reported balance is rolled
    back to the opening of its week. Days before the timeline are rolled
    forward to its first week; days after it are rolled back to the week
    following its last one. Returns ``None`` when no row reports a balance
    or the timeline has no weeks.
    """
    if not timeline.shells:
        return None
    with_balance = [
        tx for tx in transactions if tx.running_balance_at_source is not None
    ]
    if not with_balance:
        return None

    latest = max(tx.date for tx in with_balance)
    closing = end_of_day_balance([tx for tx in transactions if tx.date == latest])
    if closing is None:
        return None

    first_week = timeline.shells[0].week_number
    last_week = timeline.shells[-1].week_number
    week = timeline.week_number_for(latest)
    if week < first_week:
        # Move forward over the days between the statement and the window.
        opening = closing + _net(
            [tx for tx in transactions if latest < tx.date < timeline.start],
        )
        week = first_week
    else:
        week = min(week, last_week + 1)
        week_start = week_start_for(timeline.anchor, week)
        opening = closing - _net(
            [tx for tx in transactions if week_start <= tx.date <= latest],
        )

    logger.debug(
        "Derived opening balance %s for week %d from the %s statement balance",
        opening,
        week,
        latest,
    )
    return BalanceAnchor(
        starting_balance=opening,
        balance_week=week,
        observed_on=latest,
    )
