"""Time utilities for the domain layer."""

from datetime import date, datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC (timezone-aware)."""
    return datetime.now(tz=timezone.utc).date()


def monday_of(day: date) -> date:
    """Return the Monday starting the week that contains ``day``."""
    return day - timedelta(days=day.weekday())
