"""Week status enumeration."""

from enum import Enum


class WeekStatus(str, Enum):
    """Whether a week has fully elapsed, is in progress, or lies ahead."""

    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"
