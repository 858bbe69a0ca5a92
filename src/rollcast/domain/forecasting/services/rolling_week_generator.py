"""Rolling week timeline generation."""

from datetime import date, timedelta

from rollcast.domain.forecasting.value_objects import (
    TimelineWindow,
    WeekShell,
    WeekStatus,
    WeekTimeline,
    week_start_for,
)
from rollcast.domain.shared.time import today_utc


def week_status(week_start: date, week_end: date, today: date) -> WeekStatus:
    """Classify a week against ``today``."""
    if week_end < today:
        return WeekStatus.PAST
    if week_start <= today:
        return WeekStatus.CURRENT
    return WeekStatus.FUTURE


class RollingWeekGenerator:
    """Build Monday-start week shells around an anchor date.

    Week 0 contains the anchor, negative numbers lie before it. A week runs
    from Monday through Sunday, both days inclusive. Status compares each
    week with ``today``, which defaults to the real current date, so a
    timeline anchored in the past still reports elapsed weeks as past.
    """

    def generate(
        self,
        anchor: date,
        window: TimelineWindow | None = None,
        today: date | None = None,
    ) -> WeekTimeline:
        window = window or TimelineWindow.rolling()
        today = today or today_utc()

        shells = []
        for week_number in window.week_numbers:
            start = week_start_for(anchor, week_number)
            end = start + timedelta(days=6)
            shells.append(
                WeekShell(
                    week_number=week_number,
                    week_start=start,
                    week_end=end,
                    status=week_status(start, end, today),
                ),
            )

        return WeekTimeline(anchor=anchor, window=window, shells=tuple(shells))

    def generate_fixed(
        self,
        anchor: date,
        weeks: int = 13,
        today: date | None = None,
    ) -> WeekTimeline:
        """Fixed-count timeline starting at the anchor week."""
        return self.generate(anchor, TimelineWindow.fixed(weeks), today)
