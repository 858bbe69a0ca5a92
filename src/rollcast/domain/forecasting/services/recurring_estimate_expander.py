"""Expansion of recurring estimates into per-week occurrences."""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import date

from dateutil.relativedelta import relativedelta

from rollcast.domain.forecasting.value_objects import (
    Estimate,
    RecurringPeriod,
    WeekTimeline,
)
from rollcast.domain.shared.time import monday_of


class RecurringEstimateExpander:
    """Place recurring estimates in every week of a timeline they recur in.

    Occurrences start at the estimate's own week and never precede it.
    Weekly estimates recur every week, biweekly every second week counted
    from the first week, monthly ones in the week holding the chosen day of
    each month (clamped to the month's last day). Non-recurring estimates
    pass through untouched.
    """

    def expand(
        self,
        estimates: Iterable[Estimate],
        timeline: WeekTimeline,
    ) -> list[Estimate]:
        expanded: list[Estimate] = []
        for estimate in estimates:
            if not estimate.is_recurring or estimate.recurring_period is None:
                expanded.append(estimate)
                continue
            expanded.extend(
                estimate.occurring_in(week_start)
                for week_start in self.occurrence_weeks(estimate, timeline)
            )
        return expanded

    def occurrence_weeks(
        self,
        estimate: Estimate,
        timeline: WeekTimeline,
    ) -> list[date]:
        if not timeline.shells:
            return []

        if estimate.recurring_period is RecurringPeriod.MONTHLY:
            return self._monthly_weeks(estimate, timeline)

        step = 2 if estimate.recurring_period is RecurringPeriod.BIWEEKLY else 1
        weeks = []
        for shell in timeline.shells:
            offset = (shell.week_start - estimate.week_start).days // 7
            if offset >= 0 and offset % step == 0:
                weeks.append(shell.week_start)
        return weeks

    def _monthly_weeks(self, estimate: Estimate, timeline: WeekTimeline) -> list[date]:
        day_of_month = estimate.monthly_day_of_month or estimate.week_start.day
        first_month = estimate.week_start.replace(day=1)
        window_start = timeline.shells[0].week_start
        window_end = timeline.shells[-1].week_end

        weeks: list[date] = []
        months = 0
        while True:
            month = first_month + relativedelta(months=months)
            months += 1
            last_day = calendar.monthrange(month.year, month.month)[1]
            occurrence = month.replace(day=min(day_of_month, last_day))
            if occurrence > window_end:
                break
            if occurrence < estimate.week_start or occurrence < window_start:
                continue
            week_start = monday_of(occurrence)
            if week_start not in weeks:
                weeks.append(week_start)
        return weeks
