"""Tests for rolling week timeline generation."""

from datetime import date

import pytest

from rollcast.domain.forecasting.services import RollingWeekGenerator, week_status
from rollcast.domain.forecasting.value_objects import (
    TimelineMode,
    TimelineWindow,
    WeekStatus,
    relative_week_number,
    week_start_for,
)
from tests.shared.fixtures import ANCHOR, TODAY


@pytest.fixture
def generator():
    return RollingWeekGenerator()


class TestWeekArithmetic:
    def test_week_zero_starts_on_monday_before_anchor(self):
        assert week_start_for(ANCHOR, 0) == date(2024, 1, 15)

    def test_relative_week_numbers(self):
        assert relative_week_number(ANCHOR, date(2024, 1, 15)) == 0
        assert relative_week_number(ANCHOR, date(2024, 1, 21)) == 0
        assert relative_week_number(ANCHOR, date(2024, 1, 14)) == -1
        assert relative_week_number(ANCHOR, date(2024, 1, 22)) == 1
        assert relative_week_number(ANCHOR, date(2024, 3, 17)) == 8

    def test_sunday_anchor_belongs_to_preceding_monday(self):
        assert week_start_for(date(2024, 1, 21), 0) == date(2024, 1, 15)


class TestWeekStatus:
    @pytest.mark.parametrize(
        ("today", "expected"),
        [
            (date(2024, 1, 22), WeekStatus.PAST),
            (date(2024, 1, 21), WeekStatus.CURRENT),
            (date(2024, 1, 15), WeekStatus.CURRENT),
            (date(2024, 1, 14), WeekStatus.FUTURE),
        ],
    )
    def test_status_against_today(self, today, expected):
        assert week_status(date(2024, 1, 15), date(2024, 1, 21), today) is expected


class TestRollingWeekGenerator:
    """Test cases for RollingWeekGenerator."""

    def test_default_window_is_four_back_eight_ahead(self, generator):
        timeline = generator.generate(ANCHOR, today=TODAY)

        numbers = [shell.week_number for shell in timeline.shells]
        assert numbers == list(range(-4, 9))
        assert timeline.mode is TimelineMode.ROLLING

    def test_weeks_run_monday_to_sunday(self, generator):
        timeline = generator.generate(ANCHOR, today=TODAY)

        for shell in timeline.shells:
            assert shell.week_start.weekday() == 0
            assert (shell.week_end - shell.week_start).days == 6
        assert timeline.start == date(2023, 12, 18)
        assert timeline.end == date(2024, 3, 17)

    def test_weeks_are_contiguous(self, generator):
        shells = generator.generate(ANCHOR, today=TODAY).shells

        for previous, current in zip(shells, shells[1:]):
            assert (current.week_start - previous.week_end).days == 1

    def test_statuses_follow_today(self, generator):
        timeline = generator.generate(ANCHOR, today=TODAY)

        statuses = {shell.week_number: shell.status for shell in timeline.shells}
        assert statuses[-1] is WeekStatus.PAST
        assert statuses[0] is WeekStatus.CURRENT
        assert statuses[1] is WeekStatus.FUTURE

    def test_historical_anchor_reports_past_weeks(self, generator):
        """Status compares against today, not against the anchor."""
        timeline = generator.generate(ANCHOR, today=date(2024, 6, 1))

        assert {shell.status for shell in timeline.shells} == {WeekStatus.PAST}

    def test_custom_window(self, generator):
        window = TimelineWindow.rolling(past_weeks=0, future_weeks=2)

        timeline = generator.generate(ANCHOR, window, TODAY)

        assert [shell.week_number for shell in timeline.shells] == [0, 1, 2]

    def test_fixed_timeline_has_thirteen_weeks_from_anchor(self, generator):
        timeline = generator.generate_fixed(ANCHOR, today=TODAY)

        assert timeline.mode is TimelineMode.FIXED
        assert len(timeline.shells) == 13
        assert timeline.shells[0].week_number == 0
        assert timeline.shells[-1].week_number == 12

    def test_fixed_timeline_needs_a_week(self):
        with pytest.raises(ValueError, match="at least one week"):
            TimelineWindow.fixed(0)

    def test_shell_lookup(self, generator):
        timeline = generator.generate(ANCHOR, today=TODAY)

        assert timeline.shell_for(0).week_start == date(2024, 1, 15)
        assert timeline.covers(-4)
        assert not timeline.covers(-5)
        assert not timeline.covers(9)
