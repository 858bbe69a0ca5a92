"""Week timeline value object."""

from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict

from rollcast.domain.forecasting.value_objects.timeline_window import (
    TimelineMode,
    TimelineWindow,
)
from rollcast.domain.forecasting.value_objects.week_shell import WeekShell
from rollcast.domain.shared.time import monday_of


def relative_week_number(anchor: date, day: date) -> int:
    """Week offset of ``day`` from the Monday-start week containing ``anchor``."""
    return (monday_of(day) - monday_of(anchor)).days // 7


def week_start_for(anchor: date, week_number: int) -> date:
    return monday_of(anchor) + timedelta(weeks=week_number)


class WeekTimeline(BaseModel):
    """An anchored, ordered run of week shells.

    Week 0 is the Monday-start week containing ``anchor``. Every date maps to
    exactly one relative week number; only the numbers in ``shells`` belong
    to the timeline.
    """

    anchor: date
    window: TimelineWindow
    shells: tuple[WeekShell, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def mode(self) -> TimelineMode:
        return self.window.mode

    @property
    def start(self) -> date | None:
        return self.shells[0].week_start if self.shells else None

    @property
    def end(self) -> date | None:
        return self.shells[-1].week_end if self.shells else None

    def week_number_for(self, day: date) -> int:
        return relative_week_number(self.anchor, day)

    def shell_for(self, week_number: int) -> WeekShell | None:
        if not self.shells:
            return None
        index = week_number - self.shells[0].week_number
        if 0 <= index < len(self.shells):
            return self.shells[index]
        return None

    def covers(self, week_number: int) -> bool:
        return self.shell_for(week_number) is not None
