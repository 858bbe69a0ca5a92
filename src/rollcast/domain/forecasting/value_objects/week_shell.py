"""Week shell value object."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from rollcast.domain.forecasting.value_objects.week_status import WeekStatus


class WeekShell(BaseModel):
    """An empty week slot of the rolling timeline (Monday to Sunday)."""

    week_number: int
    week_start: date
    week_end: date
    status: WeekStatus

    model_config = ConfigDict(frozen=True)

    def contains(self, day: date) -> bool:
        return self.week_start <= day <= self.week_end
