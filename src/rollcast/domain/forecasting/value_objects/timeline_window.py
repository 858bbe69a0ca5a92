"""Timeline window value object."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAST_WEEKS = 4
DEFAULT_FUTURE_WEEKS = 8
FIXED_WEEK_COUNT = 13


class TimelineMode(str, Enum):
    ROLLING = "rolling"
    FIXED = "fixed"


class TimelineWindow(BaseModel):
    """Which weeks around the anchor week a timeline covers.

    Rolling windows span ``past_weeks`` before and ``future_weeks`` after the
    anchor week. The fixed mode is a plain count of weeks starting at the
    anchor week.
    """

    mode: TimelineMode = TimelineMode.ROLLING
    past_weeks: int = Field(default=DEFAULT_PAST_WEEKS, ge=0)
    future_weeks: int = Field(default=DEFAULT_FUTURE_WEEKS, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def rolling(
        cls,
        past_weeks: int = DEFAULT_PAST_WEEKS,
        future_weeks: int = DEFAULT_FUTURE_WEEKS,
    ) -> "TimelineWindow":
        return cls(
            mode=TimelineMode.ROLLING,
            past_weeks=past_weeks,
            future_weeks=future_weeks,
        )

    @classmethod
    def fixed(cls, weeks: int = FIXED_WEEK_COUNT) -> "TimelineWindow":
        if weeks < 1:
            msg = "A fixed timeline needs at least one week"
            raise ValueError(msg)
        return cls(mode=TimelineMode.FIXED, past_weeks=0, future_weeks=weeks - 1)

    @property
    def week_count(self) -> int:
        return self.past_weeks + 1 + self.future_weeks

    @property
    def week_numbers(self) -> range:
        return range(-self.past_weeks, self.future_weeks + 1)
