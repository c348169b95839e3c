from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .records import WeightRecord


class Granularity(str, Enum):
    """Calendar bucket size used by the period aggregator."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class StatGroup(BaseModel):
    """Aggregate statistics for every record sharing one calendar bucket."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable identifier of the calendar bucket")
    label: str = Field(..., description="Human-readable bucket name")
    count: int = Field(..., gt=0)
    sum: float
    avg: float
    min: float
    max: float
    first_date: dt.date
    last_date: dt.date

    @computed_field  # type: ignore[misc]
    @property
    def range(self) -> float:
        """Spread between the heaviest and lightest entry in the bucket."""
        return self.max - self.min


class PeriodChange(BaseModel):
    """A stat group paired with its change against the previous bucket."""

    model_config = ConfigDict(frozen=True)

    group: StatGroup
    diff: float = Field(
        0.0, description="Average weight minus the previous bucket's average"
    )


class SmoothedRecord(BaseModel):
    """A record paired with its trailing moving average."""

    model_config = ConfigDict(frozen=True)

    record: WeightRecord
    moving_average: float


class WeekdayStat(BaseModel):
    """Weight distribution and average day-over-day change for one weekday."""

    model_config = ConfigDict(frozen=True)

    day_index: int = Field(..., ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    day_name: str
    avg_weight: float
    min_weight: float
    max_weight: float
    avg_delta: float = Field(
        ..., description="Mean change from the chronologically previous record"
    )
    count: int

    @computed_field  # type: ignore[misc]
    @property
    def range(self) -> Tuple[float, float]:
        return (self.min_weight, self.max_weight)
