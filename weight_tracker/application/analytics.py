"""Use cases exposing the analytics engine over the fetched weight history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from ..domain.body_metrics.forecast import forecast_weight
from ..domain.body_metrics.moving_average import add_moving_average
from ..domain.body_metrics.periods import aggregate, with_period_changes
from ..domain.body_metrics.summary import filter_time_range, summarize
from ..domain.body_metrics.weekday import weekday_profile
from ..models.prediction import PredictionResult
from ..models.stats import Granularity, PeriodChange, SmoothedRecord, WeekdayStat
from ..models.summary import TimeRange, WeightSummary
from .records import GetWeightRecordsUseCase

TodayProvider = Callable[[], date]


@dataclass
class GetPeriodStatsUseCase:
    """Newest-first calendar buckets with the change against the previous bucket."""

    records: GetWeightRecordsUseCase
    locale: str = "ca"

    async def __call__(self, granularity: Granularity) -> List[PeriodChange]:
        response = await self.records()
        groups = aggregate(response.records, granularity, locale=self.locale)
        return with_period_changes(groups)


@dataclass
class GetMovingAverageUseCase:
    records: GetWeightRecordsUseCase
    default_window: int = 7

    async def __call__(self, window: Optional[int] = None) -> List[SmoothedRecord]:
        response = await self.records()
        return add_moving_average(response.records, window or self.default_window)


@dataclass
class GetWeekdayProfileUseCase:
    records: GetWeightRecordsUseCase
    locale: str = "ca"

    async def __call__(self) -> List[WeekdayStat]:
        response = await self.records()
        return weekday_profile(response.records, locale=self.locale)


@dataclass
class GetForecastUseCase:
    """Linear trend forecast; ``None`` while there is not enough data yet."""

    records: GetWeightRecordsUseCase
    default_lookback_days: int = 45
    default_forecast_days: int = 30

    async def __call__(
        self,
        lookback_days: Optional[int] = None,
        forecast_days: Optional[int] = None,
    ) -> Optional[PredictionResult]:
        response = await self.records()
        return forecast_weight(
            response.records,
            lookback_days=lookback_days or self.default_lookback_days,
            forecast_days=forecast_days or self.default_forecast_days,
        )


@dataclass
class GetWeightSummaryUseCase:
    records: GetWeightRecordsUseCase
    recent_days: int = 30
    today_provider: TodayProvider = date.today

    async def __call__(self, time_range: TimeRange = TimeRange.ALL) -> Optional[WeightSummary]:
        response = await self.records()
        selected = filter_time_range(response.records, time_range)
        return summarize(selected, today=self.today_provider(), recent_days=self.recent_days)


__all__ = [
    "GetPeriodStatsUseCase",
    "GetMovingAverageUseCase",
    "GetWeekdayProfileUseCase",
    "GetForecastUseCase",
    "GetWeightSummaryUseCase",
]
