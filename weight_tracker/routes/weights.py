from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..application.analytics import (
    GetMovingAverageUseCase,
    GetPeriodStatsUseCase,
    GetWeekdayProfileUseCase,
    GetWeightSummaryUseCase,
)
from ..application.records import GetWeightRecordsUseCase
from ..models.records import WeightRecordsResponse
from ..models.stats import Granularity, PeriodChange, SmoothedRecord, WeekdayStat
from ..models.summary import TimeRange, WeightSummary
from ..platform.wiring import (
    get_moving_average_use_case,
    get_period_stats_use_case,
    get_weekday_profile_use_case,
    get_weight_records_use_case,
    get_weight_summary_use_case,
)
from .utils import window_query

router: APIRouter = APIRouter()


@router.get("/weights", response_model=WeightRecordsResponse)
async def list_weights(
    use_case: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
) -> WeightRecordsResponse:
    """Return the full weight history, oldest first."""
    return await use_case()


@router.get("/stats/{granularity}", response_model=List[PeriodChange])
async def get_period_stats(
    granularity: Granularity,
    use_case: GetPeriodStatsUseCase = Depends(get_period_stats_use_case),
) -> List[PeriodChange]:
    """Aggregate weights per day, week, month or year, newest first."""
    return await use_case(granularity)


@router.get("/moving-average", response_model=List[SmoothedRecord])
async def get_moving_average(
    window: Optional[int] = window_query,
    use_case: GetMovingAverageUseCase = Depends(get_moving_average_use_case),
) -> List[SmoothedRecord]:
    return await use_case(window)


@router.get("/weekdays", response_model=List[WeekdayStat])
async def get_weekday_profile(
    use_case: GetWeekdayProfileUseCase = Depends(get_weekday_profile_use_case),
) -> List[WeekdayStat]:
    """Weight distribution per weekday, Monday through Sunday."""
    return await use_case()


@router.get("/summary", response_model=Optional[WeightSummary])
async def get_summary(
    time_range: TimeRange = Query(TimeRange.ALL, alias="range"),
    use_case: GetWeightSummaryUseCase = Depends(get_weight_summary_use_case),
) -> Optional[WeightSummary]:
    return await use_case(time_range)
