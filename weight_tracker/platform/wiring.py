"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends

from ..application.analytics import (
    GetForecastUseCase,
    GetMovingAverageUseCase,
    GetPeriodStatsUseCase,
    GetWeekdayProfileUseCase,
    GetWeightSummaryUseCase,
)
from ..application.insight import GetWeightInsightUseCase
from ..application.records import GetWeightRecordsUseCase
from ..insights.application import WeightInsightPort
from ..insights.infrastructure import create_insight_adapter
from ..settings import Settings, get_settings
from ..sheets.application import WeightSheetPort
from ..sheets.infrastructure import create_sheet_adapter
from .clients import RedisClient, get_redis


def provide_sheet_port(
    redis: Optional[RedisClient] = Depends(get_redis),
    settings: Settings = Depends(get_settings),
) -> WeightSheetPort:
    return create_sheet_adapter(settings=settings, redis=redis)


def provide_insight_port(
    settings: Settings = Depends(get_settings),
) -> Optional[WeightInsightPort]:
    if not settings.gemini_api_key:
        return None
    return create_insight_adapter(settings=settings)


def get_weight_records_use_case(
    port: WeightSheetPort = Depends(provide_sheet_port),
    settings: Settings = Depends(get_settings),
) -> GetWeightRecordsUseCase:
    return GetWeightRecordsUseCase(
        sheet_port=port,
        profile=settings.body_profile,
        demo_fallback=settings.demo_fallback,
    )


def get_period_stats_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    settings: Settings = Depends(get_settings),
) -> GetPeriodStatsUseCase:
    return GetPeriodStatsUseCase(records, locale=settings.locale)


def get_moving_average_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    settings: Settings = Depends(get_settings),
) -> GetMovingAverageUseCase:
    return GetMovingAverageUseCase(records, default_window=settings.moving_average_window)


def get_weekday_profile_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    settings: Settings = Depends(get_settings),
) -> GetWeekdayProfileUseCase:
    return GetWeekdayProfileUseCase(records, locale=settings.locale)


def get_forecast_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    settings: Settings = Depends(get_settings),
) -> GetForecastUseCase:
    return GetForecastUseCase(
        records,
        default_lookback_days=settings.lookback_days,
        default_forecast_days=settings.forecast_days,
    )


def get_weight_summary_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    settings: Settings = Depends(get_settings),
) -> GetWeightSummaryUseCase:
    return GetWeightSummaryUseCase(records, recent_days=settings.recent_days)


def get_weight_insight_use_case(
    records: GetWeightRecordsUseCase = Depends(get_weight_records_use_case),
    port: Optional[WeightInsightPort] = Depends(provide_insight_port),
) -> GetWeightInsightUseCase:
    return GetWeightInsightUseCase(records, insight_port=port)


__all__ = [
    "provide_sheet_port",
    "provide_insight_port",
    "get_weight_records_use_case",
    "get_period_stats_use_case",
    "get_moving_average_use_case",
    "get_weekday_profile_use_case",
    "get_forecast_use_case",
    "get_weight_summary_use_case",
    "get_weight_insight_use_case",
]
