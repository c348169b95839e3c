"""Application layer use cases coordinating domain services."""

from .analytics import (
    GetForecastUseCase,
    GetMovingAverageUseCase,
    GetPeriodStatsUseCase,
    GetWeekdayProfileUseCase,
    GetWeightSummaryUseCase,
)
from .insight import GetWeightInsightUseCase
from .records import GetWeightRecordsUseCase

__all__ = [
    "GetForecastUseCase",
    "GetMovingAverageUseCase",
    "GetPeriodStatsUseCase",
    "GetWeekdayProfileUseCase",
    "GetWeightInsightUseCase",
    "GetWeightRecordsUseCase",
    "GetWeightSummaryUseCase",
]
