from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..application.analytics import GetForecastUseCase
from ..application.insight import GetWeightInsightUseCase
from ..models.insight import AiInsight
from ..models.prediction import PredictionResult
from ..platform.wiring import get_forecast_use_case, get_weight_insight_use_case
from .utils import horizon_query, lookback_query

router: APIRouter = APIRouter()


@router.get("/forecast", response_model=Optional[PredictionResult])
async def get_forecast(
    lookback_days: Optional[int] = lookback_query,
    forecast_days: Optional[int] = horizon_query,
    use_case: GetForecastUseCase = Depends(get_forecast_use_case),
) -> Optional[PredictionResult]:
    """Linear trend forecast with confidence bands, or ``null`` without enough data."""
    return await use_case(lookback_days, forecast_days)


@router.get("/insight", response_model=AiInsight)
async def get_insight(
    use_case: GetWeightInsightUseCase = Depends(get_weight_insight_use_case),
) -> AiInsight:
    """Natural-language reading of the recent trend."""
    return await use_case()
