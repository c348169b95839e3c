from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PredictionPoint(BaseModel):
    """Trend value and confidence band for one observed or future day."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    observed_weight: Optional[float] = Field(
        None, description="Measured weight, absent for future points"
    )
    trend_value: float
    lower_bound: float
    upper_bound: float
    is_future: bool


class Milestone(BaseModel):
    """Next whole-kilogram weight the trend line is projected to cross."""

    model_config = ConfigDict(frozen=True)

    weight: int
    date: dt.date


class PredictionResult(BaseModel):
    """Linear-regression forecast over the recent lookback window."""

    model_config = ConfigDict(frozen=True)

    points: List[PredictionPoint]
    daily_slope: float = Field(..., description="Fitted change in kilograms per day")
    weight_30_day_forecast: float = Field(
        ..., description="Trend value at the end of the forecast horizon"
    )
    fit_quality: float = Field(..., description="Coefficient of determination (R^2)")
    standard_error: float = Field(
        ..., description="Residual standard error of the fit in kilograms"
    )
    next_milestone: Optional[Milestone] = None
