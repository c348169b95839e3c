from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BmiCategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class TimeRange(str, Enum):
    """Trailing display windows offered by the dashboard."""

    MONTH1 = "1M"
    MONTH3 = "3M"
    YEAR1 = "1Y"
    ALL = "ALL"


class WeightSummary(BaseModel):
    """Headline figures for the whole observation period."""

    model_config = ConfigDict(frozen=True)

    current: float = Field(..., description="Most recent weight in kilograms")
    current_bmi: float
    bmi_category: BmiCategory
    start: float = Field(..., description="First recorded weight in kilograms")
    total_change: float
    recent_average: float = Field(
        ..., description="Mean weight over the trailing recent window"
    )
    minimum: float
    maximum: float
