from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class BodyProfile(BaseModel):
    """Fixed body attributes used to derive per-record metrics such as BMI."""

    model_config = ConfigDict(frozen=True)

    height_m: float = Field(..., gt=0, description="Body height in metres")


class WeightRecord(BaseModel):
    """A single validated body-weight observation attached to one calendar day."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "date": "2025-08-09",
                "weight": 72.5,
                "bmi": 23.95,
                "original_label": "09/08/2025",
            }
        },
    )

    date: dt.date = Field(..., description="Calendar day of the measurement")
    weight: float = Field(..., gt=0, description="Body weight in kilograms")
    bmi: float = Field(..., gt=0, description="Body mass index derived from weight and height")
    original_label: str = Field(
        "", description="Date cell exactly as it appeared in the source sheet"
    )


class WeightRecordsResponse(BaseModel):
    """Ascending sequence of records plus a flag for generated demo data."""

    records: List[WeightRecord]
    is_demo: bool = Field(
        False, description="True when the sheet was unreachable and demo data is served"
    )
