from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AiInsight(BaseModel):
    """Short natural-language reading of the recent weight trend."""

    summary: str = Field(..., description="One or two sentences describing the trend")
    advice: str = Field(..., description="One or two sentences of actionable advice")
    trend: Literal["positive", "negative", "stable"]
