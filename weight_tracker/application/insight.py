from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..insights.application import InsightUnavailableError, WeightInsightPort
from ..models.insight import AiInsight
from .records import GetWeightRecordsUseCase


@dataclass
class GetWeightInsightUseCase:
    """Ask the configured narrative provider to describe the recent trend."""

    records: GetWeightRecordsUseCase
    insight_port: Optional[WeightInsightPort] = None

    async def __call__(self) -> AiInsight:
        if self.insight_port is None:
            raise InsightUnavailableError("No AI insight provider is configured")
        response = await self.records()
        return await self.insight_port.analyze(response.records)


__all__ = ["GetWeightInsightUseCase"]
