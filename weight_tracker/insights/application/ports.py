"""Ports for natural-language trend narratives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...models.insight import AiInsight
from ...models.records import WeightRecord


class InsightUnavailableError(RuntimeError):
    """No narrative provider is configured."""


class WeightInsightPort(ABC):
    """Interface describing a narrative summariser for weight records."""

    @abstractmethod
    async def analyze(self, records: Sequence[WeightRecord]) -> AiInsight:
        """Return a short reading of the recent trend in ``records``."""
