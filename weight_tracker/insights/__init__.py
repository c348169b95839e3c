"""AI narrative integration for weight trends."""

from .application import InsightUnavailableError, WeightInsightPort
from .infrastructure import GeminiInsightAdapter, create_insight_adapter

__all__ = [
    "InsightUnavailableError",
    "WeightInsightPort",
    "GeminiInsightAdapter",
    "create_insight_adapter",
]
