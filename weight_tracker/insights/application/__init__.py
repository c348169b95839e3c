"""Application layer helpers for trend narratives."""

from .ports import InsightUnavailableError, WeightInsightPort

__all__ = ["InsightUnavailableError", "WeightInsightPort"]
