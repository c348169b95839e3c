"""Infrastructure helpers for trend narratives."""

from .gemini import FALLBACK_INSIGHT, GeminiInsightAdapter, create_insight_adapter

__all__ = ["FALLBACK_INSIGHT", "GeminiInsightAdapter", "create_insight_adapter"]
