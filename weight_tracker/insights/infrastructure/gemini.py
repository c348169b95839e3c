"""Gemini-backed implementation of the insight port."""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

import httpx

from ...models.insight import AiInsight
from ...models.records import WeightRecord
from ...settings import Settings
from ..application.ports import WeightInsightPort

logger = logging.getLogger(__name__)

RECENT_RECORDS = 30

FALLBACK_INSIGHT = AiInsight(
    summary="No s'ha pogut analitzar les dades en aquest moment.",
    advice="Continua registrant el teu pes diàriament per obtenir millors resultats.",
    trend="stable",
)

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "advice": {"type": "STRING"},
        "trend": {"type": "STRING", "enum": ["positive", "negative", "stable"]},
    },
    "required": ["summary", "advice", "trend"],
}


def build_prompt(records: Sequence[WeightRecord]) -> str:
    """Describe the last records and overall change for the model."""

    recent = records[-RECENT_RECORDS:]
    lines = "\n".join(f"{record.original_label}: {record.weight}kg" for record in recent)
    total_change = records[-1].weight - records[0].weight
    return (
        "You are an expert nutritionist and personal trainer who answers in Catalan.\n"
        f"Analyse the user's last {len(recent)} weight entries. "
        f"Total change since the first entry: {total_change:.1f}kg.\n\n"
        f"Entries (date: weight):\n{lines}\n\n"
        "Reply as JSON with:\n"
        "- summary: the current trend in at most two sentences.\n"
        "- advice: one motivating, actionable tip in at most two sentences.\n"
        '- trend: "positive" when weight falls or settles healthily, '
        '"negative" when it rises quickly, otherwise "stable". '
        "Assume the user wants to keep weight under control or lose it."
    )


class GeminiInsightAdapter(WeightInsightPort):
    """Ask the Gemini ``generateContent`` endpoint for a structured insight."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def analyze(self, records: Sequence[WeightRecord]) -> AiInsight:
        if not records:
            return FALLBACK_INSIGHT

        payload = {
            "contents": [{"parts": [{"text": build_prompt(records)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        url = (
            f"{self._settings.gemini_api_url}/models/"
            f"{self._settings.gemini_model}:generateContent"
        )
        headers = {"x-goog-api-key": self._settings.gemini_api_key or ""}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            text = response.json()["candidates"][0]["content"]["parts"][0]["text"]
            return AiInsight.model_validate_json(text)
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError):
            logger.exception("Gemini analysis failed")
            return FALLBACK_INSIGHT


def create_insight_adapter(*, settings: Settings) -> WeightInsightPort:
    return GeminiInsightAdapter(settings=settings)
