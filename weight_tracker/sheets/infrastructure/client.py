"""HTTP-backed implementation of the weight sheet port."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from ...platform.clients import RedisClient
from ...settings import Settings
from ..application.ports import SheetFetchError, WeightSheetPort

logger = logging.getLogger(__name__)

CACHE_KEY = "weight_sheet_csv"


class GoogleSheetCsvAdapter(WeightSheetPort):
    """Download the published Google Sheets CSV export, optionally cached in Redis."""

    def __init__(self, settings: Settings, redis: Optional[RedisClient] = None) -> None:
        self._settings = settings
        self._redis = redis

    async def fetch_csv(self) -> str:
        if self._redis is not None:
            cached = self._redis.get(CACHE_KEY)
            if cached:
                logger.debug("Serving weight sheet from cache")
                return cached

        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(self._settings.sheet_csv_url)

        if response.status_code != 200:
            raise SheetFetchError(
                f"Error fetching weight sheet: HTTP {response.status_code}"
            )

        text = response.text
        if self._redis is not None:
            self._redis.set(CACHE_KEY, text, ex=self._settings.sheet_cache_ttl_seconds)
        return text


def create_sheet_adapter(
    *, settings: Settings, redis: Optional[RedisClient] = None
) -> WeightSheetPort:
    """Create a sheet adapter without FastAPI dependencies."""
    return GoogleSheetCsvAdapter(settings=settings, redis=redis)
