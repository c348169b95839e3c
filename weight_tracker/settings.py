from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.records import BodyProfile

DEFAULT_SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQHBxexfNwpTBj3uAfTsa-3Y3ZUK7d88pfQBroQdkVtHHABVCvoWVsQdim3MtbQjOCgGukDvqiO3hOB"
    "/pub?gid=0&single=true&output=csv"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting providers expose upper-case variable names (e.g. ``SHEET_CSV_URL``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    sheet_csv_url: str = DEFAULT_SHEET_CSV_URL
    height_m: float = Field(1.74, gt=0)

    lookback_days: int = Field(45, ge=1)
    forecast_days: int = Field(30, ge=1)
    moving_average_window: int = Field(7, ge=1)
    recent_days: int = Field(30, ge=1)
    locale: Literal["ca", "en"] = "ca"
    demo_fallback: bool = True

    upstash_redis_rest_url: Optional[str] = None
    upstash_redis_rest_token: Optional[str] = None
    sheet_cache_ttl_seconds: int = Field(300, ge=1)

    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"

    @property
    def body_profile(self) -> BodyProfile:
        return BodyProfile(height_m=self.height_m)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
