"""Shared test fixtures and doubles."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from weight_tracker import main
from weight_tracker.insights.application import WeightInsightPort
from weight_tracker.models.insight import AiInsight
from weight_tracker.models.records import WeightRecord
from weight_tracker.platform.clients import get_redis
from weight_tracker.platform.wiring import provide_insight_port, provide_sheet_port
from weight_tracker.settings import Settings, get_settings
from weight_tracker.sheets.application import WeightSheetPort


class RecordingRedis:
    """In-memory Redis double that remembers expirations."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.store: Dict[str, str] = dict(initial or {})
        self.expirations: Dict[str, Optional[int]] = {}

    def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self.store[key] = value
        self.expirations[key] = ex


@dataclass
class _Expectation:
    returns: Any = None
    raises: Exception | None = None


class SheetPortFake(WeightSheetPort):
    """Sheet port double returning queued CSV payloads."""

    def __init__(self) -> None:
        self._expected: list[_Expectation] = []
        self.calls = 0
        self.csv = ""

    def with_csv(self, text: str) -> "SheetPortFake":
        self.csv = text
        return self

    def expect_fetch(
        self, *, returns: str | None = None, raises: Exception | None = None
    ) -> "SheetPortFake":
        self._expected.append(_Expectation(returns, raises))
        return self

    async def fetch_csv(self) -> str:
        self.calls += 1
        if self._expected:
            expectation = self._expected.pop(0)
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return self.csv


class InsightPortFake(WeightInsightPort):
    """Insight port double recording the records it was asked about."""

    def __init__(self) -> None:
        self.insight = AiInsight(summary="Steady.", advice="Keep going.", trend="stable")
        self.analyzed: List[Sequence[WeightRecord]] = []

    async def analyze(self, records: Sequence[WeightRecord]) -> AiInsight:
        self.analyzed.append(records)
        return self.insight


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        sheet_csv_url="https://sheets.example.com/pub?output=csv",
        height_m=1.74,
        demo_fallback=False,
        gemini_api_key="gemini-key",
        gemini_api_url="https://gemini.example.com/v1beta",
    )


@pytest.fixture
def sheet_port_fake() -> SheetPortFake:
    return SheetPortFake()


@pytest.fixture
def insight_port_fake() -> InsightPortFake:
    return InsightPortFake()


@pytest.fixture
def app(
    settings: Settings,
    sheet_port_fake: SheetPortFake,
    insight_port_fake: InsightPortFake,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: None,
        provide_sheet_port: lambda: sheet_port_fake,
        provide_insight_port: lambda: insight_port_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
