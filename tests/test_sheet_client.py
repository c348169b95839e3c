from datetime import date

import httpx
import pytest
import respx

from weight_tracker.settings import Settings
from weight_tracker.sheets.application import SheetFetchError, fetch_weight_records
from weight_tracker.sheets.infrastructure.client import CACHE_KEY, GoogleSheetCsvAdapter

from tests.builders import PROFILE, sheet_csv
from tests.conftest import RecordingRedis, SheetPortFake

pytestmark = pytest.mark.asyncio

CSV = sheet_csv("01/03/2024,80.1", "02/03/2024,79.9")


@respx.mock
async def test_fetch_csv_downloads_and_caches(
    settings: Settings, respx_mock: respx.Router
) -> None:
    redis = RecordingRedis()
    route = respx_mock.get(settings.sheet_csv_url).mock(
        return_value=httpx.Response(200, text=CSV)
    )

    adapter = GoogleSheetCsvAdapter(settings, redis=redis)

    assert await adapter.fetch_csv() == CSV
    assert route.called
    assert redis.store[CACHE_KEY] == CSV
    assert redis.expirations[CACHE_KEY] == settings.sheet_cache_ttl_seconds


@respx.mock
async def test_fetch_csv_prefers_cached_copy(
    settings: Settings, respx_mock: respx.Router
) -> None:
    route = respx_mock.get(settings.sheet_csv_url).mock(
        return_value=httpx.Response(200, text="stale")
    )

    adapter = GoogleSheetCsvAdapter(settings, redis=RecordingRedis({CACHE_KEY: CSV}))

    assert await adapter.fetch_csv() == CSV
    assert not route.called


@respx.mock
async def test_fetch_csv_raises_on_error_status(
    settings: Settings, respx_mock: respx.Router
) -> None:
    respx_mock.get(settings.sheet_csv_url).mock(return_value=httpx.Response(404))

    with pytest.raises(SheetFetchError):
        await GoogleSheetCsvAdapter(settings).fetch_csv()


async def test_fetch_weight_records_parses_sheet(sheet_port_fake: SheetPortFake) -> None:
    sheet_port_fake.with_csv(CSV)

    response = await fetch_weight_records(sheet_port_fake, PROFILE, demo_fallback=False)

    assert not response.is_demo
    assert [r.weight for r in response.records] == [80.1, 79.9]


async def test_fetch_weight_records_serves_demo_data_on_failure(
    sheet_port_fake: SheetPortFake,
) -> None:
    sheet_port_fake.expect_fetch(raises=httpx.ConnectError("offline"))

    response = await fetch_weight_records(
        sheet_port_fake, PROFILE, demo_fallback=True, today=date(2024, 6, 30)
    )

    assert response.is_demo
    assert response.records[-1].date == date(2024, 6, 30)


async def test_fetch_weight_records_treats_empty_sheet_as_failure(
    sheet_port_fake: SheetPortFake,
) -> None:
    sheet_port_fake.with_csv("Dia,Pes\n")

    with pytest.raises(SheetFetchError):
        await fetch_weight_records(sheet_port_fake, PROFILE, demo_fallback=False)


async def test_fetch_weight_records_reraises_without_fallback(
    sheet_port_fake: SheetPortFake,
) -> None:
    sheet_port_fake.expect_fetch(raises=httpx.ConnectError("offline"))

    with pytest.raises(httpx.ConnectError):
        await fetch_weight_records(sheet_port_fake, PROFILE, demo_fallback=False)
