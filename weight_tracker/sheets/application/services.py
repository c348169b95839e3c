"""Application services turning the weight sheet into records."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import httpx

from ...models.records import BodyProfile, WeightRecordsResponse
from ..domain.csv_parser import parse_weight_csv
from ..domain.demo import generate_demo_records
from .ports import SheetFetchError, WeightSheetPort

logger = logging.getLogger(__name__)


async def fetch_weight_records(
    port: WeightSheetPort,
    profile: BodyProfile,
    *,
    demo_fallback: bool = True,
    today: Optional[date] = None,
) -> WeightRecordsResponse:
    """Fetch and parse the sheet, serving demo data if it cannot be read."""

    try:
        text = await port.fetch_csv()
        records = parse_weight_csv(text, profile)
        if not records:
            raise SheetFetchError("No weight records found in the sheet")
    except (httpx.HTTPError, SheetFetchError):
        if not demo_fallback:
            raise
        logger.exception("Failed to load the weight sheet; serving demo data")
        demo = generate_demo_records(profile, today or date.today())
        return WeightRecordsResponse(records=demo, is_demo=True)

    return WeightRecordsResponse(records=records, is_demo=False)
