from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable

from ..models.records import BodyProfile, WeightRecordsResponse
from ..sheets.application import WeightSheetPort, fetch_weight_records

RecordsFetcher = Callable[..., Awaitable[WeightRecordsResponse]]


@dataclass
class GetWeightRecordsUseCase:
    """Return the ascending weight history read from the sheet."""

    sheet_port: WeightSheetPort
    profile: BodyProfile
    demo_fallback: bool = True
    records_fetcher: RecordsFetcher = fetch_weight_records

    async def __call__(self) -> WeightRecordsResponse:
        return await self.records_fetcher(
            self.sheet_port, self.profile, demo_fallback=self.demo_fallback
        )


__all__ = ["GetWeightRecordsUseCase"]
