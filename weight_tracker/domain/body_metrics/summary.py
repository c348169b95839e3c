"""Headline figures and time-range filtering for the dashboard."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List, Optional, Sequence

from ...models.records import WeightRecord
from ...models.summary import TimeRange, WeightSummary
from .bmi import bmi_category

_RANGE_MONTHS = {
    TimeRange.MONTH1: 1,
    TimeRange.MONTH3: 3,
    TimeRange.YEAR1: 12,
}


def months_before(day: date, months: int) -> date:
    """Shift ``day`` back by calendar months, clamping to the month's end."""

    month_zero = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_zero, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def filter_time_range(
    records: Sequence[WeightRecord],
    time_range: TimeRange | str,
    reference: Optional[date] = None,
) -> List[WeightRecord]:
    """Keep the records inside the trailing ``time_range`` ending at ``reference``."""

    time_range = TimeRange(time_range)
    if time_range is TimeRange.ALL or not records:
        return list(records)
    if reference is None:
        reference = records[-1].date
    start = months_before(reference, _RANGE_MONTHS[time_range])
    return [record for record in records if record.date >= start]


def summarize(
    records: Sequence[WeightRecord],
    today: date,
    recent_days: int = 30,
) -> Optional[WeightSummary]:
    if not records:
        return None

    latest = records[-1]
    first = records[0]
    recent_start = today - timedelta(days=recent_days)
    recent = [record.weight for record in records if record.date >= recent_start]
    weights = [record.weight for record in records]

    return WeightSummary(
        current=latest.weight,
        current_bmi=latest.bmi,
        bmi_category=bmi_category(latest.bmi),
        start=first.weight,
        total_change=latest.weight - first.weight,
        recent_average=sum(recent) / len(recent) if recent else latest.weight,
        minimum=min(weights),
        maximum=max(weights),
    )
