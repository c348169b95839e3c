"""Day-of-week weight profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ...models.records import WeightRecord
from ...models.stats import WeekdayStat
from .labels import weekday_index, weekday_name


@dataclass(slots=True)
class _WeekdayBucket:
    total: float = 0.0
    count: int = 0
    low: float = float("inf")
    high: float = float("-inf")
    delta_total: float = 0.0
    delta_count: int = 0


def weekday_profile(
    records: Sequence[WeightRecord], locale: str = "ca"
) -> List[WeekdayStat]:
    """Summarise weights per weekday, ordered Monday through Sunday.

    ``avg_delta`` for a weekday is the mean of ``weight[i] - weight[i - 1]``
    over the whole chronologically sorted series, attributed to the weekday of
    the later record. It is the change perceived on that weekday, not a
    comparison with the same weekday a week earlier.
    """

    ordered = sorted(records, key=lambda record: record.date)
    buckets = [_WeekdayBucket() for _ in range(7)]

    for index, record in enumerate(ordered):
        bucket = buckets[weekday_index(record.date)]
        bucket.total += record.weight
        bucket.count += 1
        bucket.low = min(bucket.low, record.weight)
        bucket.high = max(bucket.high, record.weight)

        if index > 0:
            bucket.delta_total += record.weight - ordered[index - 1].weight
            bucket.delta_count += 1

    stats = [
        WeekdayStat(
            day_index=day,
            day_name=weekday_name(day, locale),
            avg_weight=bucket.total / bucket.count if bucket.count else 0.0,
            min_weight=bucket.low if bucket.count else 0.0,
            max_weight=bucket.high if bucket.count else 0.0,
            avg_delta=(
                bucket.delta_total / bucket.delta_count if bucket.delta_count else 0.0
            ),
            count=bucket.count,
        )
        for day, bucket in enumerate(buckets)
    ]
    # Sunday-first internally; rotate so the week starts on Monday.
    return stats[1:] + stats[:1]
