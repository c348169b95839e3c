"""Calendar bucketing and per-period statistics for weight records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence, Union

from ...models.records import WeightRecord
from ...models.stats import Granularity, PeriodChange, StatGroup
from .labels import day_label, month_label, week_label


@dataclass(frozen=True, slots=True)
class DayKey:
    day: date

    @property
    def first_day(self) -> date:
        return self.day

    def __str__(self) -> str:
        return self.day.isoformat()

    def label(self, locale: str) -> str:
        return day_label(self.day, locale)


@dataclass(frozen=True, slots=True)
class WeekKey:
    """ISO-8601 week; ``iso_year`` may differ from the calendar year."""

    iso_year: int
    week: int

    @property
    def first_day(self) -> date:
        return date.fromisocalendar(self.iso_year, self.week, 1)

    def __str__(self) -> str:
        return f"{self.iso_year}-W{self.week:02d}"

    def label(self, locale: str) -> str:
        return week_label(self.iso_year, self.week, locale)


@dataclass(frozen=True, slots=True)
class MonthKey:
    year: int
    month_index: int  # 0-based

    @property
    def first_day(self) -> date:
        return date(self.year, self.month_index + 1, 1)

    def __str__(self) -> str:
        return f"{self.year}-{self.month_index}"

    def label(self, locale: str) -> str:
        return month_label(self.year, self.month_index, locale)


@dataclass(frozen=True, slots=True)
class YearKey:
    year: int

    @property
    def first_day(self) -> date:
        return date(self.year, 1, 1)

    def __str__(self) -> str:
        return str(self.year)

    def label(self, locale: str) -> str:
        return str(self.year)


PeriodKey = Union[DayKey, WeekKey, MonthKey, YearKey]


def period_key(day: date, granularity: Granularity | str) -> PeriodKey:
    """Map a calendar day to the bucket containing it for ``granularity``."""

    granularity = Granularity(granularity)
    if granularity is Granularity.DAY:
        return DayKey(day)
    if granularity is Granularity.WEEK:
        iso_year, week, _ = day.isocalendar()
        return WeekKey(iso_year, week)
    if granularity is Granularity.MONTH:
        return MonthKey(day.year, day.month - 1)
    return YearKey(day.year)


@dataclass(slots=True)
class _Accumulator:
    count: int
    total: float
    low: float
    high: float
    first: date
    last: date

    def add(self, record: WeightRecord) -> None:
        self.count += 1
        self.total += record.weight
        self.low = min(self.low, record.weight)
        self.high = max(self.high, record.weight)
        if record.date < self.first:
            self.first = record.date
        if record.date > self.last:
            self.last = record.date


def aggregate(
    records: Sequence[WeightRecord],
    granularity: Granularity | str,
    locale: str = "ca",
) -> List[StatGroup]:
    """Group records into calendar buckets, newest bucket first."""

    buckets: Dict[PeriodKey, _Accumulator] = {}
    for record in records:
        key = period_key(record.date, granularity)
        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = _Accumulator(
                count=1,
                total=record.weight,
                low=record.weight,
                high=record.weight,
                first=record.date,
                last=record.date,
            )
        else:
            bucket.add(record)

    groups = [
        StatGroup(
            key=str(key),
            label=key.label(locale),
            count=bucket.count,
            sum=bucket.total,
            avg=bucket.total / bucket.count,
            min=bucket.low,
            max=bucket.high,
            first_date=bucket.first,
            last_date=bucket.last,
        )
        for key, bucket in buckets.items()
    ]
    return sorted(groups, key=lambda group: group.first_date, reverse=True)


def with_period_changes(groups: Sequence[StatGroup]) -> List[PeriodChange]:
    """Pair newest-first groups with the change against the preceding period.

    ``groups`` must be in the order returned by :func:`aggregate`; the entry at
    ``i + 1`` is the chronologically previous bucket. The oldest bucket has
    nothing to compare with and reports a change of ``0.0``.
    """

    changes: List[PeriodChange] = []
    for index, group in enumerate(groups):
        previous = groups[index + 1] if index + 1 < len(groups) else None
        diff = group.avg - previous.avg if previous is not None else 0.0
        changes.append(PeriodChange(group=group, diff=diff))
    return changes
