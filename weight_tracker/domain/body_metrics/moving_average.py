"""Moving average helpers for weight records."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence

from ...models.records import WeightRecord
from ...models.stats import SmoothedRecord


def add_moving_average(
    records: Sequence[WeightRecord], window: int = 7
) -> List[SmoothedRecord]:
    """Attach a trailing ``window``-entry mean to every record.

    The window only looks backwards and shrinks near the start of the series,
    so the first output equals the first weight.
    """

    if window < 1:
        raise ValueError("window must be a positive integer")

    queue: Deque[float] = deque(maxlen=window)
    smoothed: List[SmoothedRecord] = []
    for record in records:
        queue.append(record.weight)
        smoothed.append(
            SmoothedRecord(record=record, moving_average=sum(queue) / len(queue))
        )
    return smoothed
