"""Synthetic weight history shown when the real sheet is unavailable."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List

from ...domain.body_metrics.bmi import make_record
from ...models.records import BodyProfile, WeightRecord

DEMO_START_WEIGHT = 85.0


def generate_demo_records(
    profile: BodyProfile,
    today: date,
    days: int = 365,
    seed: int = 0,
) -> List[WeightRecord]:
    """Random walk with a slight downward drift, one record per day up to ``today``."""

    rng = random.Random(seed)
    weight = DEMO_START_WEIGHT
    records: List[WeightRecord] = []
    for offset in range(days, -1, -1):
        day = today - timedelta(days=offset)
        weight += (rng.random() - 0.55) * 0.2
        rounded = round(weight, 2)
        records.append(
            make_record(day, rounded, profile, original_label=f"{day:%d/%m/%Y}")
        )
    return records
