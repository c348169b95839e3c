"""Body mass index helpers."""

from __future__ import annotations

from datetime import date
from typing import Optional

from ...models.records import BodyProfile, WeightRecord
from ...models.summary import BmiCategory


def calculate_bmi(weight: float, profile: BodyProfile) -> float:
    """Return ``weight / height^2`` for the given body profile."""

    return weight / (profile.height_m * profile.height_m)


def bmi_category(bmi: float) -> BmiCategory:
    """Classify a BMI value using the WHO adult cut-offs."""

    if bmi < 18.5:
        return BmiCategory.UNDERWEIGHT
    if bmi < 25:
        return BmiCategory.NORMAL
    if bmi < 30:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def make_record(
    day: date,
    weight: float,
    profile: BodyProfile,
    original_label: Optional[str] = None,
) -> WeightRecord:
    """Build a record whose BMI is derived from ``profile``."""

    return WeightRecord(
        date=day,
        weight=weight,
        bmi=calculate_bmi(weight, profile),
        original_label=original_label if original_label is not None else day.isoformat(),
    )
