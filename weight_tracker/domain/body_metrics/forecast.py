"""Short-term weight forecast from a linear trend over recent records."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import List, Optional, Sequence

from ...models.prediction import Milestone, PredictionPoint, PredictionResult
from ...models.records import WeightRecord
from .regression import linear_regression

MIN_RECORDS = 5
MIN_WINDOW_RECORDS = 3
CONFIDENCE_Z = 1.96
HORIZON_WIDENING = 0.5
MIN_TREND_SLOPE = 0.001


def forecast_weight(
    records: Sequence[WeightRecord],
    lookback_days: int = 45,
    forecast_days: int = 30,
) -> Optional[PredictionResult]:
    """Fit a trend over the last ``lookback_days`` and project it forward.

    Returns ``None`` when there is not enough data: fewer than five records in
    total or fewer than three inside the lookback window.
    """

    if lookback_days < 1 or forecast_days < 1:
        raise ValueError("lookback_days and forecast_days must be positive integers")
    if len(records) < MIN_RECORDS:
        return None

    last_date = records[-1].date
    cutoff = last_date - timedelta(days=lookback_days)
    window = [record for record in records if record.date >= cutoff]
    if len(window) < MIN_WINDOW_RECORDS:
        return None

    xs = [float((record.date - cutoff).days) for record in window]
    ys = [record.weight for record in window]
    fit = linear_regression(xs, ys)

    points: List[PredictionPoint] = []
    for x, record in zip(xs, window):
        trend = fit.predict(x)
        points.append(
            PredictionPoint(
                date=record.date,
                observed_weight=record.weight,
                trend_value=trend,
                lower_bound=trend - fit.std_error,
                upper_bound=trend + fit.std_error,
                is_future=False,
            )
        )

    last_x = float((last_date - cutoff).days)
    future: List[PredictionPoint] = []
    for day in range(1, forecast_days + 1):
        trend = fit.predict(last_x + day)
        widening = 1 + (day / forecast_days) * HORIZON_WIDENING
        margin = fit.std_error * CONFIDENCE_Z * widening
        future.append(
            PredictionPoint(
                date=last_date + timedelta(days=day),
                observed_weight=None,
                trend_value=trend,
                lower_bound=trend - margin,
                upper_bound=trend + margin,
                is_future=True,
            )
        )

    return PredictionResult(
        points=points + future,
        daily_slope=fit.slope,
        weight_30_day_forecast=fit.predict(last_x + forecast_days),
        fit_quality=fit.r2,
        standard_error=fit.std_error,
        next_milestone=find_next_milestone(future, fit.slope),
    )


def find_next_milestone(
    future: Sequence[PredictionPoint], slope: float
) -> Optional[Milestone]:
    """Return the first future crossing of the next whole kilogram.

    The target is the floor of the current trend when losing weight and the
    ceiling when gaining. A flat trend has no milestone.
    """

    if not future or abs(slope) <= MIN_TREND_SLOPE:
        return None

    current = future[0].trend_value
    losing = slope < 0
    target = math.floor(current) if losing else math.ceil(current)
    for point in future:
        crossed = point.trend_value <= target if losing else point.trend_value >= target
        if crossed:
            return Milestone(weight=target, date=point.date)
    return None
