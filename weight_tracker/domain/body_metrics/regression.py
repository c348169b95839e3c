"""Ordinary least-squares line fitting."""

from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Sequence


@dataclass(frozen=True, slots=True)
class LinearFit:
    """Fitted ``y = slope * x + intercept`` with goodness-of-fit figures."""

    slope: float
    intercept: float
    r2: float
    std_error: float
    n: int

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> LinearFit:
    """Fit a least-squares line through paired ``xs`` and ``ys``.

    Degenerate inputs never produce NaN or infinity: identical ``xs`` give a
    flat line through the mean, fewer than three points give a zero standard
    error, and a zero-variance ``ys`` reports ``r2 == 1.0``.
    """

    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    n = len(xs)
    if n == 0:
        raise ValueError("at least one point is required")

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_xx = sum(x * x for x in xs)

    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator if denominator else 0.0
    intercept = (sum_y - slope * sum_x) / n

    ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys))
    std_error = sqrt(ss_res / (n - 2)) if n > 2 else 0.0

    y_mean = sum_y / n
    ss_tot = sum((y - y_mean) ** 2 for y in ys)
    r2 = 1 - ss_res / ss_tot if ss_tot else 1.0

    return LinearFit(
        slope=slope, intercept=intercept, r2=r2, std_error=std_error, n=n
    )
