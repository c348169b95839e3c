import math
from datetime import date, timedelta

import pytest

from weight_tracker.domain.body_metrics.forecast import forecast_weight
from weight_tracker.domain.body_metrics.regression import linear_regression

from tests.builders import daily_series, linear_series, make_record_on


def test_requires_five_records() -> None:
    records = linear_series(date(2024, 1, 1), 4, 80.0, -0.1)

    assert forecast_weight(records) is None


def test_requires_three_records_inside_lookback() -> None:
    records = [
        make_record_on(date(2024, 1, 1), 80.0),
        make_record_on(date(2024, 1, 2), 79.9),
        make_record_on(date(2024, 1, 3), 79.8),
        make_record_on(date(2024, 4, 10), 78.0),
        make_record_on(date(2024, 4, 11), 77.9),
    ]

    assert forecast_weight(records, lookback_days=45) is None


def test_perfect_linear_loss() -> None:
    records = linear_series(date(2024, 1, 1), 60, 90.0, -0.1)

    result = forecast_weight(records, lookback_days=45, forecast_days=30)

    assert result is not None
    assert result.daily_slope == pytest.approx(-0.1)
    assert result.fit_quality == pytest.approx(1.0)
    assert result.standard_error == pytest.approx(0.0, abs=1e-6)
    assert result.weight_30_day_forecast == pytest.approx(90.0 - 0.1 * 89)

    history = [point for point in result.points if not point.is_future]
    future = [point for point in result.points if point.is_future]
    assert len(history) == 46
    assert len(future) == 30
    assert history[0].date == date(2024, 1, 15)
    assert [point.date for point in future] == [
        records[-1].date + timedelta(days=day) for day in range(1, 31)
    ]
    assert all(point.observed_weight is None for point in future)
    assert [point.observed_weight for point in history] == [r.weight for r in records[14:]]


def test_history_band_is_one_standard_error() -> None:
    weights = [80 - 0.05 * i + (0.3 if i % 2 else -0.3) for i in range(30)]
    result = forecast_weight(daily_series(date(2024, 3, 1), weights))

    assert result is not None
    assert result.standard_error > 0
    for point in result.points:
        if not point.is_future:
            assert point.upper_bound - point.trend_value == pytest.approx(result.standard_error)
            assert point.trend_value - point.lower_bound == pytest.approx(result.standard_error)


def test_future_band_widens_with_horizon() -> None:
    weights = [80 - 0.05 * i + (0.3 if i % 2 else -0.3) for i in range(30)]
    result = forecast_weight(daily_series(date(2024, 3, 1), weights), forecast_days=10)

    assert result is not None
    margins = [
        (point.upper_bound - point.lower_bound) / 2 for point in result.points if point.is_future
    ]
    assert margins == sorted(margins)
    assert margins[0] < margins[-1]
    assert margins[0] == pytest.approx(result.standard_error * 1.96 * 1.05)
    assert margins[-1] == pytest.approx(result.standard_error * 1.96 * 1.5)


def test_milestone_scenario_losing_weight() -> None:
    records = linear_series(date(2024, 1, 1), 50, 80.0, -0.2)

    result = forecast_weight(records, lookback_days=45)

    assert result is not None
    future = [point for point in result.points if point.is_future]
    target = math.floor(future[0].trend_value)
    expected = next(point for point in future if point.trend_value <= target)
    assert result.next_milestone is not None
    assert result.next_milestone.weight == target
    assert result.next_milestone.date == expected.date


def test_milestone_floor_when_losing() -> None:
    records = linear_series(date(2024, 1, 1), 50, 80.05, -0.2)

    result = forecast_weight(records)

    assert result is not None
    # Trend continues 70.05, 69.85, ... so 70 kg is crossed on the second day.
    assert result.next_milestone is not None
    assert result.next_milestone.weight == 70
    assert result.next_milestone.date == records[-1].date + timedelta(days=2)


def test_milestone_ceil_when_gaining() -> None:
    records = linear_series(date(2024, 1, 1), 20, 70.05, 0.2)

    result = forecast_weight(records)

    assert result is not None
    assert result.next_milestone is not None
    assert result.next_milestone.weight == 75
    assert result.next_milestone.date == records[-1].date + timedelta(days=6)


def test_flat_series_is_a_perfect_fit_without_milestone() -> None:
    records = daily_series(date(2024, 1, 1), [75.0] * 10)

    result = forecast_weight(records)

    assert result is not None
    assert result.daily_slope == 0.0
    assert result.fit_quality == 1.0
    assert result.standard_error == 0.0
    assert result.next_milestone is None
    assert all(point.lower_bound == point.upper_bound for point in result.points)


def test_milestone_outside_horizon_is_absent() -> None:
    records = linear_series(date(2024, 1, 1), 20, 70.5, -0.01)

    result = forecast_weight(records, forecast_days=10)

    assert result is not None
    assert result.next_milestone is None


def test_rejects_non_positive_windows() -> None:
    records = linear_series(date(2024, 1, 1), 10, 80.0, -0.1)

    with pytest.raises(ValueError):
        forecast_weight(records, lookback_days=0)
    with pytest.raises(ValueError):
        forecast_weight(records, forecast_days=0)


def test_forecast_is_deterministic() -> None:
    weights = [80 - 0.05 * i + (0.3 if i % 3 else -0.2) for i in range(40)]
    records = daily_series(date(2024, 3, 1), weights)

    assert forecast_weight(records) == forecast_weight(records)


def test_regression_guards_degenerate_inputs() -> None:
    two_points = linear_regression([0.0, 1.0], [80.0, 79.0])
    same_x = linear_regression([3.0, 3.0, 3.0], [80.0, 81.0, 82.0])

    assert two_points.slope == pytest.approx(-1.0)
    assert two_points.std_error == 0.0
    assert same_x.slope == 0.0
    assert same_x.intercept == pytest.approx(81.0)
