from datetime import date

import pytest

from weight_tracker.domain.body_metrics.weekday import weekday_profile

from tests.builders import daily_series, make_record_on

TWO_WEEKS = [70.0, 70.2, 70.1, 69.9, 70.0, 70.4, 70.6, 70.3, 70.1, 70.0, 69.8, 69.9, 70.2, 70.5]


def test_empty_input_returns_seven_zeroed_days() -> None:
    stats = weekday_profile([], locale="en")

    assert [stat.day_name for stat in stats] == [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ]
    assert [stat.day_index for stat in stats] == [1, 2, 3, 4, 5, 6, 0]
    for stat in stats:
        assert (stat.count, stat.avg_weight, stat.min_weight, stat.max_weight, stat.avg_delta) == (
            0, 0.0, 0.0, 0.0, 0.0,
        )
        assert stat.range == (0.0, 0.0)


def test_tuesday_delta_is_against_the_preceding_monday() -> None:
    # 1 January 2024 is a Monday.
    records = daily_series(date(2024, 1, 1), TWO_WEEKS)

    tuesday = weekday_profile(records)[1]

    expected = ((TWO_WEEKS[1] - TWO_WEEKS[0]) + (TWO_WEEKS[8] - TWO_WEEKS[7])) / 2
    assert tuesday.day_name == "Dimarts"
    assert tuesday.avg_delta == pytest.approx(expected)
    assert tuesday.count == 2


def test_first_record_contributes_no_delta() -> None:
    records = daily_series(date(2024, 1, 1), TWO_WEEKS)

    monday = weekday_profile(records)[0]

    assert monday.count == 2
    # Only the second Monday has a predecessor (the first Sunday).
    assert monday.avg_delta == pytest.approx(TWO_WEEKS[7] - TWO_WEEKS[6])


def test_delta_spans_gaps_between_entries() -> None:
    records = [
        make_record_on(date(2024, 1, 1), 80.0),  # Monday
        make_record_on(date(2024, 1, 4), 79.4),  # Thursday
    ]

    thursday = weekday_profile(records)[3]

    assert thursday.avg_delta == pytest.approx(-0.6)


def test_input_order_does_not_matter() -> None:
    records = daily_series(date(2024, 1, 1), TWO_WEEKS)
    shuffled = records[7:] + records[:7]

    assert weekday_profile(shuffled) == weekday_profile(records)


def test_weight_distribution_per_day() -> None:
    records = daily_series(date(2024, 1, 1), TWO_WEEKS)

    saturday = weekday_profile(records)[5]

    assert saturday.avg_weight == pytest.approx((TWO_WEEKS[5] + TWO_WEEKS[12]) / 2)
    assert saturday.range == (TWO_WEEKS[12], TWO_WEEKS[5])
