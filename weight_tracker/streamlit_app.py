"""Streamlit dashboard rendering the weight analytics from the published sheet."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import List

import streamlit as st

from weight_tracker.domain.body_metrics import (
    add_moving_average,
    aggregate,
    filter_time_range,
    forecast_weight,
    summarize,
    weekday_profile,
    with_period_changes,
)
from weight_tracker.models import Granularity, TimeRange, WeightRecord, WeightRecordsResponse
from weight_tracker.platform.clients import get_redis
from weight_tracker.settings import Settings, get_settings
from weight_tracker.sheets import create_sheet_adapter, fetch_weight_records


@st.cache_data(ttl=300, show_spinner="Loading weight sheet…")
def _load_records() -> WeightRecordsResponse:
    settings = get_settings()
    port = create_sheet_adapter(settings=settings, redis=get_redis(settings))
    return asyncio.run(
        fetch_weight_records(
            port, settings.body_profile, demo_fallback=settings.demo_fallback
        )
    )


def _render_summary(records: List[WeightRecord], settings: Settings) -> None:
    summary = summarize(records, today=date.today(), recent_days=settings.recent_days)
    if summary is None:
        st.info("No weight records yet.")
        return

    current, recent, bmi, extremes = st.columns(4)
    current.metric("Current weight", f"{summary.current:.2f} kg", f"{summary.total_change:+.2f} kg")
    recent.metric(f"Average ({settings.recent_days} days)", f"{summary.recent_average:.2f} kg")
    bmi.metric("BMI", f"{summary.current_bmi:.2f}", summary.bmi_category.value, delta_color="off")
    extremes.metric("Min / max", f"{summary.minimum:.2f} / {summary.maximum:.2f} kg")


def _render_history(records: List[WeightRecord], settings: Settings) -> None:
    st.subheader("History")
    time_range = st.radio(
        "Range", [option.value for option in TimeRange], index=3, horizontal=True
    )
    selected = filter_time_range(records, time_range)
    smoothed = add_moving_average(selected, settings.moving_average_window)
    st.line_chart(
        {
            "weight": {point.record.date: point.record.weight for point in smoothed},
            "moving average": {point.record.date: point.moving_average for point in smoothed},
        }
    )


def _render_periods(records: List[WeightRecord], settings: Settings) -> None:
    st.subheader("Period statistics")
    tabs = st.tabs([granularity.value.title() for granularity in Granularity])
    for tab, granularity in zip(tabs, Granularity):
        changes = with_period_changes(aggregate(records, granularity, settings.locale))
        tab.dataframe(
            [
                {
                    "period": change.group.label,
                    "entries": change.group.count,
                    "average": round(change.group.avg, 2),
                    "min": change.group.min,
                    "max": change.group.max,
                    "range": round(change.group.range, 2),
                    "change": round(change.diff, 2),
                }
                for change in changes
            ],
            use_container_width=True,
        )


def _render_distribution(records: List[WeightRecord], settings: Settings) -> None:
    st.subheader("Distribution")
    choice = st.radio(
        "Bucket", [Granularity.WEEK.value, Granularity.MONTH.value], horizontal=True
    )
    # Oldest bucket first so the band reads left to right.
    groups = list(reversed(aggregate(records, Granularity(choice), settings.locale)))
    st.line_chart(
        {
            "min": {group.first_date: group.min for group in groups},
            "average": {group.first_date: group.avg for group in groups},
            "max": {group.first_date: group.max for group in groups},
        }
    )


def _render_bmi(records: List[WeightRecord]) -> None:
    st.subheader("BMI history")
    recent = records[-90:]
    if not recent:
        return
    st.line_chart({"BMI": {record.date: record.bmi for record in recent}})


def _render_weekdays(records: List[WeightRecord], settings: Settings) -> None:
    st.subheader("Weekday pattern")
    stats = weekday_profile(records, settings.locale)
    st.bar_chart({stat.day_name: stat.avg_delta for stat in stats})
    st.dataframe([stat.model_dump() for stat in stats], use_container_width=True)


def _render_forecast(records: List[WeightRecord], settings: Settings) -> None:
    st.subheader("Forecast")
    prediction = forecast_weight(records, settings.lookback_days, settings.forecast_days)
    if prediction is None:
        st.info("Not enough data yet for a forecast.")
        return

    st.line_chart(
        {
            "observed": {p.date: p.observed_weight for p in prediction.points if p.observed_weight is not None},
            "trend": {p.date: p.trend_value for p in prediction.points},
            "lower": {p.date: p.lower_bound for p in prediction.points},
            "upper": {p.date: p.upper_bound for p in prediction.points},
        }
    )
    st.write(
        f"Trend: {prediction.daily_slope * 7:+.2f} kg/week · "
        f"in {settings.forecast_days} days: {prediction.weight_30_day_forecast:.2f} kg · "
        f"R²: {prediction.fit_quality:.2f}"
    )
    if prediction.next_milestone is not None:
        milestone = prediction.next_milestone
        st.success(f"Next milestone: {milestone.weight} kg around {milestone.date:%d/%m/%Y}")


def main() -> None:
    """Render the dashboard in a Streamlit page."""

    st.set_page_config(page_title="Weight Tracker", layout="wide")
    st.title("Weight Tracker")

    settings = get_settings()
    response = _load_records()
    if response.is_demo:
        st.warning("Could not reach the weight sheet. Showing demo data.")

    records = response.records
    _render_summary(records, settings)
    _render_history(records, settings)
    _render_forecast(records, settings)
    _render_periods(records, settings)
    _render_distribution(records, settings)
    _render_bmi(records)
    _render_weekdays(records, settings)


if __name__ == "__main__":
    main()
