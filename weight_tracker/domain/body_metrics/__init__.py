"""Body metrics domain utilities."""

from .bmi import bmi_category, calculate_bmi, make_record
from .forecast import find_next_milestone, forecast_weight
from .moving_average import add_moving_average
from .periods import aggregate, period_key, with_period_changes
from .regression import LinearFit, linear_regression
from .summary import filter_time_range, summarize
from .weekday import weekday_profile

__all__ = [
    "LinearFit",
    "add_moving_average",
    "aggregate",
    "bmi_category",
    "calculate_bmi",
    "filter_time_range",
    "find_next_milestone",
    "forecast_weight",
    "linear_regression",
    "make_record",
    "period_key",
    "summarize",
    "weekday_profile",
    "with_period_changes",
]
