from fastapi import Query

window_query = Query(
    default=None,
    ge=1,
    description="Trailing window size in entries; defaults to the configured window.",
)

lookback_query = Query(
    default=None,
    ge=1,
    description="Days of history used to fit the trend line.",
)

horizon_query = Query(
    default=None,
    ge=1,
    description="Number of future days to forecast.",
)
