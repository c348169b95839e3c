from __future__ import annotations

import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .insights.application import InsightUnavailableError
from .routes.forecast import router as forecast_router
from .routes.weights import router as weights_router
from .sheets.application import SheetFetchError

logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title="Weight Tracker",
    version="1.0.0",
    description="Weight statistics, trends and forecasts from a published sheet",
)


def _upstream_host(exc: httpx.RequestError) -> Optional[str]:
    try:
        return exc.request.url.host
    except RuntimeError:
        return None


@app.exception_handler(httpx.ConnectError)
@app.exception_handler(httpx.TimeoutException)
async def upstream_connection_failed(request: Request, exc: httpx.RequestError) -> JSONResponse:
    logger.exception("Upstream connection failed while serving %s", request.url.path)
    return JSONResponse(
        status_code=503,
        content={
            "error": "UPSTREAM_CONNECTION_FAILED",
            "message": (
                "Could not connect to an upstream dependency service. "
                "Please try again shortly."
            ),
            "upstream_host": _upstream_host(exc),
        },
    )


@app.exception_handler(SheetFetchError)
async def sheet_unavailable(request: Request, exc: SheetFetchError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"error": "SHEET_UNAVAILABLE", "message": str(exc)},
    )


@app.exception_handler(InsightUnavailableError)
async def insight_unavailable(request: Request, exc: InsightUnavailableError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"error": "INSIGHT_UNAVAILABLE", "message": str(exc)},
    )


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


for router in (weights_router, forecast_router):
    app.include_router(router, prefix="/v2")
