"""FastAPI application exposing sunrise, sunset and solar altitude computations."""

from __future__ import annotations

import json
import logging
import os
import time
from datetime import UTC, datetime, timedelta, timezone
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from models import (
    AltitudeQueryParams,
    AltitudeResponse,
    ChartQueryParams,
    ErrorResponse,
    HealthResponse,
    SunQueryParams,
    SunResponse,
)
from suntimes import SunStatus, __version__, altitude, compute_sun_times
from suntimes.chart import render_grid, sun_up_grid

logging.basicConfig(
    level=os.environ.get("SUNTIMES_LOG_LEVEL", "INFO").upper(), format="%(message)s"
)
LOGGER = logging.getLogger("suntimes-api")

APP_DESCRIPTION = "Approximate sunrise, sunset and solar altitude calculations"

_DAY_LENGTH_STATUSES = frozenset({SunStatus.ok, SunStatus.polar_day, SunStatus.polar_night})


def _cors_origins() -> List[str]:
    raw = os.environ.get("SUNTIMES_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Sun Times API",
    description=APP_DESCRIPTION,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _isoformat(dt: Optional[datetime], offset_hours: Optional[float] = None) -> Optional[str]:
    """ISO-8601 text for *dt*: UTC with a ``Z`` suffix, or at a fixed offset."""

    if dt is None:
        return None
    if offset_hours is None:
        return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")
    return dt.astimezone(timezone(timedelta(hours=offset_hours))).isoformat()


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    LOGGER.error(
        json.dumps(
            {"event": "error", "status_code": status_code, "code": code, "message": message}
        )
    )
    payload = ErrorResponse(code=code, error=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def _log_request(event: str, start_time: float, **fields: object) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)}))


def _describe_error(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"][1:])
    return f"{location}: {error['msg']}" if location else error["msg"]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = "; ".join(_describe_error(error) for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else json.dumps(exc.detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception(json.dumps({"event": "unhandled", "path": request.url.path}), exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__)


@app.get(
    "/sun",
    response_model=SunResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def sun_endpoint(params: Annotated[SunQueryParams, Query()]) -> SunResponse:
    start_time = time.perf_counter()
    try:
        result = compute_sun_times(
            date_utc=params.date_utc,
            lat=params.lat,
            lon=params.lon,
            elev_m=params.elev_m,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    day_length_seconds = None
    if result.status in _DAY_LENGTH_STATUSES:
        day_length_seconds = result.day_length.total_seconds()
    offset = params.offset_hours

    response = SunResponse(
        status=result.status,
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        elevation_m=params.elev_m,
        sunrise_utc=_isoformat(result.sunrise),
        sunset_utc=_isoformat(result.sunset),
        solar_noon_utc=_isoformat(result.solar_noon),
        day_length_seconds=day_length_seconds,
        offset_hours=offset,
        sunrise_local=_isoformat(result.sunrise, offset) if offset is not None else None,
        sunset_local=_isoformat(result.sunset, offset) if offset is not None else None,
    )

    _log_request(
        "sun",
        start_time,
        lat=params.lat,
        lon=params.lon,
        date=params.date_utc.isoformat(),
        status=result.status.value,
    )
    return response


@app.get(
    "/altitude",
    response_model=AltitudeResponse,
    responses={422: {"model": ErrorResponse}},
)
def altitude_endpoint(params: Annotated[AltitudeQueryParams, Query()]) -> AltitudeResponse:
    start_time = time.perf_counter()
    value = altitude(params.time_utc, params.lat, params.lon)
    response = AltitudeResponse(
        time_utc=_isoformat(params.time_utc),
        latitude=params.lat,
        longitude=params.lon,
        altitude_deg=value,
        above_horizon=value >= 0.0,
    )
    _log_request(
        "altitude",
        start_time,
        lat=params.lat,
        lon=params.lon,
        time=response.time_utc,
        altitude_deg=round(value, 4),
    )
    return response


@app.get(
    "/chart",
    response_class=PlainTextResponse,
    responses={422: {"model": ErrorResponse}},
)
def chart_endpoint(params: Annotated[ChartQueryParams, Query()]) -> str:
    start_time = time.perf_counter()
    grid = sun_up_grid(params.year, params.lat, params.lon)
    _log_request(
        "chart",
        start_time,
        year=params.year,
        lat=params.lat,
        lon=params.lon,
        sun_up_hours=int(grid.sum()),
    )
    return render_grid(grid, params.year)
