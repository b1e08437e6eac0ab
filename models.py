"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suntimes import SunStatus


class SunQueryParams(BaseModel):
    """Validated query parameters for the ``/sun`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")
    date_utc: date = Field(..., alias="date", description="UTC calendar date (YYYY-MM-DD)")
    elev_m: float = Field(
        0.0, ge=0.0, allow_inf_nan=False, description="Observer elevation in meters"
    )
    offset_hours: Optional[float] = Field(
        None,
        description="Optional fixed offset in hours applied to derive local times",
    )

    @field_validator("offset_hours")
    def validate_offset_hours(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return value
        if not -24.0 <= value <= 24.0:
            raise ValueError("offset_hours must be within ±24 hours")
        return value


class AltitudeQueryParams(BaseModel):
    """Validated query parameters for the ``/altitude`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")
    time_utc: datetime = Field(
        ..., alias="time", description="Instant (ISO-8601); naive values are read as UTC"
    )

    @field_validator("time_utc")
    def normalize_time(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class ChartQueryParams(BaseModel):
    """Validated query parameters for the ``/chart`` endpoint."""

    year: int = Field(..., ge=1, le=9999, description="Calendar year")
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(0.0, ge=-180.0, le=180.0, description="Longitude in degrees")


class SunResponse(BaseModel):
    """Sunrise/sunset response payload."""

    ok: bool = True
    status: SunStatus = Field(..., description="Computation status")
    date_utc: date = Field(..., description="Requested UTC date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    elevation_m: float = Field(..., description="Elevation above mean sea level")
    sunrise_utc: Optional[str] = Field(None, description="Sunrise time in UTC (ISO-8601)")
    sunset_utc: Optional[str] = Field(None, description="Sunset time in UTC (ISO-8601)")
    solar_noon_utc: Optional[str] = Field(
        None, description="Solar transit time in UTC (ISO-8601)"
    )
    day_length_seconds: Optional[float] = Field(
        None, description="Seconds between sunrise and sunset"
    )
    offset_hours: Optional[float] = Field(None, description="User-specified offset in hours")
    sunrise_local: Optional[str] = Field(
        None, description="Sunrise expressed in local time when offset provided"
    )
    sunset_local: Optional[str] = Field(
        None, description="Sunset expressed in local time when offset provided"
    )


class AltitudeResponse(BaseModel):
    """Solar altitude response payload."""

    ok: bool = True
    time_utc: str = Field(..., description="Queried instant in UTC (ISO-8601)")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    altitude_deg: float = Field(..., description="Geometric solar altitude in degrees")
    above_horizon: bool = Field(..., description="Whether the altitude is at least 0°")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    version: str


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
