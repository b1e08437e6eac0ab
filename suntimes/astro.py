"""Sunrise, sunset and solar altitude computations."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Tuple

from .julian import JAN_2000, JulianDate
from .solar import days_since_2000, right_ascension, solar_geometry, solar_transit

__all__ = [
    "SunStatus",
    "SunTimes",
    "HORIZON_ALTITUDE",
    "compute_sun_times",
    "sun_times",
    "solar_noon",
    "day_length",
    "altitude",
    "sun_above_horizon",
]

LOGGER = logging.getLogger(__name__)

HORIZON_ALTITUDE = -0.833  # Refraction plus solar semidiameter, degrees.

# Greenwich mean sidereal time at J2000.0 and its daily rate, degrees.
GMST_AT_J2000 = 280.46061837
GMST_RATE = 360.98564736629


class SunStatus(str, Enum):
    """Outcome of a sunrise/sunset query."""

    ok = "ok"
    polar_day = "polar_day"
    polar_night = "polar_night"
    invalid_elevation = "invalid_elevation"
    conversion_failed = "conversion_failed"


@dataclass(frozen=True)
class SunTimes:
    """Result of :func:`compute_sun_times`.

    ``sunrise`` and ``sunset`` are only set when ``status`` is
    :attr:`SunStatus.ok`. ``solar_noon`` is set whenever the elevation is
    valid and the transit is a representable instant, including polar day
    and polar night.
    """

    status: SunStatus
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    solar_noon: Optional[datetime] = None
    hour_angle: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.status is SunStatus.ok

    def as_tuple(self) -> Optional[Tuple[datetime, datetime]]:
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunrise, self.sunset

    @property
    def day_length(self) -> timedelta:
        """Time between sunrise and sunset.

        Polar day counts as a full day and polar night as none. Raises
        ``ValueError`` for the statuses that carry no answer.
        """

        if self.status is SunStatus.polar_day:
            return timedelta(days=1)
        if self.status is SunStatus.polar_night:
            return timedelta(0)
        if self.sunrise is None or self.sunset is None:
            raise ValueError(f"Day length is undefined for status '{self.status.value}'")
        return self.sunset - self.sunrise


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value!r}")


def compute_sun_times(
    date_utc: date,
    lat: float,
    lon: float,
    elev_m: float = 0.0,
) -> SunTimes:
    """Compute sunrise and sunset for the given UTC date and location.

    Parameters
    ----------
    date_utc:
        Calendar date expressed in UTC.
    lat, lon:
        Geographic coordinates in degrees (east-positive longitude).
    elev_m:
        Observer elevation above mean sea level in meters. Negative or non-finite
        values yield :attr:`SunStatus.invalid_elevation`.

    Returns
    -------
    SunTimes
        Status plus the instants that could be computed, all in UTC.
    """

    _check_finite(lat=lat, lon=lon)

    if not math.isfinite(elev_m) or elev_m < 0:
        return _unavailable(SunStatus.invalid_elevation, date_utc, lat, lon, elev_m)

    julian_date = JulianDate.from_date(date_utc)
    geometry = solar_geometry(days_since_2000(julian_date), lon)
    transit = solar_transit(geometry)
    noon = transit.to_datetime()
    if noon is None:
        return _unavailable(SunStatus.conversion_failed, date_utc, lat, lon, elev_m)

    elevation_correction = -2.076 * math.sqrt(elev_m) / 60.0
    lat_rad = math.radians(lat)
    decl_rad = math.radians(geometry.declination)
    cos_hour_angle = (
        math.sin(math.radians(HORIZON_ALTITUDE + elevation_correction))
        - math.sin(lat_rad) * math.sin(decl_rad)
    ) / (math.cos(lat_rad) * math.cos(decl_rad))

    if cos_hour_angle < -1.0:
        return _unavailable(SunStatus.polar_day, date_utc, lat, lon, elev_m, noon)
    if cos_hour_angle > 1.0:
        return _unavailable(SunStatus.polar_night, date_utc, lat, lon, elev_m, noon)

    hour_angle = math.degrees(math.acos(cos_hour_angle))
    sunrise = JulianDate(transit.value - hour_angle / 360.0).to_datetime()
    sunset = JulianDate(transit.value + hour_angle / 360.0).to_datetime()
    if sunrise is None or sunset is None:
        return _unavailable(SunStatus.conversion_failed, date_utc, lat, lon, elev_m, noon)

    return SunTimes(
        status=SunStatus.ok,
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=noon,
        hour_angle=hour_angle,
    )


def _unavailable(
    status: SunStatus,
    date_utc: date,
    lat: float,
    lon: float,
    elev_m: float,
    noon: Optional[datetime] = None,
) -> SunTimes:
    LOGGER.debug(
        json.dumps(
            {
                "event": "sun_times_unavailable",
                "status": status.value,
                "date": date_utc.isoformat(),
                "lat": lat,
                "lon": lon,
                "elev_m": elev_m,
            }
        )
    )
    return SunTimes(status=status, solar_noon=noon)


def sun_times(
    date_utc: date,
    latitude: float,
    longitude: float,
    elevation: float = 0.0,
) -> Optional[Tuple[datetime, datetime]]:
    """Return ``(sunrise, sunset)`` in UTC, or ``None`` when either is undefined.

    ``None`` covers polar day, polar night and invalid elevations; use
    :func:`compute_sun_times` to tell them apart.
    """

    return compute_sun_times(date_utc, latitude, longitude, elevation).as_tuple()


def solar_noon(date_utc: date, longitude: float) -> Optional[datetime]:
    """UTC instant of the sun's transit over *longitude* on *date_utc*."""

    _check_finite(lon=longitude)
    geometry = solar_geometry(days_since_2000(JulianDate.from_date(date_utc)), longitude)
    return solar_transit(geometry).to_datetime()


def day_length(
    date_utc: date,
    latitude: float,
    longitude: float,
    elevation: float = 0.0,
) -> timedelta:
    return compute_sun_times(date_utc, latitude, longitude, elevation).day_length


def altitude(instant: datetime, latitude: float, longitude: float) -> float:
    """Geometric altitude of the sun's centre above the horizon, in degrees.

    No refraction or elevation correction is applied. The solar position is
    evaluated at *instant* itself and the hour angle is derived from the
    Greenwich mean sidereal time, so the result is accurate to a fraction of
    a degree rather than exact.
    """

    _check_finite(lat=latitude, lon=longitude)
    days = (JulianDate.from_datetime(instant) - JAN_2000).value
    geometry = solar_geometry(days, 0.0)
    local_sidereal_time = GMST_AT_J2000 + GMST_RATE * days + longitude
    hour_angle = math.radians(
        (local_sidereal_time - right_ascension(geometry.ecliptic_longitude)) % 360.0
    )

    lat_rad = math.radians(latitude)
    decl_rad = math.radians(geometry.declination)
    sin_altitude = math.sin(lat_rad) * math.sin(decl_rad) + (
        math.cos(lat_rad) * math.cos(decl_rad) * math.cos(hour_angle)
    )
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_altitude))))


def sun_above_horizon(instant: datetime, latitude: float, longitude: float) -> bool:
    return altitude(instant, latitude, longitude) >= 0.0
