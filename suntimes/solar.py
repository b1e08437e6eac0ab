"""Low-precision solar position model shared by the sun-times computations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .julian import JAN_2000, LEAP_SECONDS, JulianDate

__all__ = [
    "SolarGeometry",
    "days_since_2000",
    "solar_geometry",
    "right_ascension",
    "solar_transit",
    "ARGUMENT_OF_PERIHELION",
    "OBLIQUITY",
]

ARGUMENT_OF_PERIHELION = 102.9372  # Earth, degrees; no precession.
OBLIQUITY = 23.44  # Obliquity of the ecliptic, degrees.


@dataclass(frozen=True)
class SolarGeometry:
    """Intermediate solar quantities, all angles in degrees."""

    mean_solar_time: float
    solar_mean_anomaly: float
    equation_of_center: float
    ecliptic_longitude: float
    declination: float


def days_since_2000(julian_date: JulianDate) -> float:
    """Whole days since J2000.0, rounded up after the leap-second correction."""

    return (julian_date - JAN_2000 + LEAP_SECONDS).ceil_days()


def solar_geometry(days: float, longitude: float) -> SolarGeometry:
    """Compute the solar geometry *days* after J2000.0 seen from *longitude*.

    Parameters
    ----------
    days:
        Days since the J2000.0 epoch; whole days for the sunrise equation,
        fractional for instantaneous positions.
    longitude:
        Observer longitude in degrees, east-positive.
    """

    mean_solar_time = days - longitude / 360.0
    anomaly = (357.5291 + 0.98560028 * mean_solar_time) % 360.0
    anomaly_rad = math.radians(anomaly)
    center = (
        1.9148 * math.sin(anomaly_rad)
        + 0.0200 * math.sin(2.0 * anomaly_rad)
        + 0.0003 * math.sin(3.0 * anomaly_rad)
    )
    ecliptic_longitude = (anomaly + center + 180.0 + ARGUMENT_OF_PERIHELION) % 360.0
    declination = math.degrees(
        math.asin(math.sin(math.radians(ecliptic_longitude)) * math.sin(math.radians(OBLIQUITY)))
    )
    return SolarGeometry(
        mean_solar_time=mean_solar_time,
        solar_mean_anomaly=anomaly,
        equation_of_center=center,
        ecliptic_longitude=ecliptic_longitude,
        declination=declination,
    )


def right_ascension(ecliptic_longitude: float) -> float:
    lam = math.radians(ecliptic_longitude)
    return math.degrees(
        math.atan2(math.sin(lam) * math.cos(math.radians(OBLIQUITY)), math.cos(lam))
    )


def solar_transit(geometry: SolarGeometry) -> JulianDate:
    """Julian date of local solar noon for *geometry*."""

    return JulianDate(
        JAN_2000.value
        + geometry.mean_solar_time
        + 0.0053 * math.sin(math.radians(geometry.solar_mean_anomaly))
        - 0.0069 * math.sin(math.radians(2.0 * geometry.ecliptic_longitude))
    )
