"""Approximate sunrise, sunset and solar altitude calculations."""

from .astro import (
    SunStatus,
    SunTimes,
    altitude,
    compute_sun_times,
    day_length,
    solar_noon,
    sun_above_horizon,
    sun_times,
)
from .julian import JulianDate

__version__ = "1.0.0"

__all__ = [
    "JulianDate",
    "SunStatus",
    "SunTimes",
    "altitude",
    "compute_sun_times",
    "day_length",
    "solar_noon",
    "sun_above_horizon",
    "sun_times",
]
