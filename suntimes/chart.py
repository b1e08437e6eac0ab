"""Yearly sun-up/sun-down chart built from :func:`suntimes.astro.altitude`."""

from __future__ import annotations

import calendar
from datetime import UTC, datetime, timedelta
from typing import List

import numpy as np

from .astro import altitude

__all__ = ["sun_up_grid", "render_grid", "HOURS_PER_DAY"]

HOURS_PER_DAY = 24
SUN_UP = "#"
SUN_DOWN = "."


def sun_up_grid(year: int, latitude: float, longitude: float = 0.0) -> np.ndarray:
    """Sample the sun's altitude on every hour of *year*.

    Returns a boolean array of shape ``(days_in_year, 24)`` whose cell
    ``[day, hour]`` is true when the sun is at or above the horizon at that
    UTC hour.
    """

    if not 1 <= year <= 9999:
        raise ValueError(f"year must be within 1..9999, got {year}")

    days = 366 if calendar.isleap(year) else 365
    start = datetime(year, 1, 1, tzinfo=UTC)
    grid = np.zeros((days, HOURS_PER_DAY), dtype=bool)
    for day in range(days):
        for hour in range(HOURS_PER_DAY):
            instant = start + timedelta(days=day, hours=hour)
            grid[day, hour] = altitude(instant, latitude, longitude) >= 0.0
    return grid


def render_grid(grid: np.ndarray, year: int, step: int = 2) -> str:
    """Render *grid* as text, one column per *step* days and one row per hour."""

    if grid.ndim != 2 or grid.shape[1] != HOURS_PER_DAY:
        raise ValueError(f"grid must have shape (days, {HOURS_PER_DAY}), got {grid.shape}")

    start = datetime(year, 1, 1, tzinfo=UTC)
    columns = range(0, grid.shape[0], step)
    header = "".join(
        calendar.month_name[(start + timedelta(days=day)).month][0] for day in columns
    )
    lines: List[str] = ["   " + header]
    for hour in range(HOURS_PER_DAY):
        row = "".join(SUN_UP if grid[day, hour] else SUN_DOWN for day in columns)
        lines.append(f"{hour:02d} {row}")
    return "\n".join(lines)
