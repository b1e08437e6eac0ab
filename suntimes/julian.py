"""Conversion between UTC instants and continuous Julian dates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Optional

__all__ = [
    "JulianDate",
    "UNIX_EPOCH",
    "JAN_2000",
    "LEAP_SECONDS",
    "SECONDS_PER_DAY",
    "ensure_utc",
]

SECONDS_PER_DAY = 24 * 60 * 60


def ensure_utc(dt: datetime) -> datetime:
    """Return *dt* normalized to UTC, rejecting naive datetimes."""

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return dt.astimezone(UTC)


@dataclass(frozen=True)
class JulianDate:
    """Fractional day count since the Julian epoch."""

    value: float

    @classmethod
    def from_datetime(cls, dt: datetime) -> "JulianDate":
        seconds = ensure_utc(dt).timestamp()
        return cls(seconds / SECONDS_PER_DAY + UNIX_EPOCH.value)

    @classmethod
    def from_date(cls, day: date) -> "JulianDate":
        """Julian date of *day* at 00:00 UTC."""

        return cls.from_datetime(datetime.combine(day, datetime.min.time(), tzinfo=UTC))

    def ceil_days(self) -> float:
        return float(math.ceil(self.value))

    def to_datetime(self) -> Optional[datetime]:
        """Return the UTC instant nearest to this date, rounded to the second.

        ``None`` is returned when the value does not map onto a representable
        UTC instant (non-finite input or outside the ``datetime`` range).
        """

        seconds = (self.value - UNIX_EPOCH.value) * SECONDS_PER_DAY
        if not math.isfinite(seconds):
            return None
        try:
            return datetime.fromtimestamp(round(seconds), tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    def __add__(self, other: "JulianDate") -> "JulianDate":
        if not isinstance(other, JulianDate):
            return NotImplemented
        return JulianDate(self.value + other.value)

    def __sub__(self, other: "JulianDate") -> "JulianDate":
        if not isinstance(other, JulianDate):
            return NotImplemented
        return JulianDate(self.value - other.value)

    def __float__(self) -> float:
        return self.value


UNIX_EPOCH = JulianDate(2440587.5)
JAN_2000 = JulianDate(2451545.0)
# Fixed correction for accumulated leap seconds and terrestrial time.
LEAP_SECONDS = JulianDate(0.0008)
