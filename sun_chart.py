"""Print a yearly chart of the hours during which the sun is up.

Usage:
    python sun_chart.py --lat 80 [--lon 0] [--year 2022]
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from suntimes.chart import render_grid, sun_up_grid

LOGGER = logging.getLogger("sun-chart")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sun-up/sun-down chart for one year (UTC hours)")
    parser.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    parser.add_argument("--lon", type=float, default=0.0, help="Longitude in degrees, east-positive")
    parser.add_argument("--year", type=int, default=2022, help="Calendar year")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not -90.0 <= args.lat <= 90.0:
        parser.error("--lat must be within [-90, 90]")
    if not -180.0 <= args.lon <= 180.0:
        parser.error("--lon must be within [-180, 180]")
    if not 1 <= args.year <= 9999:
        parser.error("--year must be within 1..9999")

    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    grid = sun_up_grid(args.year, args.lat, args.lon)
    LOGGER.info(
        json.dumps(
            {
                "event": "chart",
                "year": args.year,
                "lat": args.lat,
                "lon": args.lon,
                "sun_up_hours": int(grid.sum()),
            }
        )
    )
    print(render_grid(grid, args.year))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
