#!/usr/bin/env python3
"""Locate the distress beacon from a sensor report.

Answers both questions for a report:
- how many cells of one row cannot contain a beacon;
- the tuning frequency of the single cell of the search square that no
  sensor covers.

Usage:
    python scripts/locate_beacon.py REPORT [--row N] [--min N] [--max N]
    python scripts/locate_beacon.py --example --render

Requirements:
    pip install -e .

Exit codes:
    0 on success, 1 on an unreadable/malformed report or when the search
    square holds no uncovered cell
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence

from domain.beacon.errors import BeaconError
from domain.beacon.world import World, tuning_frequency
from infrastructure.beacon.grid_renderer import render_grid
from infrastructure.beacon.report_adapter import TextReportAdapter, parse_report
from shared.example_scenario import (
    EXAMPLE_REPORT,
    EXAMPLE_ROW,
    EXAMPLE_SEARCH_MAX,
    EXAMPLE_SEARCH_MIN,
)

logger = logging.getLogger("locate_beacon")

# Defaults for the full-size puzzle input
DEFAULT_ROW = 2_000_000
DEFAULT_SEARCH_MIN = 0
DEFAULT_SEARCH_MAX = 4_000_000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count beacon-free cells on a row and locate the distress beacon"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("report", nargs="?", help="Path to the sensor report file")
    source.add_argument(
        "--example",
        action="store_true",
        help="Use the built-in 14-sensor example (row 10, square [0, 20])",
    )
    parser.add_argument(
        "--row",
        type=int,
        help=f"Row to count beacon-free cells on (default: {DEFAULT_ROW})",
    )
    parser.add_argument(
        "--min",
        dest="search_min",
        type=int,
        help=f"Lower bound of the search square (default: {DEFAULT_SEARCH_MIN})",
    )
    parser.add_argument(
        "--max",
        dest="search_max",
        type=int,
        help=f"Upper bound of the search square (default: {DEFAULT_SEARCH_MAX})",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the grid around all sensors and beacons (small inputs only)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run both queries for a report.

    Returns:
        0 on success, 1 on failure
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.example:
        defaults = (EXAMPLE_ROW, EXAMPLE_SEARCH_MIN, EXAMPLE_SEARCH_MAX)
    else:
        defaults = (DEFAULT_ROW, DEFAULT_SEARCH_MIN, DEFAULT_SEARCH_MAX)
    row = args.row if args.row is not None else defaults[0]
    search_min = args.search_min if args.search_min is not None else defaults[1]
    search_max = args.search_max if args.search_max is not None else defaults[2]

    try:
        if args.example:
            sensors = parse_report(EXAMPLE_REPORT)
        else:
            sensors = TextReportAdapter().load_sensors(args.report)
        world = World.build(sensors)

        if args.render:
            print(render_grid(world))
            print()

        started = time.perf_counter()
        free_cells = world.query_row(row)
        logger.info("Row query took %.1f ms", (time.perf_counter() - started) * 1000)
        print(f"Beacon-free cells on row {row}: {free_cells}")

        started = time.perf_counter()
        point = world.query_uncovered_point(search_min, search_max)
        logger.info("Region search took %.1f ms", (time.perf_counter() - started) * 1000)
        print(f"Distress beacon at ({point.x}, {point.y})")
        print(f"Tuning frequency: {tuning_frequency(point)}")
    except (BeaconError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
