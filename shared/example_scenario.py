"""Single source of truth for the canonical 14-sensor example scenario.

Used by both:
- scripts/locate_beacon.py (``--example`` mode)
- tests (expected answers for the reference scenario)

When changing the report, update the expected answers alongside it.
"""

from __future__ import annotations

EXAMPLE_REPORT: str = """\
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""

EXAMPLE_SENSOR_COUNT: int = 14

# Row query
EXAMPLE_ROW: int = 10
EXAMPLE_ROW_FREE_CELLS: int = 26

# Region query over the square [EXAMPLE_SEARCH_MIN, EXAMPLE_SEARCH_MAX]^2
EXAMPLE_SEARCH_MIN: int = 0
EXAMPLE_SEARCH_MAX: int = 20
EXAMPLE_GAP: tuple[int, int] = (14, 11)
EXAMPLE_TUNING_FREQUENCY: int = 56_000_011
