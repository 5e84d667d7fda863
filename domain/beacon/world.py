"""Beacon Bounded Context - World.

Owns the sensor list and a per-row beacon index and answers the two public
queries by composing the row coverage and quadrant search services:

- how many cells of a row cannot contain a beacon;
- which single cell of a bounded square no sensor covers.

The World is built once and read-only afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.beacon.coverage import row_coverage, total_length
from domain.beacon.errors import NoGapFoundError
from domain.beacon.search import search_uncovered_point
from domain.beacon.value_objects import CoverageInterval, Point, Quadrant, Sensor

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TUNING_MULTIPLIER = 4_000_000  # x scale of the tuning frequency encoding


def tuning_frequency(point: Point, multiplier: int = TUNING_MULTIPLIER) -> int:
    """Encode a located cell as a single integer: x * multiplier + y."""
    return point.x * multiplier + point.y


class World:
    """Sensor set with a per-row beacon index.

    Use :meth:`build` to construct. The search universe is never derived from
    the sensors; callers pass the region to search explicitly.
    """

    def __init__(
        self, sensors: tuple[Sensor, ...], beacons_by_row: Mapping[int, tuple[int, ...]]
    ) -> None:
        self._sensors = sensors
        self._beacons_by_row = MappingProxyType(dict(beacons_by_row))

    @classmethod
    def build(cls, sensors: Iterable[Sensor]) -> "World":
        """Index each sensor's beacon by row.

        Several sensors may report the same beacon; each beacon cell is
        indexed once.
        """
        sensor_tuple = tuple(sensors)

        rows: dict[int, set[int]] = {}
        for sensor in sensor_tuple:
            rows.setdefault(sensor.beacon.y, set()).add(sensor.beacon.x)
            if sensor.radius == 0:
                logger.warning(
                    "Sensor at (%d, %d) sits on its own beacon",
                    sensor.position.x,
                    sensor.position.y,
                )

        beacons_by_row = {row: tuple(sorted(xs)) for row, xs in rows.items()}
        logger.debug(
            "World built: %d sensors, %d distinct beacons",
            len(sensor_tuple),
            sum(len(xs) for xs in beacons_by_row.values()),
        )
        return cls(sensor_tuple, beacons_by_row)

    # -----------------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------------
    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return self._sensors

    def beacons_on_row(self, row: int) -> tuple[int, ...]:
        """Sorted x-coordinates of the known beacons on ``row``."""
        return self._beacons_by_row.get(row, ())

    def is_sensor(self, point: Point) -> bool:
        return any(sensor.position == point for sensor in self._sensors)

    def is_beacon(self, point: Point) -> bool:
        return point.x in self.beacons_on_row(point.y)

    def is_ruled_out(self, point: Point) -> bool:
        """True if some sensor covers ``point`` and it is not a known beacon."""
        return not self.is_beacon(point) and any(
            sensor.covers_point(point) for sensor in self._sensors
        )

    def extent(self) -> Quadrant | None:
        """Bounding box of every sensor and beacon position (None when empty)."""
        points = [s.position for s in self._sensors] + [s.beacon for s in self._sensors]
        if not points:
            return None
        return Quadrant(
            min=Point(x=min(p.x for p in points), y=min(p.y for p in points)),
            max=Point(x=max(p.x for p in points), y=max(p.y for p in points)),
        )

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------
    def row_coverage(self, row: int) -> tuple[CoverageInterval, ...]:
        """Disjoint ascending intervals of beacon-free cells on ``row``."""
        return row_coverage(self._sensors, row, self.beacons_on_row(row))

    def query_row(self, row: int) -> int:
        """Number of cells on ``row`` where a beacon cannot be."""
        count = total_length(self.row_coverage(row))
        logger.debug("Row %d: %d beacon-free cells", row, count)
        return count

    def query_uncovered_region(self, lower: Point, upper: Point) -> Point:
        """Locate the cell of [lower, upper] that no sensor covers.

        Raises:
            NoGapFoundError: If the region has no uncovered cell (including an
                empty region with lower > upper on some axis)
        """
        result = search_uncovered_point(self._sensors, lower, upper)
        if result.point is None:
            raise NoGapFoundError(lower, upper)
        return result.point

    def query_uncovered_point(self, lo: int, hi: int) -> Point:
        """Locate the uncovered cell of the square [lo, hi] x [lo, hi].

        Raises:
            NoGapFoundError: If the square has no uncovered cell
        """
        return self.query_uncovered_region(Point(x=lo, y=lo), Point(x=hi, y=hi))

    def locate_tuning_frequency(self, lo: int, hi: int) -> int:
        """Tuning frequency of the uncovered cell of the square [lo, hi]^2."""
        return tuning_frequency(self.query_uncovered_point(lo, hi))
