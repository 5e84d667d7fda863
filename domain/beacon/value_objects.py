"""Beacon Bounded Context - Value Objects.

Immutable data structures for the sensor grid.
All validation occurs at construction time via Pydantic.

Coordinates are signed integers on an unbounded grid; x grows to the right
and y grows downwards (row numbers), matching the sensor reports.
"""

from __future__ import annotations

import functools

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------
@functools.total_ordering
class Point(BaseModel):
    """Integer grid coordinate (Value Object).

    Ordered lexicographically by (x, y). Pydantic frozen models compare and
    hash by value, so points can be used as dict keys and set members.
    """

    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def distance_to(self, other: "Point") -> int:
        """Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)


# ---------------------------------------------------------------------------
# Sensor
# ---------------------------------------------------------------------------
class Sensor(BaseModel):
    """A sensor and the single beacon nearest to it (Value Object).

    The sensor rules out every cell within its radius (the coverage diamond)
    as a location for any other beacon.

    Invariants:
        radius == position.distance_to(beacon), fixed at construction.

    ``radius`` is derived; passing it explicitly is allowed only when it
    agrees with the geometry.
    """

    position: Point
    beacon: Point
    radius: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def derive_radius(self) -> "Sensor":
        distance = self.position.distance_to(self.beacon)
        if "radius" in self.model_fields_set and self.radius != distance:
            raise ValueError(
                f"radius={self.radius} disagrees with beacon distance {distance}"
            )
        # Frozen model: set the derived field once, bypassing the freeze
        object.__setattr__(self, "radius", distance)
        return self

    def distance_to(self, point: Point) -> int:
        """Manhattan distance from the sensor to ``point``."""
        return abs(self.position.x - point.x) + abs(self.position.y - point.y)

    def reaches_row(self, row: int) -> bool:
        """True if the coverage diamond intersects ``row``."""
        return abs(self.position.y - row) <= self.radius

    def covers_point(self, point: Point) -> bool:
        """True if ``point`` lies inside the coverage diamond."""
        return self.distance_to(point) <= self.radius

    def half_width_at(self, row: int) -> int:
        """Horizontal reach of the diamond on ``row`` (negative when out of reach)."""
        return self.radius - abs(self.position.y - row)

    def row_span(self, row: int) -> CoverageInterval | None:
        """Closed x-interval covered on ``row``, or None if the row is out of reach."""
        half_width = self.half_width_at(row)
        if half_width < 0:
            return None
        return CoverageInterval(
            lo=self.position.x - half_width, hi=self.position.x + half_width
        )

    def fully_covers_region(self, lower: Point, upper: Point) -> bool:
        """True if every cell of the box [lower, upper] lies inside the diamond.

        The Manhattan distance from a fixed point is convex, so over an
        axis-aligned box it peaks at one of the four corners; checking the
        corners is enough.
        """
        farthest = max_corner_distance(self.position.x, self.position.y, lower, upper)
        return farthest <= self.radius


def max_corner_distance(x: int, y: int, lower: Point, upper: Point) -> int:
    """Largest Manhattan distance from (x, y) to a corner of the box [lower, upper]."""
    return max(abs(x - lower.x), abs(x - upper.x)) + max(
        abs(y - lower.y), abs(y - upper.y)
    )


# ---------------------------------------------------------------------------
# CoverageInterval
# ---------------------------------------------------------------------------
class CoverageInterval(BaseModel):
    """Closed integer range [lo, hi] on a single row (Value Object).

    Invariants:
        lo <= hi
    """

    lo: int
    hi: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "CoverageInterval":
        if self.lo > self.hi:
            raise ValueError(f"Invalid interval: lo={self.lo} > hi={self.hi}")
        return self

    @property
    def length(self) -> int:
        """Number of cells in the interval."""
        return self.hi - self.lo + 1

    def contains(self, x: int) -> bool:
        return self.lo <= x <= self.hi


# ---------------------------------------------------------------------------
# Quadrant
# ---------------------------------------------------------------------------
class Quadrant(BaseModel):
    """Axis-aligned rectangle with inclusive corners (Value Object).

    Invariants:
        min.x <= max.x and min.y <= max.y
    """

    min: Point
    max: Point

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_corners(self) -> "Quadrant":
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(
                f"Empty quadrant: min=({self.min.x}, {self.min.y}) "
                f"max=({self.max.x}, {self.max.y})"
            )
        return self

    @property
    def width(self) -> int:
        return self.max.x - self.min.x + 1

    @property
    def height(self) -> int:
        return self.max.y - self.min.y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_cell(self) -> bool:
        """True for a single-cell quadrant (min == max)."""
        return self.min == self.max

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """The four corners, clockwise from ``min``."""
        return (
            self.min,
            Point(x=self.max.x, y=self.min.y),
            self.max,
            Point(x=self.min.x, y=self.max.y),
        )

    def contains(self, point: Point) -> bool:
        return (
            self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y
        )
