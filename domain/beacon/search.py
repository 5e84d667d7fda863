"""Beacon Bounded Context - Quadrant Search.

Locates the cell of a bounded region that no sensor covers, by repeatedly
splitting the region into quadrants and discarding every quadrant that a
single sensor covers completely.

The work list is an explicit stack of immutable Quadrants, so the search
depth is bounded by the work list rather than the call stack. Traversal
order only affects performance: a surviving quadrant may still be covered
by the union of several sensors, and only the single-cell test decides
whether a gap exists.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from domain.beacon.value_objects import Point, Quadrant, Sensor

logger = logging.getLogger(__name__)


class SearchStats(BaseModel):
    """Counters collected during one search (Value Object)."""

    visited: int = Field(default=0, ge=0)  # Quadrants popped from the work list
    pruned: int = Field(default=0, ge=0)  # Sub-quadrants dropped as fully covered
    peak_depth: int = Field(default=0, ge=0)  # Largest work list size seen

    model_config = ConfigDict(frozen=True)


class SearchResult(BaseModel):
    """Outcome of a quadrant search (Value Object).

    ``point`` is None when the work list was exhausted without a gap.
    """

    point: Point | None
    stats: SearchStats

    model_config = ConfigDict(frozen=True)

    @property
    def found(self) -> bool:
        return self.point is not None


def split_quadrant(quadrant: Quadrant) -> list[Quadrant]:
    """Split a quadrant at the floor midpoint of each axis.

    Returns up to four non-empty sub-quadrants whose sides differ by at most
    one cell. An axis of length one is not split, so fewer than four
    quadrants come back for thin regions; a single cell returns itself.
    """
    lo, hi = quadrant.min, quadrant.max
    # Floor division keeps lo <= mid < hi for negative coordinates too
    mid_x = (lo.x + hi.x) // 2
    mid_y = (lo.y + hi.y) // 2

    x_ranges = [(lo.x, mid_x), (mid_x + 1, hi.x)]
    y_ranges = [(lo.y, mid_y), (mid_y + 1, hi.y)]

    parts: list[Quadrant] = []
    for y0, y1 in y_ranges:
        for x0, x1 in x_ranges:
            if x0 > x1 or y0 > y1:
                continue
            parts.append(Quadrant(min=Point(x=x0, y=y0), max=Point(x=x1, y=y1)))
    return parts


def _covered_by_single_sensor(sensors: Sequence[Sensor], quadrant: Quadrant) -> bool:
    return any(
        sensor.fully_covers_region(quadrant.min, quadrant.max) for sensor in sensors
    )


def search_uncovered_point(
    sensors: Sequence[Sensor], lower: Point, upper: Point
) -> SearchResult:
    """Search the box [lower, upper] for a cell outside every sensor's coverage.

    Stops at the first uncovered cell found. A box with lower > upper on either
    axis is empty and yields a not-found result without any search.

    Args:
        sensors: Sensors whose coverage rules cells out
        lower: Lower corner of the region (inclusive)
        upper: Upper corner of the region (inclusive)

    Returns:
        SearchResult with the uncovered point (or None) and search counters
    """
    visited = 0
    pruned = 0
    peak_depth = 0

    if lower.x > upper.x or lower.y > upper.y:
        logger.debug("Empty search region, skipping")
        return SearchResult(point=None, stats=SearchStats())

    work: list[Quadrant] = [Quadrant(min=lower, max=upper)]
    found: Point | None = None

    while work:
        peak_depth = max(peak_depth, len(work))
        quadrant = work.pop()
        visited += 1

        if quadrant.is_cell:
            if not any(sensor.covers_point(quadrant.min) for sensor in sensors):
                found = quadrant.min
                break
            continue

        for part in split_quadrant(quadrant):
            if _covered_by_single_sensor(sensors, part):
                pruned += 1
            else:
                work.append(part)

    stats = SearchStats(visited=visited, pruned=pruned, peak_depth=peak_depth)
    if found is not None:
        logger.debug(
            "Uncovered cell (%d, %d) found after %d quadrants (%d pruned)",
            found.x,
            found.y,
            visited,
            pruned,
        )
    else:
        logger.debug(
            "Search exhausted after %d quadrants (%d pruned), no uncovered cell",
            visited,
            pruned,
        )
    return SearchResult(point=found, stats=stats)


def find_uncovered_point(
    sensors: Sequence[Sensor], lower: Point, upper: Point
) -> Point | None:
    """Return the uncovered cell of [lower, upper], or None if there is none."""
    return search_uncovered_point(sensors, lower, upper).point
