"""Beacon Bounded Context - Row Coverage.

Computes which x-positions of a single row are ruled out by a set of sensors,
as a minimal sorted sequence of disjoint closed intervals. Works on interval
endpoints only, so the cost depends on the number of sensors and never on
the width of the row.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Sequence

from domain.beacon.value_objects import CoverageInterval, Sensor

logger = logging.getLogger(__name__)


def merge_intervals(
    intervals: Iterable[CoverageInterval],
) -> tuple[CoverageInterval, ...]:
    """Merge overlapping or adjacent intervals.

    Intervals touching end-to-end (next.lo == current.hi + 1) are merged,
    so the result has the minimal number of intervals. Idempotent.

    Args:
        intervals: Intervals in any order

    Returns:
        Disjoint intervals sorted by lower bound
    """
    merged: list[CoverageInterval] = []
    lo: int | None = None
    hi = 0

    for interval in sorted(intervals, key=lambda i: i.lo):
        if lo is None:
            lo, hi = interval.lo, interval.hi
        elif interval.lo <= hi + 1:
            hi = max(hi, interval.hi)
        else:
            merged.append(CoverageInterval(lo=lo, hi=hi))
            lo, hi = interval.lo, interval.hi

    if lo is not None:
        merged.append(CoverageInterval(lo=lo, hi=hi))

    return tuple(merged)


def subtract_points(
    intervals: Sequence[CoverageInterval], xs: Sequence[int]
) -> tuple[CoverageInterval, ...]:
    """Remove single cells from sorted disjoint intervals.

    Each x that falls inside an interval splits it around that cell; an x
    outside every interval is ignored.

    Args:
        intervals: Disjoint intervals sorted ascending
        xs: Cells to remove, sorted ascending

    Returns:
        Disjoint intervals sorted ascending, none containing any of ``xs``
    """
    if not xs:
        return tuple(intervals)

    result: list[CoverageInterval] = []
    for interval in intervals:
        lo = interval.lo
        # First candidate cell at or after the interval start
        i = bisect.bisect_left(xs, interval.lo)
        while i < len(xs) and xs[i] <= interval.hi:
            x = xs[i]
            if x > lo:
                result.append(CoverageInterval(lo=lo, hi=x - 1))
            lo = x + 1
            i += 1
        if lo <= interval.hi:
            result.append(CoverageInterval(lo=lo, hi=interval.hi))

    return tuple(result)


def total_length(intervals: Iterable[CoverageInterval]) -> int:
    """Sum of interval lengths (cell count for disjoint intervals)."""
    return sum(interval.length for interval in intervals)


def row_coverage(
    sensors: Iterable[Sensor], row: int, known_beacons_on_row: Sequence[int] = ()
) -> tuple[CoverageInterval, ...]:
    """Ruled-out, non-beacon x-positions on ``row``.

    Steps:
        1. Each sensor reaching the row contributes [x - hw, x + hw] where
           hw = radius - |sensor.y - row|. A sensor grazing the row
           (hw == 0) contributes exactly one cell.
        2. Candidates are sorted and merged in one sweep.
        3. Known beacon cells on this row are cut out, since a known beacon
           is not a beacon-free cell.

    Args:
        sensors: Sensors to consider
        row: Row (y coordinate) to query
        known_beacons_on_row: Sorted x-coordinates of beacons on this row

    Returns:
        Disjoint, ascending intervals; empty if no sensor reaches the row
    """
    candidates = [
        span for span in (sensor.row_span(row) for sensor in sensors) if span is not None
    ]
    merged = merge_intervals(candidates)
    coverage = subtract_points(merged, known_beacons_on_row)

    logger.debug(
        "Row %d: %d sensor spans merged into %d intervals (%d after beacon removal)",
        row,
        len(candidates),
        len(merged),
        len(coverage),
    )
    return coverage
