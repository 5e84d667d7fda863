"""Text rendering of a World.

Rasterizes a rectangular window of the sensor grid into a numpy character
array and joins it into printable lines:

    S  sensor
    B  known beacon
    #  ruled out (no beacon can be here)
    .  unknown

Each line is prefixed with its right-aligned row number. Only meant for
small windows such as the example scenario; the cell budget guards
against accidentally rendering the full puzzle extent.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from domain.beacon.errors import GridTooLargeError
from domain.beacon.value_objects import Quadrant
from domain.beacon.world import World

logger = logging.getLogger(__name__)

DEFAULT_MAX_CELLS = 250_000  # 500 x 500

SENSOR = "S"
BEACON = "B"
RULED_OUT = "#"
UNKNOWN = "."


def rasterize(
    world: World, region: Quadrant, max_cells: int = DEFAULT_MAX_CELLS
) -> NDArray[np.str_]:
    """Rasterize ``region`` into a (height, width) array of glyphs.

    Row i of the array is grid row ``region.min.y + i``; column j is grid
    column ``region.min.x + j``.

    Raises:
        GridTooLargeError: If the region has more than ``max_cells`` cells
    """
    if region.area > max_cells:
        raise GridTooLargeError(
            f"Region {region.width}x{region.height} exceeds budget of {max_cells} cells"
        )

    canvas = np.full((region.height, region.width), UNKNOWN, dtype="<U1")
    x0, x1 = region.min.x, region.max.x

    for i, row in enumerate(range(region.min.y, region.max.y + 1)):
        for interval in world.row_coverage(row):
            lo = max(interval.lo, x0)
            hi = min(interval.hi, x1)
            if lo <= hi:
                canvas[i, lo - x0 : hi - x0 + 1] = RULED_OUT

    for sensor in world.sensors:
        for point, glyph in ((sensor.beacon, BEACON), (sensor.position, SENSOR)):
            if region.contains(point):
                canvas[point.y - region.min.y, point.x - x0] = glyph

    return canvas


def render_grid(
    world: World, region: Quadrant | None = None, max_cells: int = DEFAULT_MAX_CELLS
) -> str:
    """Render ``region`` (default: the world's extent) as text.

    Returns an empty string for a world without sensors and no region.
    """
    if region is None:
        region = world.extent()
        if region is None:
            return ""

    canvas = rasterize(world, region, max_cells=max_cells)
    label_width = max(len(str(region.min.y)), len(str(region.max.y)))

    lines = [
        f"{row:>{label_width}} " + "".join(cells)
        for row, cells in zip(range(region.min.y, region.max.y + 1), canvas)
    ]
    logger.debug("Rendered %dx%d grid", region.width, region.height)
    return "\n".join(lines)
