"""Text report adapter for SensorRepository.

Parses sensor reports of the form::

    Sensor at x=2, y=18: closest beacon is at x=-2, y=15

one record per line, into domain Sensor Value Objects.

Lifecycle:
1) Validate the path (exists, regular file, not a symlink, within budget)
2) Read the whole report as UTF-8 text
3) Parse every non-blank line; the first bad line aborts the load
4) Return an immutable tuple of Sensors
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import ValidationError

from domain.beacon.errors import MalformedInputError
from domain.beacon.value_objects import Point, Sensor

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

# Whole-line match; coordinates are signed integers
_RECORD_RE = re.compile(
    r"^Sensor at x=(?P<sx>-?\d+),\s*y=(?P<sy>-?\d+):\s*"
    r"closest beacon is at x=(?P<bx>-?\d+),\s*y=(?P<by>-?\d+)$"
)


def parse_sensor(line: str, line_number: int = 1) -> Sensor:
    """Parse a single sensor record.

    Args:
        line: Record text; surrounding whitespace is ignored
        line_number: 1-based position in the report, for error messages

    Raises:
        MalformedInputError: If the record does not match the expected shape
    """
    text = line.strip()
    match = _RECORD_RE.match(text)
    if match is None:
        raise MalformedInputError("unrecognized sensor record", line_number, text)

    try:
        return Sensor(
            position=Point(x=int(match["sx"]), y=int(match["sy"])),
            beacon=Point(x=int(match["bx"]), y=int(match["by"])),
        )
    except ValidationError as e:  # pragma: no cover - regex admits only valid ints
        raise MalformedInputError(str(e), line_number, text) from e


def parse_report(text: str) -> tuple[Sensor, ...]:
    """Parse a full report; blank lines are skipped.

    Raises:
        MalformedInputError: On the first malformed line, or if the report
            holds no sensor records at all
    """
    sensors: list[Sensor] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            logger.debug("Skipping blank line %d", line_number)
            continue
        sensors.append(parse_sensor(line, line_number))

    if not sensors:
        raise MalformedInputError("report contains no sensor records")
    return tuple(sensors)


class TextReportAdapter:
    """Infrastructure adapter for loading sensors from a text report.

    Parameters
    ----------
    max_bytes: int | None
        Optional size limit for the report file. Larger files raise
        MalformedInputError before anything is read.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes

    def load_sensors(self, file_path: Path | str) -> tuple[Sensor, ...]:
        """Load every sensor record from ``file_path``."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(str(path))

        if path.is_symlink():
            raise MalformedInputError("Symlinks are not permitted")
        if not path.is_file():
            raise MalformedInputError(f"Not a regular file: {path.name}")

        size = path.stat().st_size
        if self.max_bytes is not None and size > self.max_bytes:
            raise MalformedInputError(
                f"Report size {size}B exceeds limit {self.max_bytes}B"
            )

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Report is not valid UTF-8: {path.name}") from e

        sensors = parse_report(text)
        # Log only the filename, not the full path
        logger.info("Report %s: loaded %d sensors", path.name, len(sensors))
        return sensors
