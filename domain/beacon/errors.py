"""Beacon Bounded Context - Error Hierarchy.

Custom exceptions for beacon location operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.beacon.value_objects import Point


class BeaconError(Exception):
    """Base error for beacon operations."""


class MalformedInputError(BeaconError):
    """A sensor report record could not be parsed.

    Raised only by infrastructure adapters; the domain never sees raw text.

    Attributes:
        reason: What is wrong with the input
        line_number: 1-based line number of the offending record, if any
        line: The offending record text (stripped), if any
    """

    def __init__(
        self, reason: str, line_number: int | None = None, line: str | None = None
    ) -> None:
        self.reason = reason
        self.line_number = line_number
        self.line = line
        if line_number is None:
            message = reason
        else:
            message = f"Line {line_number}: {reason}: {line!r}"
        super().__init__(message)


class NoGapFoundError(BeaconError):
    """Search region contains no cell outside every sensor's coverage.

    Attributes:
        lower: Lower corner of the searched region
        upper: Upper corner of the searched region
    """

    def __init__(self, lower: "Point", upper: "Point") -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"No uncovered cell in region [({lower.x}, {lower.y}) .. ({upper.x}, {upper.y})]"
        )


class GridTooLargeError(BeaconError):
    """Requested rendering exceeds the allowed cell budget."""
